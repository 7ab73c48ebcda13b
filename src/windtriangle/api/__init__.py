"""FastAPI application serving the calculator."""
