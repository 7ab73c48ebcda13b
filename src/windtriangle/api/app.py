"""FastAPI app factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from windtriangle.api.solve import router as solve_router
from windtriangle.config import load_defaults, resolve_config_dir

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    defaults = load_defaults(app.state.config_dir)
    logger.info(
        "Calculator defaults: GS %g kt, HDG %g, wind %g/%g",
        defaults.ground_speed_kt,
        defaults.true_heading_deg,
        defaults.wind_direction_deg,
        defaults.wind_speed_kt,
    )
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    load_dotenv()

    app = FastAPI(
        title="Wind Triangle API",
        description="True airspeed and wind correction angle calculator",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.config_dir = resolve_config_dir()

    app.include_router(solve_router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
