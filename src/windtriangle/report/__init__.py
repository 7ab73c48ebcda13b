"""Text and HTML presentation of wind triangle solutions."""
