"""Streaming catalog: category domain core with its application and storage layers."""

from streaming_catalog.config import configure_logging, get_settings


def setup() -> None:
    """Configure logging from the current settings."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
