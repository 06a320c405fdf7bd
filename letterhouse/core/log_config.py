import sys
from typing import Optional

from loguru import logger

from .config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None):
    """Replace loguru's default handler with the configured sinks."""
    settings = settings or get_settings()

    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=settings.log_level.upper())
    if settings.log_file:
        logger.add(
            settings.log_file,
            rotation="10 MB",
            retention=5,
            level="DEBUG",
        )  # Add file handler
