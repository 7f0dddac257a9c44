import logging
from logging import Logger

from skilltracker.core.config import settings


def setup_logging() -> Logger:
    """Configure the root logger for the application."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("skilltracker")
