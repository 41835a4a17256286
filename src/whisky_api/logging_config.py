"""Logging setup for the whisky API."""

import logging
import sys

from whisky_api.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for the whole application.

    Called once from the app lifespan, before anything else logs.

    Args:
        level: Log level name. Defaults to settings.log_level.
    """
    level_name = (level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
