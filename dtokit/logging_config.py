"""Logging setup for applications embedding dtokit."""

import logging

from dtokit.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging with the shared format.

    Args:
        level: Level name to use. Defaults to ``settings.log_level``.
    """
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)
    logging.getLogger(__name__).debug(f"Logging configured at {logging.getLevelName(logging.getLogger().level)}")
