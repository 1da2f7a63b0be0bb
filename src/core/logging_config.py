"""Logging setup shared by the server and the CLI."""

import logging

from core.constants import DEFAULT_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure the root logger with the application format."""
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
