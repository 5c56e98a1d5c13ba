"""Logging setup for the Books API."""

import logging

from core.constants import LOG_FORMAT, LOG_DATE_FORMAT


def configure_logging(log_level: str) -> None:
    """Configure root logging once for the whole process."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.DEBUG),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        force=True,
    )
