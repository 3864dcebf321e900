"""Logging setup for the gqlnaming CLI (rich console handler)."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from gqlnaming.config import LOG_LEVEL_ENV


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the `gqlnaming` logger to write to stderr through rich.

    *level* falls back to $GQLNAMING_LOG_LEVEL, then WARNING.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("gqlnaming")
    logger.setLevel(log_level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
