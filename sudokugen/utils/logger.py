"""Logging helpers for the puzzle engine."""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure root logging with a single stream handler.

    Library modules only emit records; installing handlers is left to
    the application (the CLI calls this from ``--log-level``).
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger under ``sudokugen``."""
    return logging.getLogger(name or "sudokugen")
