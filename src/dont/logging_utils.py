"""Logging utilities for dont."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(log_file: str | Path | None = None) -> None:
    """Set up logging configuration.

    The user's terminal belongs to the command being run, so records only
    ever go to `log_file`. Without one, logging is disabled.
    """
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_path), encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)
