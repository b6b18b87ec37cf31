"""Logging utilities for CLI."""

import logging
import os
import sys

LOG_LEVEL_ENV_VAR = "CROSSPATH_LOG_LEVEL"


def setup_logging(log_level: str | None = None, log_file: str | None = None) -> None:
    """
    Setup logging with configurable level.

    Priority: argument > CROSSPATH_LOG_LEVEL env var > default (WARNING)

    Args:
        log_level: Console log level name
        log_file: Optional file that receives everything at DEBUG level
    """
    if log_level is None:
        log_level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING")

    level = getattr(logging, log_level.upper(), logging.WARNING)

    # Console handler - configurable level
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)

    if log_file:
        # File handler - always DEBUG level for file
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(file_handler)
        root_logger.setLevel(logging.DEBUG)

    log = logging.getLogger("crosspath")
    log.setLevel(logging.DEBUG if log_file else level)
    log.propagate = True
