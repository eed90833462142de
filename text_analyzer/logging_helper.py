"""
logging_helper.py - one-call stdout logging for the app.

Library modules only call ``logging.getLogger(__name__)``; the entry point
calls ``setup_logging()`` once to decide where records go.

Usage:
    from text_analyzer.logging_helper import setup_logging
    setup_logging(logging.DEBUG)
"""

import logging
import sys

DEF_FMT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEF_DATE = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "text_analyzer"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stdout handler to the package logger (idempotent)."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    if logger.handlers:  # already initialised
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(DEF_FMT, DEF_DATE))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
