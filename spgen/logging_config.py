"""
Logging configuration for the command-line tool.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Set up the spgen logger to write to stderr.

    stdout is reserved for the password itself, so nothing here ever
    touches it. Returns the configured logger.
    """
    logger = logging.getLogger("spgen")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger
