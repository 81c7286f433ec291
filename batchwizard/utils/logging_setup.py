"""Logging configuration for the command line entry points."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(log_level: str = "WARNING") -> None:
    """Configure root logging once per process.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    if getattr(configure_logging, "has_run", False):
        logging.root.setLevel(numeric_level)
        return

    # Clear existing handlers
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.root.addHandler(handler)
    logging.root.setLevel(numeric_level)

    configure_logging.has_run = True
