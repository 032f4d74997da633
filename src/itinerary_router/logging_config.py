"""
Logging setup for the Itinerary Router.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger to write to stdout.

    Safe to call more than once; an existing stdout handler installed
    by a previous call is reused.

    Args:
        level: Log level name (e.g. 'INFO', 'DEBUG').
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        if getattr(handler, "_itinerary_router", False):
            handler.setLevel(level)
            return

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    console_handler._itinerary_router = True
    root_logger.addHandler(console_handler)
