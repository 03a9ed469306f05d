"""
Logging configuration for terminal output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Configure root logger with a rich handler on stderr.

    Keeps stdout free for the score report.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # clear existing handlers to avoid duplicates on repeated calls
    root_logger.handlers.clear()

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root_logger.addHandler(handler)
