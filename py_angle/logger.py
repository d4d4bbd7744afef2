"""Logging configuration and utilities for py_angle library.

The library routes all of its messages through a single logger named
``py_angle``. Console logging is enabled by default at INFO level; file
logging can be switched on for debugging.

Examples:
    ```python
    from py_angle.logger import logger, enable_file_logging, disable_file_logging

    logger.info("Loading angles")
    enable_file_logging("angles_debug.log")
    # ... conversions ...
    disable_file_logging()
    ```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
)

formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)
console_handler.setLevel(logging.DEBUG)  # Lowest level for console

logger: logging.Logger = logging.getLogger('py_angle')
logger.addHandler(console_handler)
logger.setLevel(logging.INFO)

# File handler (optional, added dynamically)
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "debug.log") -> None:
    """Enable logging to a file with DEBUG level output.

    Replaces any file handler enabled before. The file is opened in append mode.

    Args:
        filename: Name of the log file. Relative paths resolve against the current working directory.
    """
    global file_handler
    if file_handler is not None:
        disable_file_logging()

    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(logging.DEBUG)  # Log everything to the file
    file_formatter = logging.Formatter("%(asctime)s:%(levelname)s:%(message)s")
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)


def disable_file_logging() -> None:
    """Remove the file handler and close the file. Safe to call when file logging is off."""
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None
