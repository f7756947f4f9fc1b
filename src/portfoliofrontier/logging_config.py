"""
Logging Configuration
Sets up the package logger for the frontier explorer.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "portfoliofrontier"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Third-party loggers that are only interesting when something breaks
_QUIET_LOGGERS = ("pyqtgraph",)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    quiet_libraries: bool = True,
) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the package logger.

    Args:
        level: Logging level for the package (e.g. logging.DEBUG to see every
            recompute and every parse fallback).
        log_file: Optional path; the file is truncated on start.
        quiet_libraries: Raise plotting library loggers to WARNING.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Re-running main() in the same interpreter must not double the output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if quiet_libraries:
        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("Logging initialized at level %s.", logging.getLevelName(level))
    return logger
