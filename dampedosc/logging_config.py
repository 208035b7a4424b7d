"""
Logging configuration for the 'dampedosc' namespace.
"""
import logging
import sys
from typing import Optional

from dampedosc.config import LOG_LEVEL


def setup_logging(level: int = LOG_LEVEL, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler (and optionally a file handler) to the package logger.

    Args:
        level: logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: optional path of a log file (overwritten).

    Returns:
        The 'dampedosc' logger.
    """
    logger = logging.getLogger("dampedosc")
    logger.setLevel(level)

    # Calling twice must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
