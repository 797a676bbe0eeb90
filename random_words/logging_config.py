"""Logging setup for the rwords command line tool"""

import logging
import sys

LOGGER_NAME = "random_words"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONCISE_FORMAT = "%(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _formatter(detailed: bool, fmt: str | None = None) -> logging.Formatter:
    if detailed:
        return logging.Formatter(fmt=fmt or DETAILED_FORMAT, datefmt=DATE_FORMAT)
    return logging.Formatter(fmt=CONCISE_FORMAT)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    file_format: str | None = None,
) -> logging.Logger:
    """Configure the package logger

    Console records go to stderr so they never mix with drill output on
    stdout. DEBUG switches the console to the detailed format; the log file
    always uses it.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives every record as well
        file_format: Format string for the log file

    Returns:
        The configured package logger
    """
    level_name = level.upper()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level_name))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_formatter(level_name == "DEBUG"))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(_formatter(True, file_format))
        logger.addHandler(file_handler)

    logger.debug(f"Logging configured at {level_name}")
    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)
