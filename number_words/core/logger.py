"""
Unified logging configuration for number_words.

Provides global logging setup and logger accessors. Console output goes to
stderr so that log records never interleave with converted numbers on stdout.
"""

import logging
import os
import sys
from typing import Optional


LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

LOGGER_NAME = "number_words"

_configured = False
_log_level = None


def setup_logging(
    level: str = None,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    console_output: bool = True,
    force: bool = False,
):
    """
    Configure the package logger.

    Args:
        level: one of DEBUG, INFO, WARNING, ERROR, CRITICAL.
               When None, read from NUMBER_WORDS_LOG_LEVEL (default WARNING).
        log_file: optional path; records are also written there
        format_string: logging format string
        console_output: attach a stderr handler
        force: reconfigure even if logging was already set up
    """
    global _configured, _log_level

    if _configured and not force:
        return

    if level is None:
        level = os.environ.get("NUMBER_WORDS_LOG_LEVEL", "WARNING")

    log_level = LOG_LEVELS.get(level.upper(), logging.WARNING)
    _log_level = log_level

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(format_string)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger, configuring logging with defaults on first use.

    Args:
        name: logger name, usually __name__

    Returns:
        logging.Logger: the logger instance
    """
    if not _configured:
        setup_logging()

    return logging.getLogger(name)


def set_module_log_level(module_name: str, level: str):
    """Set the log level of a single module's logger."""
    logger = logging.getLogger(module_name)
    log_level = LOG_LEVELS.get(level.upper(), logging.WARNING)
    logger.setLevel(log_level)


def disable_module_logging(module_name: str):
    """Silence a single module's logger."""
    logger = logging.getLogger(module_name)
    logger.setLevel(logging.CRITICAL + 1)


def auto_setup(force: bool = False):
    """
    Configure logging from environment variables.

    Environment variables:
        NUMBER_WORDS_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
        NUMBER_WORDS_LOG_FILE: log file path
        NUMBER_WORDS_LOG_FORMAT: default or simple
    """
    log_level = os.environ.get("NUMBER_WORDS_LOG_LEVEL", "WARNING")
    log_file = os.environ.get("NUMBER_WORDS_LOG_FILE", None)
    log_format = os.environ.get("NUMBER_WORDS_LOG_FORMAT", "default")

    format_string = SIMPLE_FORMAT if log_format == "simple" else DEFAULT_FORMAT

    setup_logging(level=log_level, log_file=log_file, format_string=format_string, force=force)
