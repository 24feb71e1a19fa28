"""Logging configuration for image-triage."""

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "image_triage"


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Set up the package logger and return the logger for ``name``.

    Handlers live on the ``image_triage`` package logger only; module loggers
    inherit its level, so switching the package logger to DEBUG (``--verbose``)
    affects every module.

    Args:
        name: Logger name, usually the calling module's ``__name__``
        level: Logging level applied when the package logger is (re)configured
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    if name == PACKAGE_LOGGER or not package_logger.handlers:
        package_logger.setLevel(level)

        # Remove existing handlers to avoid duplicates
        package_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(
            logging.Formatter(fmt="%(levelname)s: %(message)s")
        )
        package_logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)  # More verbose in file
            file_handler.setFormatter(
                logging.Formatter(
                    fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            package_logger.addHandler(file_handler)

    return logging.getLogger(name)
