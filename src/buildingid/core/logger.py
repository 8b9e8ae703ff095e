"""
Logging for the buildingid command line.

The codec modules only emit DEBUG records through module loggers under
"buildingid"; setup_logger attaches the handlers that make them visible.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from datetime import datetime

from . import constants


def setup_logger(
    name: str = "buildingid",
    log_file: Optional[str] = None,
    log_level: str = constants.DEFAULT_LOG_LEVEL
) -> logging.Logger:
    """
    Attach a stderr handler for warnings and a file handler for the full trace.

    Args:
        name: Logger name, "buildingid" covers every codec module
        log_file: Log file path. Falls back to BUILDINGID_LOG_FILE, then logs/buildingid.log
        log_level: Level name applied to the logger itself

    Returns:
        The configured logger
    """
    if log_file is None:
        log_file = os.getenv("BUILDINGID_LOG_FILE", constants.DEFAULT_LOG_FILE)

    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Repeated CLI invocations in one process reconfigure the same logger
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    stderr_formatter = logging.Formatter(fmt="%(levelname)s - %(message)s")

    # stdout carries the encoded/decoded result
    stderr_handler = logging.StreamHandler()
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(stderr_formatter)
    logger.addHandler(stderr_handler)

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    logger.propagate = False

    return logger


class LoggerContext:
    """Time one codec operation and record how it ended."""

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.start_time = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.debug(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Log the outcome; exceptions always propagate."""
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            self.logger.error(f"Failed {self.operation} after {duration:.4f}s: {exc_val}")
        else:
            self.logger.debug(f"Completed {self.operation} in {duration:.4f}s")

        return False
