"""
Core utilities for the building identifier codec.

Provides configuration management, logging and format constants.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
]
