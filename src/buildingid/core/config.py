"""
Configuration module for the building identifier codec.

Loads configuration from an optional JSON file and environment variables.
"""

import json
import logging
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants


class Config:
    """Configuration manager for the codec and its command line."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses BUILDINGID_CONFIG
                        env var or 'buildingid.json' when that file exists
        """
        self.config_file = config_file or os.getenv("BUILDINGID_CONFIG")
        self.config: Dict[str, Any] = self._defaults()
        self._load_config()
        self._override_from_env()
        self._validate_config()

    @staticmethod
    def _defaults() -> Dict[str, Any]:
        return {
            "codec": {
                "code_length": constants.DEFAULT_CODE_LENGTH,
            },
            "logging": {
                "level": constants.DEFAULT_LOG_LEVEL,
                "file": constants.DEFAULT_LOG_FILE,
            },
        }

    def _load_config(self) -> None:
        """Load configuration from JSON file, merged over the defaults."""
        if self.config_file is None:
            if not Path(constants.DEFAULT_CONFIG_FILE).exists():
                return
            self.config_file = constants.DEFAULT_CONFIG_FILE

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file must contain a JSON object: {self.config_file}")

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(values)
            else:
                self.config[section] = values

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        code_length = os.getenv("BUILDINGID_CODE_LENGTH")
        if code_length:
            try:
                self.config["codec"]["code_length"] = int(code_length)
            except ValueError:
                raise ValueError(f"BUILDINGID_CODE_LENGTH must be an integer, got {code_length!r}")

        if os.getenv("BUILDINGID_LOG_LEVEL"):
            self.config["logging"]["level"] = os.getenv("BUILDINGID_LOG_LEVEL")

        if os.getenv("BUILDINGID_LOG_FILE"):
            self.config["logging"]["file"] = os.getenv("BUILDINGID_LOG_FILE")

    def _validate_config(self) -> None:
        """Validate code length and log level."""
        code_length = self.get("codec.code_length")
        if isinstance(code_length, bool) or not isinstance(code_length, int):
            raise ValueError(f"codec.code_length must be an integer, got {code_length!r}")

        if not (constants.OLC_MIN_CODE_LENGTH <= code_length <= constants.OLC_MAX_CODE_LENGTH):
            raise ValueError(
                f"codec.code_length must be between {constants.OLC_MIN_CODE_LENGTH} "
                f"and {constants.OLC_MAX_CODE_LENGTH}, got {code_length}"
            )

        if code_length < constants.OLC_PAIR_CODE_LENGTH and code_length % 2 == 1:
            raise ValueError(
                f"codec.code_length must be even below {constants.OLC_PAIR_CODE_LENGTH}, "
                f"got {code_length}"
            )

        level = self.get("logging.level")
        if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
            raise ValueError(f"Unknown logging.level: {level!r}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'codec.code_length')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def code_length(self) -> int:
        """Get the default OLC code length for encoding."""
        return self.get("codec.code_length", constants.DEFAULT_CODE_LENGTH)

    @property
    def log_level(self) -> str:
        """Get logging level name."""
        return self.get("logging.level", constants.DEFAULT_LOG_LEVEL).upper()

    @property
    def log_file(self) -> str:
        """Get log file path."""
        return self.get("logging.file", constants.DEFAULT_LOG_FILE)

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, code_length={self.code_length})"
