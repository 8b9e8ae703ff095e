"""
Tests for configuration loading and the logger helpers.
"""

import json
import logging

import pytest

from buildingid.core import Config, LoggerContext, constants, setup_logger


class TestConfig:
    """Test configuration defaults, file loading and environment overrides."""

    def test_defaults(self, clean_env):
        config = Config()
        assert config.config_file is None
        assert config.code_length == constants.DEFAULT_CODE_LENGTH
        assert config.log_level == "INFO"
        assert config.log_file == constants.DEFAULT_LOG_FILE

    def test_load_file(self, clean_env):
        path = clean_env / "custom.json"
        path.write_text(json.dumps({"codec": {"code_length": 11}, "extra": {"key": "value"}}))

        config = Config(str(path))
        assert config.code_length == 11
        assert config.get("extra.key") == "value"
        assert config.log_level == "INFO"

    def test_default_file_in_working_directory(self, clean_env):
        (clean_env / constants.DEFAULT_CONFIG_FILE).write_text(
            json.dumps({"logging": {"level": "debug"}})
        )
        config = Config()
        assert config.config_file == constants.DEFAULT_CONFIG_FILE
        assert config.log_level == "DEBUG"

    def test_config_file_from_env(self, clean_env, monkeypatch):
        path = clean_env / "env.json"
        path.write_text(json.dumps({"codec": {"code_length": 8}}))
        monkeypatch.setenv("BUILDINGID_CONFIG", str(path))

        assert Config().code_length == 8

    def test_missing_named_file(self, clean_env):
        with pytest.raises(FileNotFoundError):
            Config(str(clean_env / "missing.json"))

    def test_non_object_file(self, clean_env):
        path = clean_env / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ValueError):
            Config(str(path))

    def test_env_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("BUILDINGID_CODE_LENGTH", "12")
        monkeypatch.setenv("BUILDINGID_LOG_LEVEL", "warning")
        monkeypatch.setenv("BUILDINGID_LOG_FILE", "other.log")

        config = Config()
        assert config.code_length == 12
        assert config.log_level == "WARNING"
        assert config.log_file == "other.log"

    def test_env_code_length_not_integer(self, clean_env, monkeypatch):
        monkeypatch.setenv("BUILDINGID_CODE_LENGTH", "ten")
        with pytest.raises(ValueError, match="BUILDINGID_CODE_LENGTH"):
            Config()

    @pytest.mark.parametrize("code_length", [1, 7, 16, "10", True])
    def test_invalid_code_length(self, clean_env, code_length):
        path = clean_env / "bad.json"
        path.write_text(json.dumps({"codec": {"code_length": code_length}}))
        with pytest.raises(ValueError, match="code_length"):
            Config(str(path))

    def test_invalid_log_level(self, clean_env, monkeypatch):
        monkeypatch.setenv("BUILDINGID_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="logging.level"):
            Config()

    def test_get_missing_key(self, clean_env):
        config = Config()
        assert config.get("codec.missing", "fallback") == "fallback"
        assert config.get("codec.code_length.deeper") is None

    def test_repr(self, clean_env):
        assert "code_length=10" in repr(Config())


class TestLogger:
    """Test logger setup and the operation context manager."""

    def test_setup_logger_writes_file(self, clean_env):
        log_file = clean_env / "logs" / "test.log"
        logger = setup_logger(name="buildingid.test", log_file=str(log_file), log_level="debug")

        logger.debug("hello")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert "hello" in log_file.read_text(encoding="utf-8")

    def test_setup_logger_no_duplicate_handlers(self, clean_env):
        log_file = str(clean_env / "test.log")
        setup_logger(name="buildingid.dupe", log_file=log_file)
        logger = setup_logger(name="buildingid.dupe", log_file=log_file)
        assert len(logger.handlers) == 2

    def test_stderr_handler_shows_warnings_only(self, clean_env):
        log_file = str(clean_env / "levels.log")
        logger = setup_logger(name="buildingid.levels", log_file=log_file, log_level="debug")

        levels = {type(handler): handler.level for handler in logger.handlers}
        assert levels[logging.StreamHandler] == logging.WARNING
        assert levels[logging.FileHandler] == logging.DEBUG

    def test_logger_context_propagates_errors(self, caplog):
        logger = logging.getLogger("context_test")
        with caplog.at_level(logging.DEBUG, logger="context_test"):
            with pytest.raises(RuntimeError):
                with LoggerContext(logger, "failing operation"):
                    raise RuntimeError("boom")

        assert "Starting failing operation" in caplog.text
        assert "Failed failing operation" in caplog.text
