"""
Tests for the Config object and configuration models.
"""

import pytest

from hearth.infrastructure.config.config import Config
from hearth.infrastructure.config.models import ErrorHandlingConfig, LoggingConfig, default_config


class TestConfig:
    """Test cases for dotted configuration access."""

    @pytest.fixture
    def config(self) -> Config:
        return Config({
            "debug": True,
            "logging": {"level": "DEBUG", "file": {"enabled": False}},
        })

    def test_has(self, config: Config) -> None:
        assert config.has("debug")
        assert config.has("logging.level")
        assert config.has("logging.file.enabled")
        assert not config.has("logging.missing")
        assert not config.has("debug.nested")

    def test_get(self, config: Config) -> None:
        assert config.get("debug") is True
        assert config.get("logging.file.enabled") is False
        assert config.get("logging") == {"level": "DEBUG", "file": {"enabled": False}}

    def test_get_default(self, config: Config) -> None:
        assert config.get("missing", "fallback") == "fallback"
        assert config.get("missing", None) is None

    def test_get_missing_raises(self, config: Config) -> None:
        with pytest.raises(KeyError):
            config.get("missing")

    def test_set_creates_groups(self, config: Config) -> None:
        config.set("errors.install_handler", False)

        assert config.get("errors.install_handler") is False

    def test_data_is_copied(self) -> None:
        data = {"group": {"key": 1}}
        config = Config(data)

        config.set("group.key", 2)

        assert data["group"]["key"] == 1
        assert config.to_dict() == {"group": {"key": 2}}

    def test_mapping_protocol(self, config: Config) -> None:
        assert "logging.level" in config
        assert config["logging.level"] == "DEBUG"
        assert sorted(config) == ["debug", "logging"]


class TestConfigModels:
    """Test cases for typed configuration sections."""

    def test_logging_defaults(self) -> None:
        config = LoggingConfig()

        assert config.level == "INFO"
        assert config.console_enabled is True
        assert config.file_enabled is False

    def test_logging_from_dict_ignores_unknown(self) -> None:
        config = LoggingConfig.from_dict({"level": "debug", "colour": "blue"})

        assert config.level == "DEBUG"

    def test_logging_invalid_level(self) -> None:
        with pytest.raises(ValueError):
            LoggingConfig(level="LOUD")

    def test_logging_numeric_level(self) -> None:
        with pytest.raises(ValueError, match="logging.level"):
            LoggingConfig.from_dict({"level": 10})

    def test_error_handling_from_none(self) -> None:
        config = ErrorHandlingConfig.from_dict(None)

        assert config.install_handler is True
        assert config.chain_previous is True

    def test_default_config(self) -> None:
        data = default_config()

        assert data["environment"] == "production"
        assert data["logging"]["level"] == "INFO"
        assert data["errors"]["install_handler"] is True
        assert data["runtime_settings"] == {}
