"""Unit tests for splitter service configuration and logging setup."""

import pytest
import structlog

from services.splitter_service.src.config import Config, ConfigSingleton, LoggingConfig, ParserConfig, get_config
from services.splitter_service.src.logging_config import setup_logging

ENV_VARS = ("CUE_PARSER_INCLUDE_SOURCE_LINE", "CUE_PARSER_LOG_SUMMARY", "LOG_LEVEL", "LOG_JSON")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear configuration variables and the config singleton."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    ConfigSingleton.reset()
    yield
    ConfigSingleton.reset()


class TestConfig:
    """Test Config class."""

    def test_defaults(self):
        """Test default values without environment overrides."""
        config = Config.from_env()

        assert config.parser == ParserConfig()
        assert config.parser.include_source_line is True
        assert config.logging.log_level == "INFO"
        assert config.logging.json_logs is True

    def test_from_env(self, monkeypatch):
        """Test environment overrides."""
        monkeypatch.setenv("CUE_PARSER_INCLUDE_SOURCE_LINE", "false")
        monkeypatch.setenv("CUE_PARSER_LOG_SUMMARY", "0")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_JSON", "no")

        config = Config.from_env()

        assert config.parser.include_source_line is False
        assert config.parser.log_parse_summary is False
        assert config.logging.log_level == "DEBUG"
        assert config.logging.json_logs is False

    def test_flag_values(self, monkeypatch):
        """Test accepted truthy spellings."""
        monkeypatch.setenv("CUE_PARSER_LOG_SUMMARY", "YES")

        assert Config.from_env().parser.log_parse_summary is True

    def test_singleton(self, monkeypatch):
        """Test get_config returns the same wrapped instance until reset."""
        first = get_config()
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        assert get_config() is first
        assert first.logging.log_level == "INFO"

        ConfigSingleton.reset()
        assert get_config().logging.log_level == "WARNING"


class TestSetupLogging:
    """Test setup_logging function."""

    def teardown_method(self):
        """Restore structlog defaults."""
        structlog.reset_defaults()

    @pytest.mark.parametrize("json_logs", [True, False])
    def test_configures_structlog(self, json_logs):
        """Test structlog is configured with the chosen renderer."""
        setup_logging(LoggingConfig(log_level="DEBUG", json_logs=json_logs))

        assert structlog.is_configured()
        renderer = structlog.get_config()["processors"][-1]
        expected = structlog.processors.JSONRenderer if json_logs else structlog.dev.ConsoleRenderer
        assert isinstance(renderer, expected)

    def test_reads_config_from_env(self, monkeypatch):
        """Test settings come from the environment when not given."""
        monkeypatch.setenv("LOG_JSON", "false")

        setup_logging()

        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
