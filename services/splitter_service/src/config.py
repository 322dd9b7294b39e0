"""Configuration for the splitter service's CUE handling."""

import os
from dataclasses import dataclass, field
from typing import Any

from dotenv import load_dotenv


def _env_flag(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.lower() in ("true", "1", "yes")


@dataclass
class ParserConfig:
    """CUE parser configuration."""

    # Append the offending source line to parse error messages
    include_source_line: bool = True
    log_parse_summary: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = "INFO"
    json_logs: bool = True


@dataclass
class Config:
    """Main configuration class."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables.

        Recognized variables:
        - CUE_PARSER_INCLUDE_SOURCE_LINE=false
        - CUE_PARSER_LOG_SUMMARY=false
        - LOG_LEVEL=DEBUG
        - LOG_JSON=false
        """
        load_dotenv()

        return cls(
            parser=ParserConfig(
                include_source_line=_env_flag("CUE_PARSER_INCLUDE_SOURCE_LINE", True),
                log_parse_summary=_env_flag("CUE_PARSER_LOG_SUMMARY", True),
            ),
            logging=LoggingConfig(
                log_level=os.getenv("LOG_LEVEL", "INFO"),
                json_logs=_env_flag("LOG_JSON", True),
            ),
        )


class ConfigSingleton:
    """Singleton wrapper for Config."""

    _instance: Config | None = None
    _singleton_instance: "ConfigSingleton | None" = None

    def __new__(cls) -> "ConfigSingleton":
        """Get the singleton Config instance."""
        if cls._singleton_instance is None:
            cls._singleton_instance = super().__new__(cls)
            cls._instance = Config.from_env()
        return cls._singleton_instance

    def __getattr__(self, name: str) -> Any:
        """Forward attribute access to the wrapped config instance."""
        if self._instance is None:
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")
        return getattr(self._instance, name)

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (mainly for testing)."""
        cls._instance = None
        cls._singleton_instance = None


def get_config() -> "ConfigSingleton":
    """Get the singleton configuration instance."""
    return ConfigSingleton()
