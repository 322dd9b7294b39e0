"""Structured logging setup for the splitter service."""

import logging
import sys

import structlog

from .config import LoggingConfig, get_config


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog on top of the standard library logging module.

    Args:
        config: Logging settings, read from the environment if None
    """
    if config is None:
        config = get_config().logging

    renderer = structlog.processors.JSONRenderer() if config.json_logs else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, config.log_level.upper()),
        handlers=[logging.StreamHandler(sys.stdout)],
    )
