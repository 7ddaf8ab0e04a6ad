"""
Logging Configuration
=====================

Sets the stdlib log level from settings and configures structlog to
render through the stdlib logging machinery as JSON.
"""

import logging

import structlog

from agent_ledger.core.config import settings


def configure_logging(level: str | None = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Level name override; defaults to settings.LOG_LEVEL
    """
    level_name = (level or settings.LOG_LEVEL).upper()

    logging.basicConfig(format="%(message)s")
    logging.getLogger().setLevel(level_name)

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
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
