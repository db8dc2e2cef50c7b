"""
Structured logging setup for the skill exchange service.

The package never configures logging on import or when building
repositories. The host application calls ``configure_logging`` once at
startup, before creating repositories; until then structlog uses its
defaults.
"""

import logging
import sys
from typing import Optional

import structlog

from app.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure stdlib logging and structlog with JSON output.

    Args:
        level: Log level name (defaults to settings.LOG_LEVEL)
    """
    level = level or settings.LOG_LEVEL

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level),
    )

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
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
