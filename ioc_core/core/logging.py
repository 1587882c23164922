"""
Logging Configuration

Structured logging setup for applications using the container. The library
itself only emits events through ``structlog.get_logger``; call
``configure_logging`` once at application startup to decide how they render.
"""

import logging
import sys
from typing import List, Optional

import structlog

from ioc_core.core.config import Settings, get_settings


def build_processors(log_format: str) -> List[structlog.types.Processor]:
    """Processor chain ending in a JSON or console renderer."""
    processors: List[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    return processors


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Settings to use, defaults to the environment settings
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=build_processors(settings.log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
