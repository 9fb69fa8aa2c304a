"""Structured logging helpers."""

import logging
import sys
from typing import Any, List, Optional

import structlog


def configure_logging(log_level: str = "INFO", json_format: bool = False) -> None:
    """Configure structlog on top of the standard library logging module.

    The library never calls this itself; applications (and ``demo.py``) do.

    Args:
        log_level: Log level name (DEBUG, INFO, WARNING, ERROR)
        json_format: Render JSON lines instead of the console renderer
    """
    processors: List[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Structlog logger backed by a stdlib logger, so stdlib levels filter it."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
