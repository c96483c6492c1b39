"""
Structured logging configuration using structlog.

Configure once at startup, then get module loggers:

    configure_logging(json_logs=settings.JSON_LOGS, log_level=settings.LOG_LEVEL)
    logger = get_logger(__name__)
    logger.info("match_created", match_id=str(match.id), score=82)
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.types import Processor


def configure_logging(json_logs: bool = False, log_level: str = "INFO", cache_loggers: bool = True) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        json_logs: JSON lines when True (production), coloured console otherwise.
        log_level: Minimum level name (DEBUG, INFO, WARNING, ERROR).
        cache_loggers: Freeze each logger on first use. Tests turn this off so
            structlog.testing.capture_logs sees module-level loggers.
    """
    processors: list[Processor] = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        ))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
