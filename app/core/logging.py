"""Logging configuration module."""

import logging
from typing import cast

import structlog
from structlog import contextvars, dev, processors, stdlib
from structlog.stdlib import BoundLogger
from structlog.types import Processor

LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

# Raised to WARNING at any configured level
QUIET_LOGGERS = ("geopy", "urllib3", "sqlalchemy.engine")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def _shared_processors() -> list[Processor]:
    return [
        contextvars.merge_contextvars,
        stdlib.add_logger_name,
        stdlib.add_log_level,
        stdlib.PositionalArgumentsFormatter(),
        processors.TimeStamper(fmt=TIMESTAMP_FORMAT),
        processors.dict_tracebacks,
    ]


def configure_logging(
    testing: bool = False, level: str = "info", json_logs: bool = True
) -> None:
    """Configure structured logging for the application.

    structlog events and plain stdlib records (geopy, SQLAlchemy, uvicorn and
    the modules that log through ``logging.getLogger(__name__)``) go through
    one handler, so both come out in the same format.

    Args:
        testing: Whether the application is running in test mode
        level: Name of the minimum level to emit
        json_logs: Render production logs as JSON lines
    """
    log_level = LOG_LEVELS.get(level.lower(), logging.INFO)
    render_json = json_logs and not testing
    shared = _shared_processors()

    structlog.configure(
        processors=[
            stdlib.filter_by_level,
            *shared,
            processors.format_exc_info,
            processors.JSONRenderer() if render_json else processors.KeyValueRenderer(),
        ],
        context_class=dict,
        logger_factory=stdlib.LoggerFactory(),
        wrapper_class=stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(
        stdlib.ProcessorFormatter(
            processor=processors.JSONRenderer() if render_json else dev.ConsoleRenderer(),
            foreign_pre_chain=shared,
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [handler]

    app_logger = logging.getLogger("app")
    app_logger.setLevel(log_level)
    app_logger.handlers = [handler]
    app_logger.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def get_logger() -> BoundLogger:
    """Get a configured logger instance.

    Returns:
        A structured logger instance.
    """
    return cast(BoundLogger, structlog.get_logger())
