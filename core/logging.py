"""
Structured logging configuration.

Uses structlog for machine-readable, context-rich logging.
Supports both JSON (production) and human-readable (development) output.
The level and destination come from the `logging` block of the config file.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from pydantic import field_validator
from structlog.types import Processor

from core.schema import WireModel


LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class LoggingConf(WireModel):
    """
    The `logging` block of the config file.

    An empty path means standard output.
    """

    path: str = ""
    level: str = "info"

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.lower() or "info"
        if value == "warn":
            value = "warning"
        if value not in LOG_LEVELS:
            raise ValueError(
                f"unknown log level '{value}', expected one of {sorted(LOG_LEVELS)}"
            )
        return value

    @property
    def numeric_level(self) -> int:
        return LOG_LEVELS[self.level]


# stream set up by the last configure_logging() call
_log_output: TextIO | None = None


def configure_logging(conf: LoggingConf | None = None, development: bool = False) -> None:
    """
    Configure structlog with appropriate processors based on environment.

    Development: Human-readable colored output
    Production: JSON output for log aggregation systems
    """
    global _log_output
    conf = conf or LoggingConf()

    output: TextIO = sys.stdout
    if conf.path:
        output = open(conf.path, "a", encoding="utf-8")
    previous, _log_output = _log_output, output

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if development:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=not conf.path),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(conf.numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        # not cached, so a later reconfiguration reaches every logger
        cache_logger_on_first_use=False,
    )

    # Route standard library loggers (uvicorn, sqlalchemy) to the same place
    logging.basicConfig(
        format="%(message)s",
        level=conf.numeric_level,
        handlers=[logging.StreamHandler(output)],
        force=True,
    )

    if previous is not None and previous is not sys.stdout and not previous.closed:
        previous.close()


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)
        **initial_context: Initial context values to bind

    Returns:
        A bound logger with the given context

    Usage:
        logger = get_logger(__name__, subsystem="archiver")
        logger.warning("checkIntervalSecs not set, using default", value=60)
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
