"""Logging for jarscan.

Library modules get their loggers from :func:`get_logger`: structlog bound
loggers wrapping stdlib loggers under ``jarscan.*``, so nothing is printed
until the host application configures logging. The CLI calls
:func:`setup_logging` to render those events on stderr.
"""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

_ROOT_LOGGER = "jarscan"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and stdlib logging for command-line use.

    Reads from environment variables:
        JARSCAN_LOG_LEVEL  — log level (default: INFO), overridden by ``level``
        JARSCAN_LOG_FORMAT — console | json (default: console)

    Logs go to stderr so command output on stdout stays machine-readable.
    """
    log_level = (level or os.environ.get("JARSCAN_LOG_LEVEL", "INFO")).upper()
    log_format = os.environ.get("JARSCAN_LOG_FORMAT", "console").lower()
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(log_format),
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "loggers": {
                _ROOT_LOGGER: {"handlers": ["stderr"], "level": log_level, "propagate": False},
            },
        }
    )
