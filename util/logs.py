"""
util/logs.py

Structured diagnostics via structlog.
- Writes to stderr; stdout belongs to the runner's workflow commands
- LOG_LEVEL (default INFO) and LOG_FORMAT (console | json, default console)
"""

import logging
import os
import sys

import structlog
from structlog.stdlib import LoggerFactory


def setup_logging(level=None, format_type=None):
    """Configure stdlib logging and structlog for the process."""
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    format_type = (format_type or os.getenv("LOG_FORMAT", "console")).lower()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level, logging.INFO),
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if format_type == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name=None):
    return structlog.get_logger(name)
