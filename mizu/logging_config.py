"""
structlog setup for the CLI and for applications embedding the client.

The library itself only logs; it never configures handlers. Call
``setup_logging`` once at process start.
"""

import logging
import sys
from typing import List, Optional

import structlog

from .config import settings


QUIET_LOGGERS = ("httpcore", "httpx")


def _shared_processors() -> List[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def build_formatter(json_logs: bool) -> structlog.stdlib.ProcessorFormatter:
    """Formatter rendering both structlog events and plain stdlib records."""
    pre_chain = _shared_processors()
    if json_logs:
        pre_chain.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def setup_logging(log_level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """
    Route structlog and stdlib logging to stderr through one renderer.

    Args:
        log_level: Override log level (default: settings.log_level)
        json_logs: JSON lines when true, console output when false (default: settings.log_json)
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    if json_logs is None:
        json_logs = settings.log_json

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(json_logs))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
