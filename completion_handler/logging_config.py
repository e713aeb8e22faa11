"""Structured logging setup for running the handler outside a managed host.

Hosts normally own log routing; the handler only installs its own stderr
handler when settings ask for it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

_HANDLER_MARKER_ATTRIBUTE = "_job_completion_handler"


def logging_configure(level: str = "INFO", json_output: bool = False, stream: TextIO | None = None) -> None:
    """Configure structlog on top of stdlib logging with one stream handler.

    Args:
        level: Minimum level name for the installed handler.
        json_output: Render JSON lines instead of console output.
        stream: Output stream, stderr when omitted.

    Returns:
        None: Configures logging as side effect.

    Raises:
        ValueError: Raised when level is not a known level name.
    """

    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"unknown log level: {level}")

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    render_processors: list[Any] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if json_output:
        render_processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        render_processors.append(structlog.dev.ConsoleRenderer(colors=False))

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=render_processors,
        foreign_pre_chain=shared_processors,
    )

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setLevel(numeric_level)
    stream_handler.setFormatter(formatter)
    setattr(stream_handler, _HANDLER_MARKER_ATTRIBUTE, True)

    handler_logger = logging.getLogger("completion_handler")
    for existing_handler in list(handler_logger.handlers):
        if getattr(existing_handler, _HANDLER_MARKER_ATTRIBUTE, False):
            handler_logger.removeHandler(existing_handler)
    handler_logger.addHandler(stream_handler)
    handler_logger.setLevel(numeric_level)
