"""Logging utilities for specgraph.

Standalone structlog logger factories that write JSON or text formatted logs
to a file or to stderr. Each logger is self-contained and does not modify
global structlog configuration.
"""

from __future__ import annotations

import logging
import sys
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]


def _get_log_level() -> int:
    """Get the log level from environment variables.

    Checks SPECGRAPH_DEBUG first (sets DEBUG if present), then
    SPECGRAPH_LOG_LEVEL. Defaults to WARNING if neither is set.
    """
    if getenv("SPECGRAPH_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(getenv("SPECGRAPH_LOG_LEVEL", "warning").upper(), logging.WARNING)


def log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, SPECGRAPH_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer, WARNING for unknown names.
    """
    if respect_env and getenv("SPECGRAPH_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.WARNING)


def create_logger(
    *,
    log_file: str = "",
    log_level: int | None = None,
    log_format: LogFormatType = "text",
) -> FilteringBoundLogger:
    """Create a standalone structlog logger.

    Args:
        log_file: Path to a log file opened in append mode. Empty writes to
            stderr.
        log_level: Override log level (uses env vars if not specified).
        log_format: Output format, either "json" or "text".

    Returns:
        A configured FilteringBoundLogger instance.
    """
    effective_level = log_level if log_level is not None else _get_log_level()

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger_factory = structlog.WriteLoggerFactory(file=log_path.open("a"))
    else:
        logger_factory = structlog.PrintLoggerFactory(file=sys.stderr)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(effective_level),
            context_class=dict,
        ),
    )


def create_null_logger() -> FilteringBoundLogger:
    """Create a logger that discards every event.

    Used as the default for engine components constructed without a logger.
    """
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[],
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
            context_class=dict,
        ),
    )


def create_cli_logger(
    *,
    level: str = "warning",
    log_format: LogFormatType = "text",
    log_file: str = "",
    command: str = "",
) -> FilteringBoundLogger:
    """Create a logger for CLI commands.

    The log level can be overridden by SPECGRAPH_DEBUG. The command name is
    bound to all log entries when provided.

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to log file (stderr if empty).
        command: Name of the CLI command for context.

    Returns:
        A FilteringBoundLogger instance configured for CLI logging.
    """
    logger = create_logger(
        log_file=log_file,
        log_level=log_level_from_string(level, respect_env=True),
        log_format=log_format,
    )

    if command:
        return logger.bind(command=command)
    return logger
