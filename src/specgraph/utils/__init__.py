"""Shared utilities."""

from ._logging import (
    LogFormatType,
    create_cli_logger,
    create_logger,
    create_null_logger,
    log_level_from_string,
)

__all__ = [
    "LogFormatType",
    "create_cli_logger",
    "create_logger",
    "create_null_logger",
    "log_level_from_string",
]
