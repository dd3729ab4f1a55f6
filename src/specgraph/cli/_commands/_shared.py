# pyright: reportExplicitAny=false
"""Shared CLI utilities for commands.

This module provides common utilities used across CLI command implementations:
exit codes, output formatters and console helpers for errors and warnings.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Final, Never

from specgraph.exceptions import (
    AlreadySupersededError,
    CircularDependencyError,
    ConfigError,
    ConfigLoadError,
    EntityNotFoundError,
    InvalidReferenceFormatError,
    InvalidUpdateError,
    ItemNotFoundError,
    SelfReferenceError,
    StoreIOError,
    StoreParseError,
)

if TYPE_CHECKING:
    from rich.console import Console

    from specgraph.spec import OperationResult

# Type alias for formattable data - uses Any to match library signatures
FormattableData = dict[str, Any]

__all__ = [
    "ExitCode",
    "FormattableData",
    "exit_code_for_error_kind",
    "exit_for_failure",
    "exit_with_error",
    "exit_with_success",
    "format_json",
    "format_table",
    "format_yaml",
    "get_error_console",
    "print_warnings",
]


class ExitCode(IntEnum):
    """Standard exit codes for specgraph CLI commands."""

    SUCCESS = 0
    LOAD_ERROR = 1
    VALIDATION_ERROR = 2
    NOT_FOUND = 3
    IO_ERROR = 4
    INTERNAL_ERROR = 5


_EXIT_CODES: Final[dict[str, ExitCode]] = {
    EntityNotFoundError.__name__: ExitCode.NOT_FOUND,
    ItemNotFoundError.__name__: ExitCode.NOT_FOUND,
    AlreadySupersededError.__name__: ExitCode.VALIDATION_ERROR,
    CircularDependencyError.__name__: ExitCode.VALIDATION_ERROR,
    InvalidReferenceFormatError.__name__: ExitCode.VALIDATION_ERROR,
    InvalidUpdateError.__name__: ExitCode.VALIDATION_ERROR,
    SelfReferenceError.__name__: ExitCode.VALIDATION_ERROR,
    StoreIOError.__name__: ExitCode.IO_ERROR,
    StoreParseError.__name__: ExitCode.IO_ERROR,
    ConfigError.__name__: ExitCode.LOAD_ERROR,
    ConfigLoadError.__name__: ExitCode.LOAD_ERROR,
}


def exit_code_for_error_kind(error_kind: str | None) -> ExitCode:
    """Map the exception class name recorded on a failed result to an exit code.

    Args:
        error_kind: The ``error_kind`` of an ``OperationResult``.

    Returns:
        Exit code for the failure; unknown kinds are internal errors.
    """
    if error_kind is None:
        return ExitCode.INTERNAL_ERROR
    return _EXIT_CODES.get(error_kind, ExitCode.INTERNAL_ERROR)


def format_json(data: FormattableData, *, indent: bool = True) -> str:
    """Format data as JSON.

    Args:
        data: Dictionary to format as JSON.
        indent: Whether to pretty-print with indentation.

    Returns:
        JSON-formatted string representation.
    """
    import orjson

    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=options).decode("utf-8")


def format_yaml(data: FormattableData) -> str:
    """Format data as YAML.

    Args:
        data: Dictionary to format as YAML.

    Returns:
        YAML-formatted string representation.
    """
    import yaml

    return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)


def format_table(headers: list[str], rows: list[list[str]]) -> str:
    """Format data as a Markdown table.

    Args:
        headers: Column headers for the table.
        rows: List of rows, where each row is a list of cell values.

    Returns:
        Markdown table string representation.
    """
    from pytablewriter import MarkdownTableWriter

    writer = MarkdownTableWriter(
        headers=headers,
        value_matrix=rows,
        margin=1,
    )
    return writer.dumps()


def get_error_console() -> Console:
    """Get a Rich console configured for error output to stderr.

    Returns:
        Console instance writing to stderr.
    """
    from rich.console import Console

    return Console(stderr=True)


def print_warnings(warnings: tuple[str, ...], *, console: Console | None = None) -> None:
    """Print advisory warnings to stderr."""
    if not warnings:
        return
    if console is None:
        console = get_error_console()
    for warning in warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}", markup=True, highlight=False)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Args:
        message: The error message to display.
        code: The exit code to use (defaults to INTERNAL_ERROR).
        console: Optional Rich console for output. If not provided,
            a new stderr console will be created.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {message}", highlight=False)
    raise SystemExit(code)


def exit_for_failure(result: OperationResult[Any]) -> Never:
    """Report a failed service result and exit with the matching code.

    Raises:
        SystemExit: Always raised.
    """
    message = result.error or "Operation failed"
    exit_with_error(message, exit_code_for_error_kind(result.error_kind))


def exit_with_success(
    message: str | None = None,
    *,
    console: Console | None = None,
) -> Never:
    """Print an optional success message and exit with SUCCESS code.

    Args:
        message: Optional success message to display.
        console: Optional Rich console for output. If not provided and a message
            is given, a new stderr console will be created.

    Raises:
        SystemExit: Always raised with ExitCode.SUCCESS (0).
    """
    if message is not None:
        if console is None:
            console = get_error_console()
        console.print(message)
    raise SystemExit(ExitCode.SUCCESS)
