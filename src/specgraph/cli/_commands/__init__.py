"""specgraph CLI commands."""
# pyright: reportUnusedCallResult=false
from __future__ import annotations

from typing import TYPE_CHECKING

from . import _items
from ._analyze import app as analyze_app
from ._context import CLIContext, OutputFormat
from ._items import parse_assignments
from ._refs import app as refs_app
from ._shared import (
    ExitCode,
    FormattableData,
    exit_code_for_error_kind,
    exit_for_failure,
    exit_with_error,
    exit_with_success,
    format_json,
    format_table,
    format_yaml,
    get_error_console,
    print_warnings,
)

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "FormattableData",
    "OutputFormat",
    "analyze_app",
    "exit_code_for_error_kind",
    "exit_for_failure",
    "exit_with_error",
    "exit_with_success",
    "format_json",
    "format_table",
    "format_yaml",
    "get_error_console",
    "parse_assignments",
    "print_warnings",
    "refs_app",
    "register_commands",
]


def register_commands(app: App) -> None:
    app.command(analyze_app)
    app.command(refs_app)
    _items.register(app)
