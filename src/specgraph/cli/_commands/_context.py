# pyright: reportUnusedCallResult=false
# ruff: noqa: TC003  # Path needed at runtime for dataclass field
"""CLI context for global state management.

The CLIContext is set once at CLI startup from the global options and made
available to all commands via contextvars.
"""

from __future__ import annotations

import contextvars
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from specgraph.config import SpecGraphConfig
    from specgraph.spec import SpecGraphService


class OutputFormat(StrEnum):
    """Supported output formats for commands."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


DEFAULT_SPECS_DIR = Path("specs")

# Thread-safe context variable for CLIContext
_current_cli_context: contextvars.ContextVar[CLIContext | None] = contextvars.ContextVar(
    "cli_context", default=None
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with configuration and options.

    Attributes:
        config: Loaded configuration object.
        specs_dir: Directory holding the entity files.
        output_format: Format used by every command's output.
        logger: Structured logger for CLI commands.
    """

    config: SpecGraphConfig = field(repr=False)
    specs_dir: Path = DEFAULT_SPECS_DIR
    output_format: OutputFormat = OutputFormat.TABLE
    logger: FilteringBoundLogger | None = field(default=None, repr=False)

    def service(self) -> SpecGraphService:
        """Create a service over the JSON store in ``specs_dir``."""
        from specgraph.spec import JsonEntityStore, SpecGraphService

        store = JsonEntityStore(self.specs_dir, self.logger)
        return SpecGraphService(store, self.config, self.logger)

    @classmethod
    def get_current(cls) -> CLIContext:
        """Get current active CLIContext, or create a default if not set.

        Returns:
            The currently active CLIContext, or a default instance if none is set.
        """
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx

        from specgraph.config import SpecGraphConfig

        return cls(config=SpecGraphConfig.from_dict({}))

    @classmethod
    def set_current(cls, ctx: CLIContext) -> None:
        """Set the current active CLIContext.

        Args:
            ctx: The CLIContext to set as current.
        """
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to default context.

        This is primarily useful for testing to ensure a clean state between tests.
        """
        _current_cli_context.set(None)
