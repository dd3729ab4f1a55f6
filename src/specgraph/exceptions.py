"""specgraph exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class SpecGraphError(Exception):
    """Base exception for specgraph errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(SpecGraphError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


# =============================================================================
# Store Exceptions
# =============================================================================


class StoreError(SpecGraphError):
    """Base exception for entity store errors."""


class StoreIOError(StoreError):
    """Raised when an entity file cannot be read or written.

    Attributes:
        path: Path to the file that caused the error.
        operation: The operation that failed ("read", "write").
        cause: The underlying exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        operation: str,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and I/O context.

        Args:
            message: Human-readable error message.
            path: Path to the file that caused the error.
            operation: The operation that failed ("read", "write").
            cause: The underlying exception that caused this error.
        """
        super().__init__(message)
        self.path: Path = path
        self.operation: str = operation
        self.cause: Exception | None = cause


class StoreParseError(StoreError):
    """Raised when an entity file cannot be decoded.

    Attributes:
        path: Path to the file that caused the error.
        cause: The underlying exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and parse context."""
        super().__init__(message)
        self.path: Path = path
        self.cause: Exception | None = cause


# =============================================================================
# Graph Exceptions
# =============================================================================


class NotFoundError(SpecGraphError, KeyError):
    """Base exception for missing entities and sub-items."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class EntityNotFoundError(NotFoundError):
    """Raised when an entity cannot be found.

    Attributes:
        entity_id: The ID of the entity that was not found.
    """

    def __init__(self, message: str, *, entity_id: str | None = None) -> None:
        """Initialize with error message and entity context.

        Args:
            message: Human-readable error message.
            entity_id: The ID of the entity that was not found.
        """
        super().__init__(message)
        self.entity_id: str | None = entity_id


class ItemNotFoundError(NotFoundError):
    """Raised when a sub-item cannot be found in its parent collection.

    Attributes:
        item_id: The ID of the item that was not found.
        parent_id: The ID of the entity that was searched.
    """

    def __init__(
        self,
        message: str,
        *,
        item_id: str | None = None,
        parent_id: str | None = None,
    ) -> None:
        """Initialize with error message and item context.

        Args:
            message: Human-readable error message.
            item_id: The ID of the item that was not found.
            parent_id: The ID of the entity that was searched.
        """
        super().__init__(message)
        self.item_id: str | None = item_id
        self.parent_id: str | None = parent_id


class AlreadySupersededError(SpecGraphError):
    """Raised when superseding an item that is already retired.

    Attributes:
        item_id: The ID of the retired item.
        superseded_by: The ID of the item that already supersedes it.
    """

    def __init__(
        self,
        message: str,
        *,
        item_id: str,
        superseded_by: str,
    ) -> None:
        """Initialize with error message and chain context."""
        super().__init__(message)
        self.item_id: str = item_id
        self.superseded_by: str = superseded_by


class InvalidReferenceFormatError(SpecGraphError, ValueError):
    """Raised when a reference string does not match its kind's pattern.

    Attributes:
        reference: The offending reference string.
        ref_kind: The reference kind it was checked against.
        expected: The expected regular expression.
    """

    def __init__(
        self,
        message: str,
        *,
        reference: str,
        ref_kind: str,
        expected: str | None = None,
    ) -> None:
        """Initialize with error message and format context."""
        super().__init__(message)
        self.reference: str = reference
        self.ref_kind: str = ref_kind
        self.expected: str | None = expected


class CircularDependencyError(SpecGraphError, ValueError):
    """Raised when a mutation would introduce a dependency cycle.

    Attributes:
        cycle: Node IDs forming the cycle, in traversal order.
    """

    def __init__(self, message: str, *, cycle: list[str]) -> None:
        """Initialize with error message and the offending cycle.

        Args:
            message: Human-readable error message.
            cycle: Node IDs forming the cycle.
        """
        super().__init__(message)
        self.cycle: list[str] = cycle


class SelfReferenceError(SpecGraphError, ValueError):
    """Raised when an entity or item references itself.

    Attributes:
        node_id: The self-referencing node ID.
        field: The reference field holding the self-reference.
    """

    def __init__(self, message: str, *, node_id: str, field: str) -> None:
        """Initialize with error message and reference context."""
        super().__init__(message)
        self.node_id: str = node_id
        self.field: str = field


class AnalysisError(SpecGraphError):
    """Raised when an analyzer fails unexpectedly.

    Attributes:
        source: Name of the analyzer that failed.
        cause: The underlying exception.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and analyzer context."""
        super().__init__(message)
        self.source: str = source
        self.cause: Exception | None = cause


class InvalidUpdateError(SpecGraphError, ValueError):
    """Raised when an update touches fields managed by the engine.

    Attributes:
        fields: The offending field names.
    """

    def __init__(self, message: str, *, fields: tuple[str, ...]) -> None:
        """Initialize with error message and the offending fields."""
        super().__init__(message)
        self.fields: tuple[str, ...] = fields
