# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415
"""Sub-item lifecycle commands.

Commands: supersede, depend, history.
"""

from typing import Annotated, Any

import orjson
from cyclopts import App, Parameter

from specgraph.spec import ItemKind, parse_item_kind

from ._context import CLIContext
from ._output import history_to_dict, render, supersession_to_dict
from ._shared import (
    ExitCode,
    exit_for_failure,
    exit_with_error,
    exit_with_success,
    print_warnings,
)

__all__ = ["parse_assignments", "register"]


def parse_assignments(assignments: list[str]) -> dict[str, Any]:
    """Parse ``key=value`` pairs into an update mapping.

    Values are decoded as JSON when they parse, so ``priority=2`` gives an
    integer and ``tags=["a"]`` a list; anything else is kept as a string.

    Raises:
        ValueError: If an assignment has no ``=`` or an empty key.
    """
    updates: dict[str, Any] = {}
    for assignment in assignments:
        key, sep, raw = assignment.partition("=")
        key = key.strip()
        if not sep or not key:
            msg = f"Expected key=value, got {assignment!r}"
            raise ValueError(msg)
        try:
            updates[key] = orjson.loads(raw)
        except orjson.JSONDecodeError:
            updates[key] = raw
    return updates


def _item_kind(value: str) -> ItemKind:
    try:
        return parse_item_kind(value)
    except ValueError as e:
        exit_with_error(str(e), ExitCode.VALIDATION_ERROR)


def register(app: App) -> None:
    """Register the sub-item commands on the root app."""

    @app.command(name="supersede")
    def supersede(
        parent_id: str,
        kind: str,
        old_id: str,
        /,
        *,
        set_: Annotated[
            list[str] | None,
            Parameter(name=["--set", "-s"], help="Field update as key=value (repeatable)"),
        ] = None,
    ) -> None:
        """Replace an item with a new version and rewrite references to it

        Args:
            parent_id: Entity owning the item.
            kind: Item kind (task, criterion, test_case, flow, ...).
            old_id: The item being superseded.
            set_: Field updates applied to the new version.
        """
        item_kind = _item_kind(kind)
        try:
            updates = parse_assignments(set_ or [])
        except ValueError as e:
            exit_with_error(str(e), ExitCode.VALIDATION_ERROR)

        ctx = CLIContext.get_current()
        result = ctx.service().supersede(parent_id, item_kind, old_id, updates)
        if not result.success or result.data is None:
            exit_for_failure(result)

        data = result.data
        summary = [f"Superseded {data.old_id} with {data.new_id} in {data.parent_id}"]
        if data.changed_fields:
            summary.append(f"Changed fields: {', '.join(data.changed_fields)}")
        rows = [[r.holder, r.field, r.old, r.new] for r in data.rewritten_references]

        print(
            render(
                supersession_to_dict(data),
                ctx.output_format,
                headers=["Holder", "Field", "Old", "New"],
                rows=rows,
                summary=summary,
            )
        )
        print_warnings(result.warnings)
        exit_with_success()

    @app.command(name="depend")
    def depend(source_id: str, target_id: str, /) -> None:
        """Add a dependency after checking it creates no cycle

        Args:
            source_id: Node taking the dependency (entity or qualified item).
            target_id: Node depended upon.
        """
        ctx = CLIContext.get_current()
        result = ctx.service().add_dependency(source_id, target_id)
        if not result.success or result.data is None:
            exit_for_failure(result)

        print(
            render(
                {"source": source_id, "target": target_id, "updated": result.data},
                ctx.output_format,
                headers=[],
                rows=[],
                summary=[f"{source_id} now depends on {target_id}"],
            )
        )
        exit_with_success()

    @app.command(name="history")
    def history(parent_id: str, kind: str, item_id: str, /) -> None:
        """Show every version in an item's supersession chain

        Args:
            parent_id: Entity owning the item.
            kind: Item kind (task, criterion, test_case, flow, ...).
            item_id: Any version in the chain.
        """
        item_kind = _item_kind(kind)
        ctx = CLIContext.get_current()
        result = ctx.service().item_history(parent_id, item_kind, item_id)
        if not result.success or result.data is None:
            exit_for_failure(result)

        rows = [
            [
                item.id,
                item.supersedes or "-",
                item.superseded_by or "-",
                item.superseded_at.isoformat() if item.superseded_at else "-",
                "active" if item.active else "retired",
            ]
            for item in result.data
        ]

        print(
            render(
                history_to_dict(result.data),
                ctx.output_format,
                headers=["ID", "Supersedes", "Superseded by", "Superseded at", "Status"],
                rows=rows,
            )
        )
        exit_with_success()
