"""Shared test fixtures and entity factories for specgraph tests."""

from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

import pytest
from rich.console import Console

from specgraph.spec import (
    Entity,
    EntitySnapshot,
    EntityType,
    GraphBuilder,
    ItemKind,
    SpecGraph,
    SubItem,
)

FIXED_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


# =============================================================================
# Factories
# =============================================================================


def make_item(
    item_id: str,
    /,
    *,
    supersedes: str | None = None,
    superseded_by: str | None = None,
    superseded_at: datetime | None = None,
    **fields: Any,
) -> SubItem:
    """Create a sub-item; keyword arguments become its payload."""
    if superseded_by is not None and superseded_at is None:
        superseded_at = FIXED_NOW
    return SubItem(
        id=item_id,
        fields=fields,
        supersedes=supersedes,
        superseded_by=superseded_by,
        superseded_at=superseded_at,
    )


def make_entity(
    entity_type: EntityType,
    number: int,
    slug: str,
    /,
    *,
    items: Mapping[ItemKind, Sequence[SubItem]] | None = None,
    name: str = "",
    **fields: Any,
) -> Entity:
    """Create an entity; keyword arguments become its payload."""
    return Entity(
        entity_type=entity_type,
        number=number,
        slug=slug,
        name=name or slug.replace("-", " ").title(),
        fields=fields,
        collections={kind: tuple(values) for kind, values in (items or {}).items()},
        created_at=FIXED_NOW,
        updated_at=FIXED_NOW,
    )


def make_requirement(number: int, slug: str, *criteria: SubItem | str) -> Entity:
    """Create a requirement; criteria default to a single ``crit-001``."""
    resolved = [make_item(c) if isinstance(c, str) else c for c in criteria or ("crit-001",)]
    return make_entity(EntityType.REQUIREMENT, number, slug, items={ItemKind.CRITERION: resolved})


def make_plan(
    number: int,
    slug: str,
    *,
    tasks: Sequence[SubItem] = (),
    test_cases: Sequence[SubItem] = (),
    flows: Sequence[SubItem] = (),
    **fields: Any,
) -> Entity:
    """Create a plan with optional task, test case and flow collections."""
    items: dict[ItemKind, Sequence[SubItem]] = {}
    if tasks:
        items[ItemKind.TASK] = tasks
    if test_cases:
        items[ItemKind.TEST_CASE] = test_cases
    if flows:
        items[ItemKind.FLOW] = flows
    return make_entity(EntityType.PLAN, number, slug, items=items, **fields)


def build_graph(*entities: Entity) -> SpecGraph:
    """Build the graph of a snapshot holding the given entities."""
    return GraphBuilder().build(EntitySnapshot(entities))


def cyclic_plans() -> tuple[Entity, Entity, Entity]:
    """Three plans depending on each other in a ring: a -> b -> c -> a."""
    return (
        make_plan(1, "a", depends_on=["pln-002-b"]),
        make_plan(2, "b", depends_on=["pln-003-c"]),
        make_plan(3, "c", depends_on=["pln-001-a"]),
    )


def chained_plans() -> tuple[Entity, Entity, Entity]:
    """Three plans in a dependency chain: a -> b -> c."""
    return (
        make_plan(1, "a", depends_on=["pln-002-b"]),
        make_plan(2, "b", depends_on=["pln-003-c"]),
        make_plan(3, "c"),
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Time source frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def corpus() -> EntitySnapshot:
    """A small, fully linked corpus.

    - ``req-001-login`` has two criteria; ``pln-001-auth`` fulfills crit-001.
    - ``req-002-logout`` has one criterion nothing fulfills.
    - ``pln-001-auth`` has three tasks; task-002 depends on task-001 and
      task-003 is blocked by task-001. Its test case verifies svc-001-api.
    - ``pln-002-docs`` links to nothing.
    - ``svc-001-api`` depends on ``lib-001-core``.
    - ``dec-001-storage`` affects svc-001-api.
    """
    return EntitySnapshot(
        (
            make_requirement(1, "login", "crit-001", "crit-002"),
            make_requirement(2, "logout"),
            make_plan(
                1,
                "auth",
                criteria_id=["req-001-login/crit-001"],
                tasks=[
                    make_item("task-001", title="Design schema"),
                    make_item("task-002", title="Implement", depends_on=["task-001"]),
                    make_item("task-003", title="Review", blocked=[{"blocked_by": "task-001"}]),
                ],
                test_cases=[make_item("tc-001", components=["svc-001-api"])],
            ),
            make_plan(2, "docs"),
            make_entity(EntityType.SERVICE, 1, "api", depends_on=["lib-001-core"]),
            make_entity(EntityType.LIBRARY, 1, "core"),
            make_entity(EntityType.DECISION, 1, "storage", affects_components=["svc-001-api"]),
        )
    )


@pytest.fixture
def console() -> Console:
    return Console(
        width=100,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
