# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415
"""Structural analysis commands.

Commands: deps, coverage, cycles, orphans, resolve, order, batches.
"""

from typing import Annotated

from cyclopts import App, Parameter

from specgraph.spec import EntityCategory

from ._context import CLIContext
from ._output import (
    batches_to_dict,
    coverage_to_dict,
    cycles_to_dict,
    dependencies_to_dict,
    order_to_dict,
    orphans_to_dict,
    render,
    resolution_to_dict,
)
from ._shared import (
    ExitCode,
    exit_for_failure,
    exit_with_error,
    exit_with_success,
    print_warnings,
)

__all__ = ["app"]

app = App(name="analyze", help="Analyze the specification graph", help_on_error=True)

_CategoryOption = Annotated[
    str,
    Parameter(name=["--category", "-c"], help="Entity category: plans, components or milestones"),
]


def _category(value: str) -> EntityCategory:
    try:
        return EntityCategory(value.strip().lower())
    except ValueError:
        exit_with_error(f"Unknown category: {value!r}", ExitCode.VALIDATION_ERROR)


@app.command(name="deps")
def deps() -> None:
    """Analyze dependency structure, depth and health"""
    ctx = CLIContext.get_current()
    result = ctx.service().analyze_dependencies()
    if not result.success or result.data is None:
        exit_for_failure(result)

    analysis = result.data
    summary = [
        f"Nodes: {analysis.node_count}",
        f"Edges: {analysis.edge_count}",
        f"Average degree: {analysis.average_degree:.2f}",
        f"Max depth: {analysis.depth.max_depth}",
        f"Critical path: {' -> '.join(analysis.depth.critical_path) or '-'}",
        f"Cycles: {analysis.cycles.summary.total_cycles}",
        f"Health score: {analysis.health.score}",
    ]
    summary.extend(f"Recommendation: {r}" for r in analysis.health.recommendations)
    rows = [
        [m.node_id, str(m.fan_in), str(m.fan_out), f"{m.coupling:.2f}", f"{m.stability:.2f}"]
        for m in analysis.most_connected
    ]

    print(
        render(
            dependencies_to_dict(analysis),
            ctx.output_format,
            headers=["Node", "Fan-in", "Fan-out", "Coupling", "Stability"],
            rows=rows,
            summary=summary,
        )
    )
    print_warnings(result.warnings)
    exit_with_success()


@app.command(name="coverage")
def coverage() -> None:
    """Report coverage by category with recommendations"""
    ctx = CLIContext.get_current()
    result = ctx.service().analyze_coverage()
    if not result.success or result.data is None:
        exit_for_failure(result)

    report = result.data.report
    summary = [
        f"Coverage: {report.covered_specs}/{report.total_specs} "
        f"({report.coverage_percentage:.1f}%)",
    ]
    summary.extend(f"Uncovered: {spec_id}" for spec_id in report.uncovered_specs)
    summary.extend(result.data.recommendations)
    rows = [
        [name, str(c.total), str(c.covered), f"{c.percentage:.1f}%"]
        for name, c in report.by_category.items()
    ]

    print(
        render(
            coverage_to_dict(result.data),
            ctx.output_format,
            headers=["Category", "Total", "Covered", "Coverage"],
            rows=rows,
            summary=summary,
        )
    )
    exit_with_success()


@app.command(name="cycles")
def cycles() -> None:
    """Detect dependency cycles; exits with 2 when any are found"""
    ctx = CLIContext.get_current()
    result = ctx.service().detect_cycles()
    if not result.success or result.data is None:
        exit_for_failure(result)

    analysis = result.data
    if analysis.has_cycles:
        headline = (
            f"Found {analysis.summary.total_cycles} cycle(s), "
            f"longest {analysis.summary.max_cycle_length}"
        )
    else:
        headline = "No cycles found."
    rows = [[str(len(cycle)), " -> ".join((*cycle, cycle[0]))] for cycle in analysis.cycles]

    print(
        render(
            cycles_to_dict(analysis),
            ctx.output_format,
            headers=["Length", "Cycle"],
            rows=rows,
            summary=[headline],
        )
    )
    if analysis.has_cycles:
        raise SystemExit(ExitCode.VALIDATION_ERROR)
    exit_with_success()


@app.command(name="orphans")
def orphans(
    *,
    all_: Annotated[
        bool,
        Parameter(
            name=["--all", "-a"],
            help="Include decisions, constitutions and milestones",
        ),
    ] = False,
) -> None:
    """List entities nothing depends on

    Args:
        all_: Also report governance and milestone entities.
    """
    ctx = CLIContext.get_current()
    result = ctx.service().detect_orphans(include_all=all_)
    if not result.success or result.data is None:
        exit_for_failure(result)

    report = result.data
    rows = [[name, entity_id] for name, ids in report.by_type.items() for entity_id in ids]

    print(
        render(
            orphans_to_dict(report),
            ctx.output_format,
            headers=["Category", "Entity"],
            rows=rows,
            summary=[f"Orphaned entities: {report.total}"],
        )
    )
    exit_with_success()


@app.command(name="resolve")
def resolve(entity_id: str, /) -> None:
    """List everything an entity depends on and everything depending on it

    Args:
        entity_id: Plan, component or milestone to resolve.
    """
    ctx = CLIContext.get_current()
    result = ctx.service().resolve_dependencies(entity_id)
    if not result.success or result.data is None:
        exit_for_failure(result)

    resolution = result.data
    rows = [["dependency", dep] for dep in resolution.dependencies]
    rows.extend(["dependent", dep] for dep in resolution.dependents)

    print(
        render(
            resolution_to_dict(resolution),
            ctx.output_format,
            headers=["Relation", "Entity"],
            rows=rows,
            summary=[
                f"Entity: {resolution.entity_id}",
                f"Dependencies: {len(resolution.dependencies)}",
                f"Dependents: {len(resolution.dependents)}",
            ],
        )
    )
    exit_with_success()


@app.command(name="order")
def order(*, category: _CategoryOption = "plans") -> None:
    """Print entities so each follows its dependencies; exits with 2 on cycles

    Args:
        category: Entity category to order.
    """
    ctx = CLIContext.get_current()
    parsed = _category(category)
    result = ctx.service().execution_order(parsed)
    if not result.success or result.data is None:
        exit_for_failure(result)

    rows = [[str(position), entity_id] for position, entity_id in enumerate(result.data, 1)]
    print(
        render(
            order_to_dict(parsed, result.data),
            ctx.output_format,
            headers=["Step", "Entity"],
            rows=rows,
            summary=[f"Execution order for {parsed.value}: {len(result.data)} entities"],
        )
    )
    exit_with_success()


@app.command(name="batches")
def batches(*, category: _CategoryOption = "plans") -> None:
    """Group entities into batches that can run together; exits with 2 on cycles

    Args:
        category: Entity category to batch.
    """
    ctx = CLIContext.get_current()
    parsed = _category(category)
    result = ctx.service().execution_batches(parsed)
    if not result.success or result.data is None:
        exit_for_failure(result)

    rows = [[str(number), ", ".join(batch)] for number, batch in enumerate(result.data, 1)]
    print(
        render(
            batches_to_dict(parsed, result.data),
            ctx.output_format,
            headers=["Batch", "Entities"],
            rows=rows,
            summary=[f"Execution batches for {parsed.value}: {len(result.data)}"],
        )
    )
    exit_with_success()
