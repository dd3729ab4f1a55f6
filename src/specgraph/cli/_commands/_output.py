# pyright: reportExplicitAny=false
"""Conversion of engine results to output dictionaries and tables."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from specgraph.spec import item_to_dict

from ._context import OutputFormat
from ._shared import FormattableData, format_json, format_table, format_yaml

if TYPE_CHECKING:
    from specgraph.spec import (
        BrokenReferenceReport,
        CoverageAnalysis,
        CycleAnalysis,
        DependencyAnalysis,
        DependencyResolution,
        EntityCategory,
        OrphanReport,
        ReferenceFixes,
        SubItem,
        SupersessionResult,
        ValidationReport,
    )

__all__ = [
    "batches_to_dict",
    "broken_references_to_dict",
    "coverage_to_dict",
    "cycles_to_dict",
    "dependencies_to_dict",
    "fixes_to_dict",
    "history_to_dict",
    "order_to_dict",
    "orphans_to_dict",
    "render",
    "resolution_to_dict",
    "supersession_to_dict",
    "validation_to_dict",
]


def render(
    data: FormattableData,
    format_: OutputFormat,
    *,
    headers: list[str],
    rows: list[list[str]],
    summary: list[str] | None = None,
) -> str:
    """Render a result in the requested format.

    Table output is the summary lines followed by a Markdown table; JSON and
    YAML output serialize ``data``.
    """
    if format_ == OutputFormat.JSON:
        return format_json(data)
    if format_ == OutputFormat.YAML:
        return format_yaml(data)

    parts = list(summary or [])
    if rows:
        if parts:
            parts.append("")
        parts.append(format_table(headers, rows).rstrip())
    return "\n".join(parts)


# =============================================================================
# Analyses
# =============================================================================


def dependencies_to_dict(analysis: DependencyAnalysis) -> dict[str, Any]:
    return {
        "node_count": analysis.node_count,
        "edge_count": analysis.edge_count,
        "average_degree": round(analysis.average_degree, 2),
        "most_connected": [
            {
                "node_id": m.node_id,
                "fan_in": m.fan_in,
                "fan_out": m.fan_out,
                "coupling": round(m.coupling, 2),
                "stability": round(m.stability, 2),
            }
            for m in analysis.most_connected
        ],
        "depth": {
            "max_depth": analysis.depth.max_depth,
            "average_depth": round(analysis.depth.average_depth, 2),
            "critical_path": list(analysis.depth.critical_path),
        },
        "cycles": cycles_to_dict(analysis.cycles),
        "health": {
            "score": analysis.health.score,
            "issues": list(analysis.health.issues),
            "recommendations": list(analysis.health.recommendations),
        },
        "warnings": list(analysis.warnings),
    }


def cycles_to_dict(analysis: CycleAnalysis) -> dict[str, Any]:
    return {
        "has_cycles": analysis.has_cycles,
        "cycles": [list(cycle) for cycle in analysis.cycles],
        "summary": {
            "total_cycles": analysis.summary.total_cycles,
            "max_cycle_length": analysis.summary.max_cycle_length,
            "affected_nodes": list(analysis.summary.affected_nodes),
        },
    }


def coverage_to_dict(analysis: CoverageAnalysis) -> dict[str, Any]:
    report = analysis.report
    return {
        "total_specs": report.total_specs,
        "covered_specs": report.covered_specs,
        "coverage_percentage": round(report.coverage_percentage, 1),
        "uncovered_specs": list(report.uncovered_specs),
        "orphaned_specs": list(report.orphaned_specs),
        "by_category": {
            name: {
                "total": category.total,
                "covered": category.covered,
                "percentage": round(category.percentage, 1),
            }
            for name, category in report.by_category.items()
        },
        "recommendations": list(analysis.recommendations),
    }


def orphans_to_dict(report: OrphanReport) -> dict[str, Any]:
    return {
        "total": report.total,
        "orphans": list(report.orphans),
        "by_type": {name: list(ids) for name, ids in report.by_type.items()},
    }


def resolution_to_dict(resolution: DependencyResolution) -> dict[str, Any]:
    return {
        "entity_id": resolution.entity_id,
        "dependencies": list(resolution.dependencies),
        "dependents": list(resolution.dependents),
    }


def order_to_dict(category: EntityCategory, order: tuple[str, ...]) -> dict[str, Any]:
    return {"category": category.value, "order": list(order)}


def batches_to_dict(
    category: EntityCategory, batches: tuple[tuple[str, ...], ...]
) -> dict[str, Any]:
    return {"category": category.value, "batches": [list(batch) for batch in batches]}


# =============================================================================
# References
# =============================================================================


def validation_to_dict(report: ValidationReport) -> dict[str, Any]:
    return {
        "valid": report.valid,
        "errors": list(report.errors),
        "warnings": list(report.warnings),
    }


def broken_references_to_dict(report: BrokenReferenceReport) -> dict[str, Any]:
    return {
        "total": report.total,
        "by_category": {
            name: [
                {
                    "source": ref.source,
                    "field": ref.field,
                    "reference": ref.reference,
                    "ref_kind": ref.ref_kind.value,
                    "target": ref.target,
                }
                for ref in refs
            ]
            for name, refs in report.by_category.items()
        },
    }


def fixes_to_dict(fixes: ReferenceFixes) -> dict[str, Any]:
    return {
        "entity_id": fixes.entity_id,
        "missing_references": [
            {
                "source": s.source,
                "field": s.field,
                "reference": s.reference,
                "suggestions": list(s.suggestions),
            }
            for s in fixes.missing_references
        ],
        "cyclic_references": [
            {"cycle": list(f.cycle), "suggestion": f.suggestion} for f in fixes.cyclic_references
        ],
    }


# =============================================================================
# Supersession
# =============================================================================


def supersession_to_dict(result: SupersessionResult) -> dict[str, Any]:
    return {
        "parent_id": result.parent_id,
        "item_kind": result.item_kind.value,
        "old_id": result.old_id,
        "new_id": result.new_id,
        "changed_fields": list(result.changed_fields),
        "no_changes": result.no_changes,
        "rewritten_references": [
            {"holder": r.holder, "field": r.field, "old": r.old, "new": r.new}
            for r in result.rewritten_references
        ],
    }


def history_to_dict(items: tuple[SubItem, ...]) -> dict[str, Any]:
    return {"items": [item_to_dict(item) for item in items]}
