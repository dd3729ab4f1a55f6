# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415
"""Reference validation commands.

Commands: validate, broken, suggest.
"""

from typing import Annotated

from cyclopts import App, Parameter

from specgraph.spec import ReferenceValidationOptions

from ._context import CLIContext
from ._output import broken_references_to_dict, fixes_to_dict, render, validation_to_dict
from ._shared import ExitCode, exit_for_failure, exit_with_success

__all__ = ["app"]

app = App(name="refs", help="Validate and repair references", help_on_error=True)


@app.command(name="validate")
def validate(
    entity_id: str | None = None,
    /,
    *,
    check_orphans: Annotated[
        bool,
        Parameter(name=["--check-orphans"], help="Warn about entities nothing references"),
    ] = False,
    allow_self: Annotated[
        bool,
        Parameter(name=["--allow-self"], help="Accept references to the holder itself"),
    ] = False,
) -> None:
    """Validate references of one entity or of the whole corpus

    Exits with 2 when any reference error is found.

    Args:
        entity_id: Entity to validate; every entity when omitted.
        check_orphans: Also warn about orphaned entities.
        allow_self: Accept self-references.
    """
    ctx = CLIContext.get_current()
    options = ReferenceValidationOptions(
        check_orphans=check_orphans,
        allow_self_references=allow_self or ctx.config.references.allow_self_references,
    )
    service = ctx.service()
    if entity_id is None:
        result = service.validate_all_references(options)
    else:
        result = service.validate_entity_references(entity_id, options)
    if result.data is None:
        exit_for_failure(result)

    report = result.data
    rows = [["error", e] for e in report.errors] + [["warning", w] for w in report.warnings]
    headline = "References are valid." if report.valid else f"{len(report.errors)} error(s)"

    print(
        render(
            validation_to_dict(report),
            ctx.output_format,
            headers=["Severity", "Message"],
            rows=rows,
            summary=[headline],
        )
    )
    if not report.valid:
        raise SystemExit(ExitCode.VALIDATION_ERROR)
    exit_with_success()


@app.command(name="broken")
def broken() -> None:
    """List references whose target does not exist"""
    ctx = CLIContext.get_current()
    result = ctx.service().find_broken_references()
    if not result.success or result.data is None:
        exit_for_failure(result)

    report = result.data
    rows = [
        [name, ref.source, ref.field, ref.reference]
        for name, refs in report.by_category.items()
        for ref in refs
    ]

    print(
        render(
            broken_references_to_dict(report),
            ctx.output_format,
            headers=["Category", "Source", "Field", "Reference"],
            rows=rows,
            summary=[f"Broken references: {report.total}"],
        )
    )
    exit_with_success()


@app.command(name="suggest")
def suggest(entity_id: str, /) -> None:
    """Suggest fixes for an entity's missing and cyclic references

    Args:
        entity_id: The entity to inspect.
    """
    ctx = CLIContext.get_current()
    result = ctx.service().suggest_reference_fixes(entity_id)
    if not result.success or result.data is None:
        exit_for_failure(result)

    fixes = result.data
    rows = [
        [s.source, s.reference, ", ".join(s.suggestions) or "-"]
        for s in fixes.missing_references
    ]
    summary = [f"Suggestions for {fixes.entity_id}"]
    summary.extend(fix.suggestion for fix in fixes.cyclic_references)

    print(
        render(
            fixes_to_dict(fixes),
            ctx.output_format,
            headers=["Source", "Reference", "Did you mean"],
            rows=rows,
            summary=summary,
        )
    )
    exit_with_success()
