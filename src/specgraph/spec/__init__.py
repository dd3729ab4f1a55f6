"""Specification graph consistency engine.

Builds a directed graph from a snapshot of specification entities and runs
structural analyses, reference validation and supersession over it.

Example:
    >>> from specgraph.spec import GraphBuilder, CycleDetector, EntitySnapshot
    >>> graph = GraphBuilder().build(EntitySnapshot())
    >>> CycleDetector().detect_cycles(graph).has_cycles
    False
"""

from ._chain import active_items, is_active, item_history, latest_item
from ._coverage import COVERAGE_OK_MESSAGE, CoverageAnalyzer, is_covered
from ._cycles import DEPENDENCY_EDGE_KINDS, CycleDetector, summarize_cycles
from ._dependency import DependencyAnalyzer
from ._fields import (
    REFERENCE_FIELDS,
    FieldValue,
    ReferenceField,
    fields_for,
    iter_field_values,
    iter_references,
    rewrite_field_values,
)
from ._graph import GraphBuilder, SpecGraph, resolve_reference
from ._ids import (
    REFERENCE_PATTERNS,
    ParsedEntityID,
    ParsedItemID,
    format_entity_id,
    format_item_id,
    is_valid_reference,
    next_item_id,
    next_item_number,
    parse_entity_id,
    parse_item_id,
    qualify,
    reference_pattern,
    split_qualified,
    validate_reference_format,
)
from ._io import entity_from_dict, entity_to_dict, item_from_dict, item_to_dict
from ._models import (
    COMPONENT_TYPES,
    ENTITY_CATEGORIES,
    ENTITY_COLLECTIONS,
    ENTITY_PREFIXES,
    ITEM_COLLECTIONS,
    ITEM_PREFIXES,
    BrokenReference,
    BrokenReferenceReport,
    CategoryCoverage,
    CoverageAnalysis,
    CoverageReport,
    CycleAnalysis,
    CycleFix,
    CycleSummary,
    DependencyAnalysis,
    DependencyHealth,
    DependencyResolution,
    DepthAnalysis,
    EdgeKind,
    Entity,
    EntityCategory,
    EntitySnapshot,
    EntityType,
    GraphEdge,
    GraphNode,
    ItemKind,
    NodeKind,
    NodeMetrics,
    OrphanReport,
    ReferenceFixes,
    ReferenceSuggestion,
    ReferenceValidationOptions,
    RefKind,
    RewrittenReference,
    SubItem,
    SupersessionResult,
    ValidationReport,
    freeze_value,
    parse_item_kind,
    thaw_value,
)
from ._orphans import OrphanDetector
from ._references import ReferenceValidator, levenshtein, similarity
from ._resolver import DependencyResolver
from ._service import OperationResult, SpecGraphService
from ._store import EntityStore, InMemoryEntityStore, JsonEntityStore
from ._supersession import RESERVED_FIELDS, SupersessionEngine

__all__ = [
    "COMPONENT_TYPES",
    "COVERAGE_OK_MESSAGE",
    "DEPENDENCY_EDGE_KINDS",
    "ENTITY_CATEGORIES",
    "ENTITY_COLLECTIONS",
    "ENTITY_PREFIXES",
    "ITEM_COLLECTIONS",
    "ITEM_PREFIXES",
    "REFERENCE_FIELDS",
    "REFERENCE_PATTERNS",
    "RESERVED_FIELDS",
    "BrokenReference",
    "BrokenReferenceReport",
    "CategoryCoverage",
    "CoverageAnalysis",
    "CoverageAnalyzer",
    "CoverageReport",
    "CycleAnalysis",
    "CycleDetector",
    "CycleFix",
    "CycleSummary",
    "DependencyAnalysis",
    "DependencyAnalyzer",
    "DependencyHealth",
    "DependencyResolution",
    "DependencyResolver",
    "DepthAnalysis",
    "EdgeKind",
    "Entity",
    "EntityCategory",
    "EntitySnapshot",
    "EntityStore",
    "EntityType",
    "FieldValue",
    "GraphBuilder",
    "GraphEdge",
    "GraphNode",
    "InMemoryEntityStore",
    "ItemKind",
    "JsonEntityStore",
    "NodeKind",
    "NodeMetrics",
    "OperationResult",
    "OrphanDetector",
    "OrphanReport",
    "ParsedEntityID",
    "ParsedItemID",
    "RefKind",
    "ReferenceField",
    "ReferenceFixes",
    "ReferenceSuggestion",
    "ReferenceValidationOptions",
    "ReferenceValidator",
    "RewrittenReference",
    "SpecGraph",
    "SpecGraphService",
    "SubItem",
    "SupersessionEngine",
    "SupersessionResult",
    "ValidationReport",
    "active_items",
    "entity_from_dict",
    "entity_to_dict",
    "fields_for",
    "format_entity_id",
    "format_item_id",
    "freeze_value",
    "is_active",
    "is_covered",
    "is_valid_reference",
    "item_from_dict",
    "item_history",
    "item_to_dict",
    "iter_field_values",
    "iter_references",
    "latest_item",
    "levenshtein",
    "next_item_id",
    "next_item_number",
    "parse_entity_id",
    "parse_item_id",
    "parse_item_kind",
    "qualify",
    "reference_pattern",
    "resolve_reference",
    "rewrite_field_values",
    "similarity",
    "split_qualified",
    "summarize_cycles",
    "thaw_value",
    "validate_reference_format",
]
