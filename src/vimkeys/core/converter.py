"""
Projection of parser output into the storage shape.
"""

from typing import Any

from . import ir


def to_external(outcome: ir.ParseOutcome) -> list[ir.ExternalMapping]:
    """
    Convert parsed mappings to the storage schema, preserving order.

    Drops the parser-only ``silent`` and ``line`` fields.
    """
    return [
        ir.ExternalMapping(
            mode=record.mode,
            lhs=record.lhs,
            rhs=record.rhs,
            is_recursive=record.is_recursive,
        )
        for record in outcome.mappings
    ]


def to_storage_records(outcome: ir.ParseOutcome) -> list[dict[str, Any]]:
    """JSON-ready storage records, e.g. ``{"mode": "normal", ..., "isRecursive": false}``."""
    return [mapping.model_dump(mode="json", by_alias=True) for mapping in to_external(outcome)]
