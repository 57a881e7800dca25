"""
JSON-ready view of a TransformationResult.

Collaborators that persist diagnostics for misbehaving transformations
consume this dict; writing it anywhere is their job.

Shape (docs/schemas/padded-cell-result.v1.json):
  kind, outcome, steps, message, well_behaved, original_unchanged,
  resolved, subject, trace (optional)
"""

from __future__ import annotations

from typing import Any, Dict

from padded_cell.config import maybe_add_schema_fields
from padded_cell.core.result import (
    TransformationResult,
    describe,
    is_original_unchanged,
    is_well_behaved,
    resolve,
)

PAYLOAD_KIND = "padded_cell"


def result_to_json(result: TransformationResult, *, include_trace: bool = True) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "kind": PAYLOAD_KIND,
        "outcome": result.outcome.value,
        "steps": result.steps,
        "message": describe(result),
        "well_behaved": is_well_behaved(result),
        "original_unchanged": is_original_unchanged(result),
        "resolved": resolve(result),
        "subject": None if result.subject is None else str(result.subject),
    }
    if include_trace:
        payload["trace"] = list(result.trace)
    return maybe_add_schema_fields(payload, kind=PAYLOAD_KIND)
