"""
padded_cell configuration (environment driven, read at call time).

  PADDED_CELL_MAX_ITERATIONS=10       default bound for analyze()
  PADDED_CELL_ADD_SCHEMA_FIELDS=1     opt-in kind/schema_version in payloads
  PADDED_CELL_SCHEMA_VERSION=1.0.0    override for the injected version
"""

from __future__ import annotations

import os
from typing import Any, Dict

from padded_cell.errors import InvalidArgument

ENV_MAX_ITERATIONS = "PADDED_CELL_MAX_ITERATIONS"
ENV_ADD_SCHEMA_FIELDS = "PADDED_CELL_ADD_SCHEMA_FIELDS"
ENV_SCHEMA_VERSION = "PADDED_CELL_SCHEMA_VERSION"

MAX_ITERATIONS = 10
MIN_ITERATIONS = 2
DEFAULT_SCHEMA_VERSION = "1.0.0"


def validate_max_iterations(value: Any) -> int:
    # bool is an int subclass; True/False are never a sensible bound
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"max_iterations must be an int, got {type(value).__name__}")
    if value < MIN_ITERATIONS:
        raise InvalidArgument(f"max_iterations must be at least {MIN_ITERATIONS}, got {value}")
    return value


def default_max_iterations() -> int:
    raw = os.getenv(ENV_MAX_ITERATIONS, "").strip()
    if not raw:
        return MAX_ITERATIONS
    try:
        value = int(raw)
    except ValueError as e:
        raise InvalidArgument(f"{ENV_MAX_ITERATIONS} must be an integer, got {raw!r}") from e
    return validate_max_iterations(value)


def _schema_fields_enabled() -> bool:
    v = os.getenv(ENV_ADD_SCHEMA_FIELDS, "").strip().lower()
    return v in {"1", "true", "yes", "on"}


def _schema_version() -> str:
    v = os.getenv(ENV_SCHEMA_VERSION, "").strip()
    return v or DEFAULT_SCHEMA_VERSION


def maybe_add_schema_fields(payload: Dict[str, Any], *, kind: str) -> Dict[str, Any]:
    """
    If enabled, return a copy of `payload` with `kind` and `schema_version`.

    Never overwrites existing keys.
    """
    if not _schema_fields_enabled():
        return payload
    out: Dict[str, Any] = dict(payload)
    out.setdefault("kind", kind)
    out.setdefault("schema_version", _schema_version())
    return out
