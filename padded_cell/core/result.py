"""
Classified outcome of repeatedly applying a transformation.

A result is exactly one of three frozen variants:

- Converged : trace ends in a fixed point
- Cycle     : trace is one full period of a cycle (F(trace[-1]) == trace[0])
- Diverged  : trace hit the iteration bound with no fixed point and no repeat

`TransformationResult` is the union of the three. Derived operations are
plain functions that dispatch on the variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Tuple, Union

from padded_cell.core.edit_distance import nearest
from padded_cell.errors import InvalidArgument, Unresolvable


class Outcome(str, Enum):
    CONVERGED = "converged"
    CYCLE = "cycle"
    DIVERGED = "diverged"


def _freeze_trace(trace: Iterable[str]) -> Tuple[str, ...]:
    steps = tuple(trace)
    if not steps:
        raise InvalidArgument("trace must contain at least one element")
    for i, s in enumerate(steps):
        if not isinstance(s, str):
            raise InvalidArgument(f"trace[{i}] must be a str, got {type(s).__name__}")
    return steps


@dataclass(frozen=True)
class _Traced:
    original: str
    trace: Tuple[str, ...]
    subject: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.original, str):
            raise InvalidArgument(f"original must be a str, got {type(self.original).__name__}")
        # owned immutable copy, never an alias of the caller's list
        object.__setattr__(self, "trace", _freeze_trace(self.trace))

    @property
    def steps(self) -> int:
        return len(self.trace)


@dataclass(frozen=True)
class Converged(_Traced):
    @property
    def outcome(self) -> Outcome:
        return Outcome.CONVERGED


@dataclass(frozen=True)
class Cycle(_Traced):
    def __post_init__(self) -> None:
        super().__post_init__()
        if len(set(self.trace)) != len(self.trace):
            raise InvalidArgument("cycle members must be pairwise distinct")

    @property
    def outcome(self) -> Outcome:
        return Outcome.CYCLE


@dataclass(frozen=True)
class Diverged(_Traced):
    @property
    def outcome(self) -> Outcome:
        return Outcome.DIVERGED


TransformationResult = Union[Converged, Cycle, Diverged]


def _unknown(result: Any) -> TypeError:
    return TypeError(f"not a transformation result: {type(result).__name__}")


def is_well_behaved(result: TransformationResult) -> bool:
    """True iff F(F(x)) == F(x) held on the first try."""
    return isinstance(result, Converged) and len(result.trace) == 1


def misbehaved(result: TransformationResult) -> bool:
    return not is_well_behaved(result)


def is_original_unchanged(result: TransformationResult) -> bool:
    """
    True if the original input already satisfies the transformation.

    For a diverging result this is always True: there is no fixed point
    to offer, so the original stays authoritative.
    """
    if isinstance(result, (Converged, Cycle)):
        return result.original in result.trace
    if isinstance(result, Diverged):
        return True
    raise _unknown(result)


def resolve(result: TransformationResult) -> str:
    """
    Best-effort final string.

    Converged returns the fixed point. A cycle returns the original when it is
    a member, otherwise the member nearest to it by edit distance (first
    occurrence wins ties). Diverged returns the original unchanged.
    """
    if isinstance(result, Converged):
        return result.trace[-1]
    if isinstance(result, Cycle):
        if result.original in result.trace:
            # the user's input is a cycle member; leave it alone
            return result.original
        return nearest(result.trace, result.original)
    if isinstance(result, Diverged):
        return result.original
    raise _unknown(result)


def canonical_form(result: TransformationResult) -> str:
    """
    Deterministic representative of the result, independent of the original.

    Cycles pick the shortest member, then the lexicographically smallest.
    Prefer `resolve()` for anything shown to or written for a user.
    """
    if isinstance(result, Converged):
        return result.trace[-1]
    if isinstance(result, Cycle):
        return min(result.trace, key=lambda s: (len(s), s))
    if isinstance(result, Diverged):
        raise Unresolvable("no canonical form for a diverging result")
    raise _unknown(result)


def describe(result: TransformationResult) -> str:
    if isinstance(result, Converged):
        return f"converges after {result.steps} steps"
    if isinstance(result, Cycle):
        return f"cycles between {result.steps} steps"
    if isinstance(result, Diverged):
        return f"diverges after {result.steps} steps"
    raise _unknown(result)
