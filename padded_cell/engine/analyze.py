"""
padded_cell analyzer

Applies a transformation repeatedly to a string and classifies the orbit:
- converged (fixed point reached)
- cycle     (a value repeats; trace is one full period)
- diverged  (max_iterations applications, no fixed point, no repeat)

Purely synchronous. Each call owns its trace buffer and hands back an
immutable result.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from padded_cell.config import default_max_iterations, validate_max_iterations
from padded_cell.core.result import (
    Converged,
    Cycle,
    Diverged,
    TransformationResult,
    describe,
    is_well_behaved,
)
from padded_cell.errors import InvalidArgument, TransformationFailure

logger = logging.getLogger(__name__)

Transform = Callable[[str], str]


def _apply(transform: Transform, text: str, *, subject: Any, step: int) -> str:
    try:
        out = transform(text)
    except Exception as e:
        logger.error("transformation failed on %r at step %d: %s", subject, step, e)
        raise TransformationFailure(
            f"transformation failed at step {step}: {e}", subject=subject, step=step
        ) from e
    if not isinstance(out, str):
        raise InvalidArgument(
            f"transformation must return a str, got {type(out).__name__} at step {step}"
        )
    logger.debug("step %d on %r: %d chars", step, subject, len(out))
    return out


def _finish(result: TransformationResult) -> TransformationResult:
    if is_well_behaved(result):
        logger.debug("%r: %s", result.subject, describe(result))
    else:
        logger.warning("%r misbehaved: %s", result.subject, describe(result))
    return result


def analyze(
    transform: Transform,
    original: str,
    *,
    subject: Any = None,
    max_iterations: Optional[int] = None,
) -> TransformationResult:
    """
    Apply `transform` to `original` until it settles, cycles, or runs out.

    `max_iterations` caps the number of applications (>= 2). When None the
    configured default is used (PADDED_CELL_MAX_ITERATIONS, else 10).

    Errors raised by `transform` abort the analysis as TransformationFailure.
    """
    if not callable(transform):
        raise InvalidArgument("transform must be callable")
    if not isinstance(original, str):
        raise InvalidArgument(f"original must be a str, got {type(original).__name__}")
    if max_iterations is None:
        max_iterations = default_max_iterations()
    else:
        max_iterations = validate_max_iterations(max_iterations)

    current = _apply(transform, original, subject=subject, step=1)
    applied: List[str] = [current]
    if current == original:
        return _finish(Converged(original=original, trace=applied, subject=subject))

    # value -> index in `applied`, for O(1) repeat detection
    seen: Dict[str, int] = {current: 0}

    while len(applied) < max_iterations:
        nxt = _apply(transform, current, subject=subject, step=len(applied) + 1)
        if nxt == current:
            return _finish(Converged(original=original, trace=applied, subject=subject))

        start = seen.get(nxt)
        if start is not None:
            return _finish(Cycle(original=original, trace=applied[start:], subject=subject))

        seen[nxt] = len(applied)
        applied.append(nxt)
        current = nxt

    return _finish(Diverged(original=original, trace=applied, subject=subject))
