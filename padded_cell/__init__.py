"""
padded_cell: convergence analysis for not-quite-idempotent text transformations.

Apply a transformation F repeatedly, classify the orbit as converged,
cycle, or diverged, and pick the result that least disturbs the input.

Layout:
- padded_cell/core   : edit distance, result variants, JSON payload
- padded_cell/engine : analyze() driver loop
- padded_cell/config : environment-driven defaults
- padded_cell/errors : error taxonomy
"""

# Convenience re-exports (stable):
from padded_cell.config import MAX_ITERATIONS  # noqa: F401
from padded_cell.core.edit_distance import distance, nearest  # noqa: F401
from padded_cell.core.payload import result_to_json  # noqa: F401
from padded_cell.core.result import (  # noqa: F401
    Converged,
    Cycle,
    Diverged,
    Outcome,
    TransformationResult,
    canonical_form,
    describe,
    is_original_unchanged,
    is_well_behaved,
    misbehaved,
    resolve,
)
from padded_cell.engine.analyze import analyze  # noqa: F401
from padded_cell.errors import (  # noqa: F401
    InvalidArgument,
    PaddedCellError,
    TransformationFailure,
    Unresolvable,
)
