"""
padded_cell error taxonomy.

- InvalidArgument       : bad input at a call boundary (fails before any work)
- Unresolvable          : no canonical form exists (diverging result)
- TransformationFailure : the supplied transformation raised; analysis aborted

Divergence itself is NOT an error. It is a normal classification.
"""

from __future__ import annotations

from typing import Any, Optional


class PaddedCellError(Exception):
    """Base class for every error raised by padded_cell."""


class InvalidArgument(PaddedCellError, ValueError):
    pass


class Unresolvable(PaddedCellError, ValueError):
    pass


class TransformationFailure(PaddedCellError, RuntimeError):
    """
    Raised when the transformation itself fails during an application.

    `step` is the 1-based application index that failed. The underlying
    exception is available as `__cause__`.
    """

    def __init__(self, message: str, *, subject: Any = None, step: Optional[int] = None):
        super().__init__(message)
        self.subject = subject
        self.step = step
