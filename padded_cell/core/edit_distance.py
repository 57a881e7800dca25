"""
Edit distance between two sequences, and nearest-candidate selection.

Implementation of "An O(NP) Sequence Comparison Algorithm"
by Sun Wu, Udi Manber, Gene Myers (1990).

Distance counts insertions and deletions; a substitution costs two
(one delete + one insert). Runtime is O(N*P) where P is the number of
deletions, so near-identical inputs (the common case for formatter
output) are cheap regardless of length.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, TypeVar

from padded_cell.errors import InvalidArgument

S = TypeVar("S", bound=Sequence)


def distance(seq1: Optional[Sequence], seq2: Optional[Sequence]) -> int:
    """Return the edit distance between `seq1` and `seq2` (symmetric, >= 0)."""
    if seq1 is None:
        raise InvalidArgument("seq1 must not be None")
    if seq2 is None:
        raise InvalidArgument("seq2 must not be None")

    # preliminaries: a is the shorter sequence, n >= m
    if len(seq1) < len(seq2):
        a, b = seq1, seq2
    else:
        a, b = seq2, seq1
    m = len(a)
    n = len(b)
    delta = n - m

    # fp[-(m+1)..(n+1)] := -1, shifted by `offset` so indexes stay >= 0
    offset = m + 1
    fp: List[int] = [-1] * (m + n + 3)

    def snake(k: int) -> int:
        # k is already offset; the diagonal is k - offset
        y = max(fp[k - 1] + 1, fp[k + 1])
        x = y - k + offset
        while x < m and y < n and a[x] == b[y]:
            x += 1
            y += 1
        return y

    sink = delta + offset
    p = -1
    while True:
        p += 1
        for k in range(-p + offset, sink):
            fp[k] = snake(k)
        for k in range(sink + p, sink, -1):
            fp[k] = snake(k)
        fp[sink] = snake(sink)
        if fp[sink] >= n:
            break

    return delta + 2 * p


def nearest(candidates: Iterable[S], reference: Sequence) -> S:
    """
    Return the candidate with the minimum edit distance to `reference`.

    Candidates are scanned in order and the first minimum wins, so a
    unique nearest candidate is returned regardless of ordering.
    """
    if candidates is None:
        raise InvalidArgument("candidates must not be None")
    if reference is None:
        raise InvalidArgument("reference must not be None")

    best: Optional[S] = None
    best_distance = -1
    for candidate in candidates:
        d = distance(candidate, reference)
        if best is None or d < best_distance:
            best = candidate
            best_distance = d
            if d == 0:
                break

    if best is None:
        raise InvalidArgument("candidates must contain at least one element")
    return best
