"""
Tests for the O(NP) edit distance and nearest-candidate selection.

The reference implementation below is the classic O(N*M) LCS table; the
insert/delete edit distance is len(a) + len(b) - 2 * LCS(a, b).
"""

from __future__ import annotations

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from padded_cell.core.edit_distance import distance, nearest
from padded_cell.errors import InvalidArgument

# Small alphabet so random pairs share plenty of characters
texts = st.text(alphabet="abcd \n", max_size=30)


def _lcs_distance(a: str, b: str) -> int:
    prev = [0] * (len(b) + 1)
    for ca in a:
        cur = [0]
        for j, cb in enumerate(b):
            cur.append(prev[j] + 1 if ca == cb else max(prev[j + 1], cur[j]))
        prev = cur
    return len(a) + len(b) - 2 * prev[-1]


def _rotations(items):
    for i in range(len(items)):
        yield items[i:] + items[:i]


# =============================================================================
# distance()
# =============================================================================

def test_distance_paper_example():
    # Worked example from Wu, Manber, Myers
    a = "acbdeacbed"
    b = "acebdabbabed"
    assert distance(a, b) == 6
    assert distance(b, a) == 6


def test_distance_identical_is_zero():
    assert distance("", "") == 0
    assert distance("abc", "abc") == 0
    assert distance("line one\nline two\n", "line one\nline two\n") == 0


def test_distance_from_empty_is_length():
    assert distance("", "abc") == 3
    assert distance("abc", "") == 3


def test_distance_substitution_costs_two():
    assert distance("abc", "abd") == 2
    assert distance("a", "b") == 2


def test_distance_single_insert_or_delete():
    assert distance("abc", "abxc") == 1
    assert distance("abxc", "abc") == 1


def test_distance_large_input_against_empty():
    limit = 2 ** 16
    b = "\0" * limit
    assert distance("", b) == limit


def test_distance_accepts_non_string_sequences():
    assert distance([1, 2, 3], [1, 3]) == 1
    assert distance((), ("x",)) == 1


def test_distance_rejects_none():
    with pytest.raises(InvalidArgument):
        distance(None, "abc")
    with pytest.raises(InvalidArgument):
        distance("abc", None)


@given(a=texts, b=texts)
@settings(max_examples=300)
def test_distance_matches_lcs_reference(a, b):
    assert distance(a, b) == _lcs_distance(a, b)


@given(a=texts, b=texts)
def test_distance_is_symmetric(a, b):
    assert distance(a, b) == distance(b, a)


@given(s=texts)
def test_distance_to_self_is_zero_and_to_empty_is_length(s):
    assert distance(s, s) == 0
    assert distance("", s) == len(s)


@given(a=texts, b=texts)
def test_distance_zero_iff_equal(a, b):
    assert (distance(a, b) == 0) == (a == b)


# =============================================================================
# nearest()
# =============================================================================

def _nearest_any_order(of: str, to: str) -> str:
    """nearest() over every rotation of `of`; all rotations must agree."""
    candidates = of.split(",")
    results = {nearest(rot, to) for rot in _rotations(candidates)}
    assert len(results) == 1, f"order dependent: {sorted(results)}"
    return results.pop()


def test_nearest_examples_are_order_independent():
    assert _nearest_any_order("abc,abd,ab", "abc") == "abc"
    assert _nearest_any_order("Abc,ABc,ABC", "abc") == "Abc"
    assert _nearest_any_order("ac", "abc") == "ac"


def test_nearest_tie_keeps_first_occurrence():
    # both are two edits away from "aa"
    assert nearest(["ab", "ba"], "aa") == "ab"
    assert nearest(["ba", "ab"], "aa") == "ba"


def test_nearest_accepts_any_iterable():
    assert nearest(iter(["xyz", "abd"]), "abc") == "abd"


def test_nearest_empty_candidates_raises():
    with pytest.raises(InvalidArgument, match="at least one element"):
        nearest([], "abc")


def test_nearest_rejects_none():
    with pytest.raises(InvalidArgument):
        nearest(None, "abc")
    with pytest.raises(InvalidArgument):
        nearest(["abc"], None)


@given(candidates=st.lists(texts, min_size=1, max_size=6), reference=texts)
def test_nearest_is_a_minimum_under_every_rotation(candidates, reference):
    best = min(distance(c, reference) for c in candidates)
    for rot in _rotations(candidates):
        assert distance(nearest(rot, reference), reference) == best


@given(candidates=st.lists(texts, min_size=1, max_size=6, unique=True), reference=texts)
def test_nearest_unique_minimum_is_order_independent(candidates, reference):
    dists = [distance(c, reference) for c in candidates]
    assume(dists.count(min(dists)) == 1)
    expected = candidates[dists.index(min(dists))]
    for rot in _rotations(candidates):
        assert nearest(rot, reference) == expected
