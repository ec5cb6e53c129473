"""
Property helpers for validating rank sort results.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    is_rank_permutation(ranks) -> bool
    is_stable(out) -> bool
    assert_no_mutation(before, after) -> None

Stability cannot be read off plain values, since equal keys are
indistinguishable. `is_stable` expects records with `key` and `tag` attributes
(see `ranksort.datasets.make_tagged`) and checks that tags increase within
every run of equal keys.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Sequence

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_rank_permutation",
    "is_stable",
    "assert_no_mutation",
]


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> int | None:
    """
    Return the first index i where xs[i] > xs[i+1], or None if nondecreasing.

        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """True iff `a` and `b` hold the same multiset of (hashable) values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Map value -> count_a - count_b for every value whose counts differ.

    Empty dict means identical multiplicities.
    """
    ca = Counter(a)
    cb = Counter(b)
    return {k: ca[k] - cb[k] for k in ca.keys() | cb.keys() if ca[k] != cb[k]}


def is_rank_permutation(ranks: Sequence[int]) -> bool:
    """True iff `ranks` is exactly {0, ..., len(ranks)-1}."""
    return sorted(ranks) == list(range(len(ranks)))


def is_stable(out: Sequence[Any]) -> bool:
    """True iff equal keys in `out` appear in increasing tag order."""
    for prev, cur in zip(out, out[1:]):
        if prev.key == cur.key and prev.tag >= cur.tag:
            return False
    return True


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that the input was left untouched.

    Raises AssertionError naming the first differing index.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x}, after={y}")
