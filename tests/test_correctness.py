"""
Correctness tests for the rank sort against the oracle (Python's built-in sorted).

What we check, for every implementation:
- Output exactly matches the oracle over the first n elements
- Nondecreasing order and permutation preservation (diagnostics)
- No input mutation
- Determinism (same input -> same output)
- Stability, using tagged records that compare on key only

Note:
- This file inserts the project `src/` onto sys.path so tests run without installing the package.
"""

from __future__ import annotations

import pathlib
import sys
from typing import Any, Callable, List

import pytest
from hypothesis import given, settings, strategies as st

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from ranksort.algorithms import builtin_timsort, rank_sort, rank_sort_numpy
from ranksort.datasets import make_tagged
from ranksort.fixed import FixedSorter
from ranksort.validate import (
    assert_no_mutation,
    is_nondecreasing,
    is_permutation,
    is_rank_permutation,
    is_stable,
    oracle_sort,
)


def _fixed_sort(a: List[Any], *, config: dict | None = None) -> List[Any]:
    n = (config or {}).get("n", len(a))
    return FixedSorter(n)(a)


def _threaded_sort(a: List[Any], *, config: dict | None = None) -> List[Any]:
    return rank_sort.sort(a, config={**(config or {}), "workers": 4})


SORTERS = {
    "rank_sort": rank_sort.sort,
    "rank_sort_threaded": _threaded_sort,
    "rank_sort_numpy": rank_sort_numpy.sort,
    "fixed_sorter": _fixed_sort,
    "builtin_timsort": builtin_timsort.sort,
}


@pytest.fixture(params=sorted(SORTERS))
def sort(request) -> Callable[..., List[Any]]:
    return SORTERS[request.param]


# ------------------------- helpers ------------------------- #


def _check_one(sort_fn, a: List[Any], n: int | None = None) -> None:
    """Common assertion bundle for one input."""
    config = {} if n is None else {"n": n}
    n = len(a) if n is None else n

    a_before = list(a)
    out = sort_fn(a, config=config)
    assert_no_mutation(a_before, a)

    assert out == oracle_sort(a, n), "Output must exactly match the oracle"
    assert len(out) == n
    assert is_nondecreasing(out), "Output is not nondecreasing"
    assert is_permutation(a[:n], out), "Output is not a permutation of input"

    out2 = sort_fn(a, config=config)
    assert out2 == out, "Sort must be deterministic"


# ------------------------- unit tests (deterministic) ------------------------- #


@pytest.mark.parametrize(
    "a",
    [
        [],
        [5],
        [2, 1],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [7, 7, 7, 7],
        [1, 3, 2, 3, 1, 2],
        [5, 7, 3, 1, -5, 9],
        list(range(20)),
        list(range(20))[::-1],
        [0, -1, 5, -10, 3, 3, 2],
    ],
)
def test_unit_cases(sort, a: List[int]) -> None:
    _check_one(sort, a)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4])
def test_prefix_only(sort, n: int) -> None:
    _check_one(sort, [4, 1, 9, 2], n)


def test_strings(sort) -> None:
    _check_one(sort, ["pear", "apple", "fig", "apple"])


def test_stability_small(sort) -> None:
    tagged = make_tagged([2, 2, 1])
    out = sort(tagged, config={"n": 3})
    assert [t.key for t in out] == [1, 2, 2]
    assert [t.tag for t in out] == [2, 0, 1]


# ------------------------- property-based tests (randomized) ------------------------- #

small_ints = st.integers(min_value=-10_000, max_value=10_000)


@settings(deadline=None, max_examples=60)
@given(st.lists(small_ints, min_size=0, max_size=60))
def test_property_random(a: List[int]) -> None:
    for sort_fn in SORTERS.values():
        _check_one(sort_fn, a)


@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(min_value=0, max_value=3), min_size=0, max_size=60))
def test_property_many_duplicates_stable(keys: List[int]) -> None:
    tagged = make_tagged(keys)
    for sort_fn in (rank_sort.sort, rank_sort_numpy.sort, _fixed_sort):
        out = sort_fn(tagged)
        assert [t.key for t in out] == sorted(keys)
        assert is_stable(out)


@settings(deadline=None, max_examples=60)
@given(st.lists(small_ints, min_size=0, max_size=60), st.data())
def test_property_prefix(a: List[int], data) -> None:
    n = data.draw(st.integers(min_value=0, max_value=len(a)))
    _check_one(rank_sort.sort, a, n)


@settings(deadline=None, max_examples=60)
@given(st.lists(small_ints, min_size=0, max_size=60))
def test_property_idempotent(a: List[int]) -> None:
    once = rank_sort.rank_sort(len(a), a)
    assert rank_sort.rank_sort(len(once), once) == once


@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(min_value=-5, max_value=5), min_size=0, max_size=60))
def test_property_ranks_are_permutation(a: List[int]) -> None:
    ranks = rank_sort.compute_ranks(a, len(a))
    assert is_rank_permutation(ranks)
    assert rank_sort_numpy.compute_ranks_numpy(a, len(a)).tolist() == ranks
    assert FixedSorter(len(a)).ranks(a) == ranks


@settings(deadline=None, max_examples=40)
@given(st.lists(st.floats(allow_nan=False, allow_infinity=True), min_size=0, max_size=40))
def test_property_floats(a: List[float]) -> None:
    for sort_fn in SORTERS.values():
        _check_one(sort_fn, a)


# ------------------------- heterogeneous elements ------------------------- #


@pytest.mark.parametrize(
    "a",
    [
        [2, 1.5, 1, 0.5],
        [1, 1.0, True, 0],
        [3, 2**70, -1, 2.5],
    ],
)
def test_mixed_numbers_keep_their_types(sort, a: List[Any]) -> None:
    out = sort(a)
    expected = oracle_sort(a)
    assert out == expected
    assert [type(v) for v in out] == [type(v) for v in expected]


def test_ragged_lists(sort) -> None:
    a = [[2, 1], [1], [2], [1, 5, 0]]
    out = sort(a)
    assert out == [[1], [1, 5, 0], [2], [2, 1]]
    assert all(any(v is x for x in a) for v in out)


def test_mixed_unorderable_types_rejected(sort) -> None:
    with pytest.raises(TypeError):
        sort([1, "a"])
