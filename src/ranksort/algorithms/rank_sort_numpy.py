"""
Vectorised ranked-order sort using NumPy comparison matrices.

For x = a[:n] the ranks are

    ge = x[:, None] >= x[None, :]      # keep strict lower triangle (j < i)
    gt = x[:, None] >  x[None, :]      # keep strict upper triangle (j > i)
    rank = ge.sum(axis=1) + gt.sum(axis=1)

which is the same count `rank_sort.compute_ranks` makes with loops, so the
output is identical (stable, permutation ranks). Memory is O(n^2) booleans.

Sequences whose elements all share one of int, float, bool or str become a
native array. Anything else (mixed types, nested sequences, user classes) is
held in an object array, so every comparison goes through the elements' own
`>` / `>=` and the output holds the input's own objects.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from ranksort.algorithms.rank_sort import validate_length
from ranksort.errors import UnorderedTypeError

__all__ = ["as_row", "compute_ranks_numpy", "rank_sort_numpy", "sort"]

_NATIVE_DTYPES = {int: np.int64, float: np.float64, bool: np.bool_, str: np.str_}


def as_row(a: Sequence[Any], n: int) -> np.ndarray:
    """Return the first `n` elements of `a` as a 1-D array."""
    if isinstance(a, np.ndarray):
        return a[:n]
    items = [a[i] for i in range(n)]
    kinds = {type(v) for v in items}
    if len(kinds) == 1:
        dtype = _NATIVE_DTYPES.get(kinds.pop())
        if dtype is not None:
            try:
                return np.asarray(items, dtype=dtype)
            except OverflowError:
                pass  # ints outside int64 stay Python objects
    x = np.empty(n, dtype=object)
    for i, v in enumerate(items):
        x[i] = v
    return x


def compute_ranks_numpy(a: Sequence[Any], n: int) -> np.ndarray:
    """Ranks of positions 0..n-1 as an int64 array."""
    x = as_row(a, n)
    try:
        ge = np.asarray(x[:, None] >= x[None, :], dtype=bool)
        gt = np.asarray(x[:, None] > x[None, :], dtype=bool)
    except TypeError as e:
        raise UnorderedTypeError(None, None, e) from e
    lower = np.tril(ge, k=-1).sum(axis=1)
    upper = np.triu(gt, k=1).sum(axis=1)
    return (lower + upper).astype(np.int64)


def rank_sort_numpy(n: int, a: Sequence[Any]) -> List[Any]:
    """Same contract as `rank_sort.rank_sort`; returns a Python list."""
    validate_length(n, a)
    if n == 0:
        return []
    x = as_row(a, n)
    ranks = compute_ranks_numpy(x, n)
    out = np.empty(n, dtype=x.dtype)
    out[ranks] = x
    return out.tolist()


def sort(a: Sequence[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    """Harness adapter; honours config["n"] (default len(a))."""
    config = config or {}
    return rank_sort_numpy(config.get("n", len(a)), a)
