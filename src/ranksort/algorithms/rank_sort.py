"""
Ranked-order sort for a fixed length N.

Instead of swapping, every position computes the index its element occupies in
the sorted output and the elements are written there directly:

    rank[i] = #{ j < i     : a[i] >= a[j] }    # lower range
            + #{ i < j < N : a[i] >  a[j] }    # upper range
    out[rank[i]] = a[i]

The `>=` / `>` asymmetry makes the result stable. For equal elements at p < q,
p counts toward q's rank but q never counts toward p's, so every pair of
positions contributes to exactly one rank and the ranks form a permutation of
0..N-1 even with duplicates.

Public API (stable):
    rank_lower(a, i) -> int
    rank_upper(a, i, n) -> int
    compute_rank(a, i, n) -> int
    compute_ranks(a, n, *, workers=None) -> list[int]
    scatter(a, ranks) -> list
    rank_sort(n, a, *, workers=None) -> list
    sort(a, *, config=None) -> list            # benchmark harness adapter

Conventions:
- Only the first `n` elements of `a` are consulted; `a` is never mutated.
- `len(a) < n` raises InvalidLengthError before any comparison.
- Elements that cannot be ordered raise UnorderedTypeError on first comparison.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence

from ranksort.errors import InvalidLengthError, UnorderedTypeError

__all__ = [
    "rank_lower",
    "rank_upper",
    "compute_rank",
    "compute_ranks",
    "scatter",
    "rank_sort",
    "sort",
    "validate_length",
]


# ------------------------- rank computation ------------------------- #


def rank_lower(a: Sequence[Any], i: int) -> int:
    """Count positions j < i with a[i] >= a[j]."""
    x = a[i]
    count = 0
    for j in range(i):
        try:
            if x >= a[j]:
                count += 1
        except TypeError as e:
            raise UnorderedTypeError(i, j, e) from e
    return count


def rank_upper(a: Sequence[Any], i: int, n: int) -> int:
    """Count positions i < j < n with a[i] > a[j]."""
    x = a[i]
    count = 0
    for j in range(i + 1, n):
        try:
            if x > a[j]:
                count += 1
        except TypeError as e:
            raise UnorderedTypeError(i, j, e) from e
    return count


def compute_rank(a: Sequence[Any], i: int, n: int) -> int:
    """Destination index of a[i] in the sorted first `n` elements."""
    return rank_lower(a, i) + rank_upper(a, i, n)


def compute_ranks(
    a: Sequence[Any], n: int, *, workers: Optional[int] = None
) -> List[int]:
    """
    Compute the rank of every position 0..n-1.

    Parameters
    ----------
    a : sequence
        Random-access input; only a[:n] is read.
    n : int
        Number of positions to rank.
    workers : int | None
        If > 1, positions are ranked concurrently on a thread pool. Ranks are
        independent of each other, so the result is identical to the serial
        path.

    Returns
    -------
    list[int]
        A permutation of 0..n-1 (for a valid total order).
    """
    if workers is None or workers <= 1 or n < 2:
        return [compute_rank(a, i, n) for i in range(n)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(compute_rank, a, i, n) for i in range(n)]
        return [f.result() for f in futures]


# ------------------------- scatter ------------------------- #


def scatter(a: Sequence[Any], ranks: Sequence[int]) -> List[Any]:
    """Return a new list with out[ranks[i]] = a[i] for each i."""
    out: List[Any] = [None] * len(ranks)
    for i, r in enumerate(ranks):
        out[r] = a[i]
    return out


# ------------------------- driver ------------------------- #


def validate_length(n: int, a: Sequence[Any]) -> None:
    """Reject a bad `n` or an input shorter than `n`."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError(f"n must be an int; got {n!r}")
    if n < 0:
        raise ValueError(f"n must be nonnegative; got {n}")
    length = len(a)
    if length < n:
        raise InvalidLengthError(n, length)


def rank_sort(n: int, a: Sequence[Any], *, workers: Optional[int] = None) -> List[Any]:
    """
    Sort the first `n` elements of `a` into a new ascending, stable list.

    Raises
    ------
    ValueError
        If `n` is not a nonnegative int.
    InvalidLengthError
        If `len(a) < n`.
    UnorderedTypeError
        If two elements cannot be compared.
    """
    validate_length(n, a)
    if n == 0:
        return []
    ranks = compute_ranks(a, n, workers=workers)
    return scatter(a, ranks)


def sort(a: Sequence[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    """
    Harness adapter.

    Recognised config keys:
        n       : fixed length (default len(a))
        workers : thread count for rank computation (default serial)
    """
    config = config or {}
    n = config.get("n", len(a))
    return rank_sort(n, a, workers=config.get("workers"))
