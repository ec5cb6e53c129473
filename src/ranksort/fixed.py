"""
Sorters bound to a single length N.

`FixedSorter(n)` precomputes, once per N, the lower (j < i) and upper (j > i)
index ranges every position compares against, so sorting many inputs of the
same length only pays for the comparisons.

`sort_constant(n, values)` is the early-evaluation entry point: for inputs that
are fully known and hashable, the ranks are memoised, so sorting the same
constant again skips the comparisons.

Public API (stable):
    FixedSorter(n)
    make_sorter(n) -> FixedSorter          # cached per n
    sort_constant(n, values) -> tuple
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, List, Sequence, Tuple

from ranksort.algorithms.rank_sort import scatter, validate_length
from ranksort.errors import UnorderedTypeError

__all__ = ["FixedSorter", "make_sorter", "sort_constant"]


class FixedSorter:
    """Callable ranked-order sort for inputs of length >= n."""

    __slots__ = ("n", "_lower", "_upper")

    def __init__(self, n: int) -> None:
        if not isinstance(n, int) or isinstance(n, bool) or n < 0:
            raise ValueError(f"n must be a nonnegative int; got {n!r}")
        self.n = n
        self._lower: Tuple[range, ...] = tuple(range(i) for i in range(n))
        self._upper: Tuple[range, ...] = tuple(range(i + 1, n) for i in range(n))

    def __repr__(self) -> str:
        return f"FixedSorter(n={self.n})"

    def ranks(self, a: Sequence[Any]) -> List[int]:
        validate_length(self.n, a)
        out: List[int] = []
        for i in range(self.n):
            x = a[i]
            r = 0
            j = -1
            try:
                for j in self._lower[i]:
                    if x >= a[j]:
                        r += 1
                for j in self._upper[i]:
                    if x > a[j]:
                        r += 1
            except TypeError as e:
                raise UnorderedTypeError(i, j, e) from e
            out.append(r)
        return out

    def __call__(self, a: Sequence[Any]) -> List[Any]:
        if self.n == 0:
            validate_length(0, a)
            return []
        return scatter(a, self.ranks(a))


@lru_cache(maxsize=None)
def make_sorter(n: int) -> FixedSorter:
    """Shared FixedSorter for `n`."""
    return FixedSorter(n)


@lru_cache(maxsize=1024)
def _constant_ranks(n: int, key: Tuple[Tuple[type, Any], ...]) -> Tuple[int, ...]:
    return tuple(make_sorter(n).ranks([v for _, v in key]))


def sort_constant(n: int, values: Sequence[Any]) -> Tuple[Any, ...]:
    """
    Sort a fully known input, memoising its ranks.

    The cache is keyed on each value's type as well as the value, because
    `1`, `1.0` and `True` compare and hash equal. The result is always built
    from the caller's own values. Only the first `n` values participate, so
    inputs that differ past `n` share a cache entry. Values must be hashable.
    """
    validate_length(n, values)
    prefix = [values[i] for i in range(n)]
    ranks = _constant_ranks(n, tuple((type(v), v) for v in prefix))
    return tuple(scatter(prefix, ranks))
