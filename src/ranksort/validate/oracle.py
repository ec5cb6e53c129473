"""
Oracle for rank sort correctness.

Python's built-in `sorted()` is stable and deterministic, so for a valid total
order the rank sort must reproduce it element for element, including the order
of equal elements.

Public API (stable):
    oracle_sort(a, n=None) -> list
    equals_oracle(a, out, n=None) -> bool
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any], n: Optional[int] = None) -> List[Any]:
    """Return a new sorted list of the first `n` elements (all by default)."""
    if n is None:
        n = len(a)
    return sorted(a[i] for i in range(n))


def equals_oracle(a: Sequence[Any], out: Sequence[Any], n: Optional[int] = None) -> bool:
    """True iff `out` is exactly `oracle_sort(a, n)`."""
    return list(out) == oracle_sort(a, n)
