"""
Exceptions raised by the rank sort.

Every error derives from both `RankSortError` and the builtin exception a
caller would naturally expect (`ValueError` for bad lengths, `TypeError` for
elements that cannot be ordered), so either can be caught.
"""

from __future__ import annotations

from typing import Optional

__all__ = ["RankSortError", "InvalidLengthError", "UnorderedTypeError"]


class RankSortError(Exception):
    """Base class for rank sort failures."""


class InvalidLengthError(RankSortError, ValueError):
    """The input holds fewer than `n` elements."""

    def __init__(self, n: int, length: int) -> None:
        super().__init__(f"input has {length} elements, need at least n={n}")
        self.n = n
        self.length = length


class UnorderedTypeError(RankSortError, TypeError):
    """
    Two elements could not be compared with `>` / `>=`.

    `i` and `j` are the positions involved when known (the vectorised path
    compares whole rows at once and leaves them as None).
    """

    def __init__(self, i: Optional[int], j: Optional[int], cause: TypeError) -> None:
        if i is None or j is None:
            msg = f"elements are not comparable: {cause}"
        else:
            msg = f"elements at positions {i} and {j} are not comparable: {cause}"
        super().__init__(msg)
        self.i = i
        self.j = j
