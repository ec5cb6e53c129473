"""
ranksort: stable ranked-order sorting for a fixed length N.

    from ranksort import rank_sort
    rank_sort(6, [5, 7, 3, 1, -5, 9])   # [-5, 1, 3, 5, 7, 9]
"""

from .algorithms.rank_sort import compute_rank, compute_ranks, rank_sort, scatter
from .errors import InvalidLengthError, RankSortError, UnorderedTypeError
from .fixed import FixedSorter, make_sorter, sort_constant

__all__ = [
    "rank_sort",
    "compute_rank",
    "compute_ranks",
    "scatter",
    "FixedSorter",
    "make_sorter",
    "sort_constant",
    "RankSortError",
    "InvalidLengthError",
    "UnorderedTypeError",
]
