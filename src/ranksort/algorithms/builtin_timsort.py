"""
Baseline: Python's built-in `sorted()` over the first n elements.

Used as the reference point in benchmark sweeps.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ranksort.algorithms.rank_sort import validate_length

__all__ = ["sort"]


def sort(a: Sequence[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    """Harness adapter; sorts the first config["n"] elements (default len(a))."""
    config = config or {}
    n = config.get("n", len(a))
    validate_length(n, a)
    return sorted(a[i] for i in range(n))
