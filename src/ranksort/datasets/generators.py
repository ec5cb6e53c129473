"""
Dataset generators for rank sort tests and benchmarks.

Implemented distributions:
- "random":      integers drawn uniformly from an inclusive range.
- "few_uniques": at most k distinct values, so ties (and stability) matter.
- "sorted":      [0, 1, ..., n-1]; sorting must return it unchanged.
- "reversed":    [n-1, ..., 0]; every upper-range comparison succeeds.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]
    make_tagged(values: Sequence) -> list[Tagged]

Conventions:
- Ranges in params["range"] are **inclusive** on both ends.
- The caller supplies the RNG; "sorted" and "reversed" ignore it.
- Returns plain Python lists (algorithms stay NumPy-agnostic).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

SUPPORTED_DISTS = {"random", "few_uniques", "sorted", "reversed"}

__all__ = ["SUPPORTED_DISTS", "Tagged", "make_dataset", "make_tagged"]


@dataclass(frozen=True)
class Tagged:
    """
    A value carrying its original position.

    Ordering looks at `key` only, so two records with equal keys compare
    neither greater; `tag` lets a test tell them apart afterwards.
    """

    key: Any
    tag: int

    def __gt__(self, other: "Tagged") -> bool:
        return self.key > other.key

    def __ge__(self, other: "Tagged") -> bool:
        return self.key >= other.key

    def __lt__(self, other: "Tagged") -> bool:
        return self.key < other.key

    def __le__(self, other: "Tagged") -> bool:
        return self.key <= other.key


def make_tagged(values: Sequence[Any]) -> List[Tagged]:
    """Pair every value with its index."""
    return [Tagged(key=v, tag=i) for i, v in enumerate(values)]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements. Must be >= 0.
    spec : dict
        {"dist": "random",      "params": {"range": [lo, hi]}}
        {"dist": "few_uniques", "params": {"k": 3, "range": [lo, hi]}}   # range optional
        {"dist": "sorted"}
        {"dist": "reversed"}
    rng : numpy.random.Generator
        Caller-owned, seeded upstream.

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        On invalid inputs or an unsupported distribution.
    """
    _validate_n(n)
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}

    if dist == "sorted":
        return list(range(n))

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if dist == "random":
        if "range" not in params:
            raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
        lo, hi = _parse_range(params["range"])
        if n == 0:
            return []
        # integers() is half-open; +1 makes hi inclusive
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    # few_uniques
    k = params.get("k")
    if not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range(params.get("range", (0, 9)))
    if n == 0:
        return []
    span = hi - lo + 1
    pool = rng.choice(span, size=min(k, span), replace=False) + lo
    return pool[rng.integers(0, len(pool), size=n)].astype(np.int64).tolist()


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, int):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_range(spec: Any) -> Tuple[int, int]:
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not isinstance(lo_raw, (int, np.integer)) or not isinstance(hi_raw, (int, np.integer)):
        raise ValueError("params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi
