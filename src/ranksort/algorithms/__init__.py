"""
Sorting algorithms.

Each module exposes the harness signature `sort(a, *, config=None)` so the
benchmark runner can import it by name as `ranksort.algorithms.<name>`.
"""
