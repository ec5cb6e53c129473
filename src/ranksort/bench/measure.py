"""
Timing harness for sorting algorithms.

Each sample times exactly one call to `algo_fn(a, config=config)` with
`time.perf_counter_ns`. Copying, GC and warmup happen outside the timed block.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "n": int,                           # config["n"] or len(a)
        "repeats": int,
        "samples_ns": list[int],
        "status": "ok" | "timeout" | "error" | "mismatch",
        "error": str | None,
        "timed_out_on_repeat": int | None,
    }

"mismatch" means the warmup output differed from `expected`; the call is not
timed further.
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional, Sequence

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[Any]],
    a: Sequence[Any],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    defensive_copy: bool,
    expected: Optional[List[Any]] = None,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for records).
    algo_fn : Callable
        sort(a, *, config=None) -> list
    a : sequence
        Input; must not be mutated by the algorithm.
    config : dict | None
        Passed through unchanged (e.g. {"n": 16, "workers": 4}).
    repeats : int
        Number of timed samples.
    warmup : bool
        Make one untimed call first. Forced on when `expected` is given,
        since that call's output is what gets checked.
    disable_gc : bool
        Collect, then disable GC for the timed loop; restored afterwards.
    timeout_seconds : float
        A sample slower than this marks status="timeout" and stops sampling.
    defensive_copy : bool
        Pass a fresh list copy to each call.
    expected : list | None
        Oracle output to compare the warmup result against.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    n = (config or {}).get("n", len(a))
    result: Dict[str, Any] = {
        "algo": algo_name,
        "n": int(n),
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    # ---- Warmup / output check ----
    if (warmup and repeats > 0) or expected is not None:
        try:
            out = algo_fn(list(a) if defensive_copy else a, config=config)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result
        if expected is not None and list(out) != list(expected):
            result["status"] = "mismatch"
            result["error"] = "output differs from oracle"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a) if defensive_copy else a
            try:
                t0 = time.perf_counter_ns()
                algo_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))
            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
