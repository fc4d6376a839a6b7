"""
Timing helpers for the demo driver.

One call to an algorithm's `sort(a, less=..., config=...)` is timed with a
monotonic high-resolution clock. Copying the input and GC housekeeping happen
outside the timed block.

Public API (stable):
    elapsed_ms(start_ns, finish_ns) -> int
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "elapsed_ns": int | None,
        "elapsed_ms": int | None,     # whole milliseconds, truncated
        "stats": SortStats | None,
        "output": list,               # the sorted copy
        "status": "ok" | "error",
        "error": str | None,          # populated if status == "error"
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

__all__ = ["elapsed_ms", "time_sort_call"]


def elapsed_ms(start_ns: int, finish_ns: int) -> int:
    """Whole milliseconds between two `time.perf_counter_ns()` readings."""
    return (finish_ns - start_ns) // 1_000_000


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., Any],
    a: List[Any],
    less: Optional[Callable[[Any, Any], bool]] = None,
    config: Optional[Dict[str, Any]] = None,
    disable_gc: bool = False,
) -> Dict[str, Any]:
    """
    Time one in-place sort of a private copy of `a`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for records).
    algo_fn : Callable
        `sort(a, *, less=None, config=None)`; mutates its argument.
    a : list
        Input data. Never mutated; the algorithm gets its own copy.
    less, config :
        Passed through unchanged.
    disable_gc : bool
        If True, collect and disable Python GC around the timed call; restore afterward.
    """
    work = list(a)
    result: Dict[str, Any] = {
        "algo": algo_name,
        "elapsed_ns": None,
        "elapsed_ms": None,
        "stats": None,
        "output": work,
        "status": "ok",
        "error": None,
    }

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        t0 = time.perf_counter_ns()
        try:
            stats = algo_fn(work, less=less, config=config)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"run failed: {e!r}"
            return result
        t1 = time.perf_counter_ns()

    finally:
        # Leave GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    result["elapsed_ns"] = t1 - t0
    result["elapsed_ms"] = elapsed_ms(t0, t1)
    result["stats"] = stats
    return result
