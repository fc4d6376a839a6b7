"""
Bubble sort, in place.

The largest element of the live prefix sinks to the end on every pass, so the
scan boundary shrinks by one after each pass. Sorting is complete after a pass
that performs no swaps.

Best case O(n) (one pass, zero swaps), worst/average O(n^2). Stable.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Dict, List, Optional

from .stats import PassStats, SortStats, SortTracer

__all__ = ["sort"]

NAME = "bubble_sort"


def sort(
    a: List[Any],
    *,
    less: Optional[Callable[[Any, Any], bool]] = None,
    config: Optional[Dict[str, Any]] = None,
) -> SortStats:
    """
    Sort `a` into ascending order in place.

    Parameters
    ----------
    a : list
        Sequence to reorder. Mutated in place.
    less : callable, optional
        Strict ordering `less(x, y) -> bool`; defaults to `operator.lt`.
    config : dict | None
        See `sortdemo.algorithms.stats` for the recognised keys.

    Returns
    -------
    SortStats
        Per-pass and total comparison/swap counts for this call.
    """
    if less is None:
        less = operator.lt
    tracer = SortTracer(NAME, a, config)

    end = len(a)
    number = 1
    while True:
        p = PassStats(number)
        for i in range(end - 1):
            p.comparisons += 1
            if less(a[i + 1], a[i]):
                a[i], a[i + 1] = a[i + 1], a[i]
                p.swaps += 1

        tracer.end_pass(p)
        if p.swaps == 0:
            break

        number += 1
        end -= 1  # the last element of this pass is in place

    return tracer.finish()
