"""
Shuttle sort, in place.

A bidirectional bubble sort: each pass starts one position further right than
the previous one and, once it finds an out-of-order pair, shuttles the smaller
element back towards the front until it meets a smaller-or-equal neighbour or
the start of the list.

The outer loop always runs exactly n-1 passes. A pass without swaps does not
prove the rest of the list is sorted (the next pass starts further right), so
there is no early exit.

Best case O(n), worst/average O(n^2). Stable.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Dict, List, Optional

from .stats import PassStats, SortStats, SortTracer

__all__ = ["sort"]

NAME = "shuttle_sort"


def sort(
    a: List[Any],
    *,
    less: Optional[Callable[[Any, Any], bool]] = None,
    config: Optional[Dict[str, Any]] = None,
) -> SortStats:
    """Sort `a` ascending in place; returns the pass statistics."""
    if less is None:
        less = operator.lt
    tracer = SortTracer(NAME, a, config)

    n = len(a)
    start_index = 0  # where the next pass resumes
    for number in range(1, n):
        p = PassStats(number)
        i, j = start_index, start_index + 1
        while j < n:
            p.comparisons += 1
            if not less(a[j], a[i]):
                break
            a[i], a[j] = a[j], a[i]
            p.swaps += 1

            # Reached the front, nothing left to shuttle on this pass.
            if i == 0:
                break
            i -= 1
            j -= 1

        start_index += 1
        tracer.end_pass(p)

    return tracer.finish()
