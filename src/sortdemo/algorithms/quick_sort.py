"""
Quicksort, in place, pivot always the rightmost element of the range.

The partition scans from the left. Whenever the scanned element is greater
than the pivot, the pivot steps one slot left by a three-way rotation:

    a[scan]      <- a[pivot - 1]
    a[pivot - 1] <- pivot value
    a[pivot]     <- scanned element

The scan position is not advanced in that case because a new element was
rotated into it. When the scan meets the pivot, the pivot is in its final
position and both sides are sorted independently.

Sub-ranges are kept on an explicit stack (right side first, as a recursive
version would visit them) so already-sorted input, the O(n^2) worst case for
a rightmost pivot, cannot hit the interpreter recursion limit.

Average O(n log n), worst O(n^2). Not stable.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Dict, List, Optional, Tuple

from .stats import PassStats, SortStats, SortTracer

__all__ = ["sort", "quick_sort_range"]

NAME = "quick_sort"


def _partition(
    a: List[Any],
    start: int,
    end: int,
    less: Callable[[Any, Any], bool],
    tracer: SortTracer,
    p: PassStats,
) -> int:
    pivot = end
    left = pivot - 1
    scan = start
    while scan != pivot:
        p.comparisons += 1
        if less(a[pivot], a[scan]):
            larger = a[scan]
            a[scan] = a[left]
            a[left] = a[pivot]
            a[pivot] = larger
            pivot = left
            left = pivot - 1
            p.swaps += 1
            tracer.show_list()
        else:
            scan += 1
    return pivot


def quick_sort_range(
    a: List[Any],
    start: int,
    end: int,
    *,
    less: Optional[Callable[[Any, Any], bool]] = None,
    config: Optional[Dict[str, Any]] = None,
) -> SortStats:
    """
    Sort the inclusive index range `[start, end]` of `a` in place.

    `a[end]` is the first pivot. Ranges holding zero or one element are
    already sorted and return immediately. Printing is decided from `len(a)`,
    not from the size of the range.
    """
    if less is None:
        less = operator.lt
    tracer = SortTracer(NAME, a, config, announce=False)

    stack: List[Tuple[int, int]] = [(start, end)]
    while stack:
        lo, hi = stack.pop()
        if hi - lo < 1:
            continue

        p = PassStats(tracer.stats.passes + 1)
        pivot = _partition(a, lo, hi, less, tracer, p)
        tracer.stats.add_pass(p)

        stack.append((lo, pivot - 1))
        stack.append((pivot + 1, hi))

    return tracer.finish()


def sort(
    a: List[Any],
    *,
    less: Optional[Callable[[Any, Any], bool]] = None,
    config: Optional[Dict[str, Any]] = None,
) -> SortStats:
    """Sort the whole of `a` ascending in place."""
    return quick_sort_range(a, 0, len(a) - 1, less=less, config=config)
