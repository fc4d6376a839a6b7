"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth. It is stable, so for the
stable algorithms (bubble, shuttle) the output must match it exactly, equal
keys included. A strict `less` predicate is turned into a key with
`functools.cmp_to_key`.

Public API (stable):
    oracle_sort(a, less=None) -> list
    equals_oracle(a, out, less=None) -> bool

The oracle never mutates its input and always returns a new list.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, List, Optional, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle", "less_to_key"]


def less_to_key(less: Callable[[Any, Any], bool]):
    def _cmp(x: Any, y: Any) -> int:
        if less(x, y):
            return -1
        if less(y, x):
            return 1
        return 0

    return functools.cmp_to_key(_cmp)


def oracle_sort(
    a: Sequence[Any], less: Optional[Callable[[Any, Any], bool]] = None
) -> List[Any]:
    """Return a new, stably sorted list with the elements of `a`."""
    if less is None:
        return sorted(a)
    return sorted(a, key=less_to_key(less))


def equals_oracle(
    a: Sequence[Any], out: Sequence[Any], less: Optional[Callable[[Any, Any], bool]] = None
) -> bool:
    """True iff `out` is exactly `oracle_sort(a, less)`."""
    return list(out) == oracle_sort(a, less)
