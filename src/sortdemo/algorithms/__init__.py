"""
Algorithms package public API.

Each algorithm lives in its own module exposing

    sort(a: list, *, less=None, config: dict | None = None) -> SortStats

and sorts `a` in place. Callers may resolve modules by name:

    from sortdemo.algorithms import ALGORITHM_NAMES, get_sort
"""

from __future__ import annotations

import importlib
from typing import Callable

from .stats import DEFAULT_PRINT_THRESHOLD, PassStats, SortStats

ALGORITHM_NAMES = ("bubble_sort", "shuttle_sort", "quick_sort")

__all__ = [
    "ALGORITHM_NAMES",
    "DEFAULT_PRINT_THRESHOLD",
    "PassStats",
    "SortStats",
    "get_sort",
]


def get_sort(name: str) -> Callable[..., SortStats]:
    """Return the `sort` callable of `sortdemo.algorithms.<name>`."""
    if name not in ALGORITHM_NAMES:
        raise ValueError(f"Unknown algorithm: {name!r}. Supported: {list(ALGORITHM_NAMES)}")
    mod = importlib.import_module(f"{__name__}.{name}")
    return getattr(mod, "sort")
