"""
Property helpers for validating sorting results.

Public API (stable):
    is_nondecreasing(xs, less=None) -> bool
    first_nondecreasing_violation_index(xs, less=None) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    is_stable(before, after, key) -> bool

Notes
-----
- Ordering checks take the same strict `less` predicate the algorithms use,
  defaulting to `<`.
- Multiset checks need hashable elements (tuples, floats, ints).
- Stability cannot be inferred from values alone when equal keys are
  indistinguishable, so `is_stable` expects tagged items, e.g. (key, tag)
  pairs, and a `key` function extracting the sort key.
"""

from __future__ import annotations

import operator
from collections import Counter, defaultdict
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
]

Less = Callable[[Any, Any], bool]


def first_nondecreasing_violation_index(
    xs: Sequence[Any], less: Optional[Less] = None
) -> int | None:
    """
    Return the first index i where xs[i+1] < xs[i], or None if nondecreasing.

    Useful for precise error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    if less is None:
        less = operator.lt
    for i in range(len(xs) - 1):
        if less(xs[i + 1], xs[i]):
            return i
    return None


def is_nondecreasing(xs: Sequence[Any], less: Optional[Less] = None) -> bool:
    """Return True iff no element is less than its predecessor."""
    return first_nondecreasing_violation_index(xs, less) is None


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    """
    Return True iff `a` and `b` contain exactly the same multiset of values.
    """
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Hashable], b: Sequence[Hashable]) -> Dict[Any, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[Any, int] = {}
    for k in set(ca.keys()) | set(cb.keys()):
        d = ca.get(k, 0) - cb.get(k, 0)
        if d != 0:
            diff[k] = d
    return diff


def is_stable(before: Sequence[Any], after: Sequence[Any], key: Callable[[Any], Hashable]) -> bool:
    """
    Return True iff items sharing a key appear in `after` in the same relative
    order as in `before`. Items must be distinguishable (e.g. tagged tuples).
    """
    def groups(xs: Sequence[Any]) -> Dict[Hashable, List[Any]]:
        g: Dict[Hashable, List[Any]] = defaultdict(list)
        for x in xs:
            g[key(x)].append(x)
        return g

    return groups(before) == groups(after)
