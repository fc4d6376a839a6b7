"""
Input files for the demo driver.

Distributions:
    ascending    [0, 1, ..., n-1]. A rightmost pivot is always the largest
                 element, so quicksort degrades to O(n^2).
    reversed     [n-1, ..., 0]. Every adjacent pair starts out of order; bubble
                 and shuttle sort both make n(n-1)/2 swaps.
    uniform      floats in [low, high), the typical float data file.
    few_uniques  integers drawn from k distinct weights, so a Cat file has
                 plenty of equal keys to show stability.

    make_dataset(n, {"dist": ..., "params": {...}}, rng) -> list

The RNG is owned by the caller; ascending and reversed ignore it.
"""

from __future__ import annotations

from typing import Any, Dict, List

import numpy as np

SUPPORTED_DISTS = {"ascending", "reversed", "uniform", "few_uniques"}
__all__ = ["SUPPORTED_DISTS", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[Any]:
    """
    Build `n` values for `spec["dist"]`.

    Params:
        uniform:      {"low": 0.0, "high": 1000.0}
        few_uniques:  {"k": 3, "max_weight": 20}   # weights drawn from 1..max_weight

    Raises ValueError for a negative or non-int `n`, an unknown distribution
    or out-of-range params.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"n must be a nonnegative int; got {n!r}")
    if not isinstance(spec, dict) or spec.get("dist") not in SUPPORTED_DISTS:
        raise ValueError(f"spec must be a dict with dist in {sorted(SUPPORTED_DISTS)}; got {spec!r}")

    dist = spec["dist"]
    params = spec.get("params") or {}

    if dist == "ascending":
        return list(range(n))
    if dist == "reversed":
        return list(range(n))[::-1]
    if dist == "uniform":
        return _uniform(n, params, rng)
    return _few_uniques(n, params, rng)


def _uniform(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[float]:
    low = float(params.get("low", 0.0))
    high = float(params.get("high", 1000.0))
    if not (np.isfinite(low) and np.isfinite(high) and low < high):
        raise ValueError(f"uniform needs finite low < high; got low={low}, high={high}")
    return rng.uniform(low, high, size=n).tolist()


def _few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    max_weight = params.get("max_weight", 20)
    if not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques needs an int k >= 1; got {k!r}")
    if not isinstance(max_weight, int) or max_weight < k:
        raise ValueError(f"few_uniques needs an int max_weight >= k; got {max_weight!r}")
    if n == 0:
        return []

    weights = rng.choice(np.arange(1, max_weight + 1), size=min(k, n), replace=False)
    return [int(w) for w in rng.choice(weights, size=n)]
