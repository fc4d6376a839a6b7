"""
Element types the algorithms can sort.

An ElementType bundles the three capabilities the project needs from a value:
a strict ordering (`less`), a parser for one text token (`parse`) and a
formatter (`format`). The algorithms only ever see `less`; the I/O helpers only
use `parse` and `format`.

Built-in instances:
    FLOAT  - finite Python floats, written with the shortest round-trip repr
    INT    - Python ints
    CAT    - Cat records ordered ascending by weight
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Any, Callable

__all__ = ["ElementType", "Cat", "by_weight", "FLOAT", "INT", "CAT", "parse_finite_float"]


@dataclass(frozen=True)
class ElementType:
    name: str
    parse: Callable[[str], Any]
    format: Callable[[Any], str] = str
    less: Callable[[Any, Any], bool] = operator.lt


@dataclass
class Cat:
    """A record with a single integer weight."""

    weight: int = 0

    @classmethod
    def parse(cls, token: str) -> "Cat":
        return cls(int(token))

    def __str__(self) -> str:
        return str(self.weight)


def parse_finite_float(token: str) -> float:
    """Like `float`, but `nan`, `inf` and `infinity` are not numbers here."""
    x = float(token)
    if not math.isfinite(x):
        raise ValueError(f"not a finite number: {token!r}")
    return x


def by_weight(a: Cat, b: Cat) -> bool:
    # Cats could be compared in many ways; lighter first.
    return a.weight < b.weight


FLOAT = ElementType("float", parse_finite_float, repr)
INT = ElementType("int", int)
CAT = ElementType("cat", Cat.parse, str, by_weight)
