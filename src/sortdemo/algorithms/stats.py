"""
Instrumentation shared by the in-place sorting algorithms.

Every algorithm counts comparisons and swaps per pass, keeps running totals,
and (when enabled) prints each pass and the whole list to the console.

Public API (stable):
    PassStats, SortStats
    SortTracer(algo, a, config)      # resolves printing policy from config
    resolve_config(config) -> dict

Config keys understood by every algorithm:
    {
        "print_threshold": 10,   # lists longer than this are not printed
        "verbose": None,         # True/False forces printing on/off
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console

DEFAULT_PRINT_THRESHOLD: int = 10
RULE: str = "-------------------------------"

__all__ = [
    "DEFAULT_PRINT_THRESHOLD",
    "PassStats",
    "SortStats",
    "SortTracer",
    "format_sequence",
    "resolve_config",
]

_console = Console(highlight=False)


@dataclass
class PassStats:
    number: int
    comparisons: int = 0
    swaps: int = 0


@dataclass
class SortStats:
    """Counters for a single sort invocation."""

    algo: str
    comparisons: int = 0
    swaps: int = 0
    passes: int = 0
    per_pass: List[PassStats] = field(default_factory=list)

    def add_pass(self, p: PassStats) -> None:
        # Preserve the running totals.
        self.per_pass.append(p)
        self.passes += 1
        self.comparisons += p.comparisons
        self.swaps += p.swaps


def resolve_config(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Merge `config` over the defaults and validate it."""
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError("config must be a dict if provided")

    unknown = set(config) - {"print_threshold", "verbose"}
    if unknown:
        raise ValueError(f"Unknown sort config keys: {sorted(unknown)}")

    threshold = config.get("print_threshold", DEFAULT_PRINT_THRESHOLD)
    if not isinstance(threshold, int) or threshold < 0:
        raise ValueError(f"print_threshold must be an integer >= 0; got {threshold!r}")

    verbose = config.get("verbose", None)
    if verbose is not None and not isinstance(verbose, bool):
        raise ValueError(f"verbose must be a bool or None; got {verbose!r}")

    return {"print_threshold": threshold, "verbose": verbose}


def format_sequence(a: Sequence[Any], fmt=str) -> str:
    """Render a list the way the driver shows it: `[ 1 2 3 ]`."""
    if not a:
        return "[ ]"
    return "[ " + " ".join(fmt(x) for x in a) + " ]"


class SortTracer:
    """
    Console side of the instrumentation.

    Printing is decided once, from the full list length, when the tracer is
    created. Totals are always printed by `finish()`.
    """

    def __init__(
        self,
        algo: str,
        a: Sequence[Any],
        config: Optional[Dict[str, Any]] = None,
        *,
        announce: bool = True,
    ) -> None:
        cfg = resolve_config(config)
        self.a = a
        self.stats = SortStats(algo=algo)
        threshold = cfg["print_threshold"]

        if cfg["verbose"] is None:
            self.debug = len(a) <= threshold
            if not self.debug and announce:
                self.say(f"List is greater than {threshold} elements. Debug is switched off!")
        else:
            self.debug = cfg["verbose"]

    def say(self, text: str = "") -> None:
        _console.print(text, markup=False, highlight=False, soft_wrap=True)

    def show_list(self) -> None:
        if self.debug:
            self.say(format_sequence(self.a))

    def end_pass(self, p: PassStats) -> None:
        self.stats.add_pass(p)
        if self.debug:
            self.say()
            self.say(f"Pass: {p.number}")
            self.say(f"Comparisons: {p.comparisons}")
            self.say(f"Swaps: {p.swaps}")
            self.say(format_sequence(self.a))

    def finish(self) -> SortStats:
        self.say(RULE)
        self.say(f"Total Comparisons: {self.stats.comparisons}")
        self.say(f"Total Swaps: {self.stats.swaps}")
        self.say(RULE)
        return self.stats
