"""
Text-file helpers for sequences.

Input files hold whitespace/newline separated tokens, one token per element.
Output files hold one element per line.

A file that cannot be opened is reported on stdout and the operation is
skipped: `load_sequence` returns None, `dump_sequence`/`write_list` return
False. Nothing is raised for a missing file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Union

from rich.console import Console

from .elements import FLOAT, INT, ElementType

__all__ = ["report_open_error", "iter_tokens", "load_sequence", "dump_sequence", "write_list"]

_console = Console(highlight=False)

PathLike = Union[str, Path]


def report_open_error(path: PathLike, err: OSError) -> None:
    _console.print(f"Error! Could not open file: {path} ({err.strerror or err})", markup=False, soft_wrap=True)


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def load_sequence(path: PathLike, etype: ElementType = FLOAT) -> Optional[List[Any]]:
    """
    Read every parseable token of `path` into a new list.

    Reading stops at the first token `etype.parse` rejects, exactly as it
    stops at end of file; later tokens are ignored. Undecodable bytes become
    U+FFFD, which no element type parses, so they end the input too.
    """
    out: List[Any] = []
    try:
        with Path(path).open("r", encoding="utf-8", errors="replace") as f:
            for token in iter_tokens(f):
                try:
                    out.append(etype.parse(token))
                except ValueError:
                    break
    except OSError as e:
        report_open_error(path, e)
        return None
    return out


def dump_sequence(a: Iterable[Any], path: PathLike, etype: ElementType = FLOAT) -> bool:
    """Write `a` to `path`, one formatted element per line."""
    try:
        with Path(path).open("w", encoding="utf-8") as f:
            for x in a:
                f.write(etype.format(x))
                f.write("\n")
    except OSError as e:
        report_open_error(path, e)
        return False
    return True


def write_list(path: PathLike, count: int) -> bool:
    """
    Write the integers 0..count inclusive, one per line.

    Sorted input is the worst case for the rightmost-pivot quicksort, so this
    is handy for evaluating it.
    """
    if count < 0:
        raise ValueError("count must be nonnegative")
    return dump_sequence(range(count + 1), path, INT)
