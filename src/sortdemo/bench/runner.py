"""
Demo driver: sorts a float data file with every algorithm, then sorts a file
of Cat weights to show the algorithms work on user-defined records.

Usage (from repo root):
    python -m sortdemo.bench.runner floats.dat
    python -m sortdemo.bench.runner floats.dat --records cats.dat --config demo.yaml

For each algorithm the input is copied, sorted in place, timed, and written
to its output file (out1.dat, out2.dat, out3.dat by default). Lists of at most
`print_threshold` elements are traced pass by pass on the console.

Optional outputs:
    - summary.csv             # comparisons/swaps/passes/ms per algorithm
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - config_resolved.yaml    # the config we actually used

A file that cannot be opened is reported and skipped; the exit code is 0.

The companion command `sortdemo-make-data OUTPUT N --dist reversed` writes a
generated input file.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import os
import subprocess
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sortdemo.algorithms import ALGORITHM_NAMES, DEFAULT_PRINT_THRESHOLD, get_sort
from sortdemo.algorithms.stats import RULE, format_sequence
from sortdemo.bench.measure import time_sort_call
from sortdemo.datasets import CAT, FLOAT, INT, SUPPORTED_DISTS, dump_sequence, load_sequence, make_dataset
from sortdemo.datasets.io import report_open_error

_console = Console(highlight=False)

TITLES = {
    "bubble_sort": "Bubble Sort",
    "shuttle_sort": "Shuttle Sort",
    "quick_sort": "Quick Sort",
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "records_file": "cats.dat",
    "output_dir": ".",
    "algorithms": list(ALGORITHM_NAMES),
    "outputs": {
        "bubble_sort": "out1.dat",
        "shuttle_sort": "out2.dat",
        "quick_sort": "out3.dat",
    },
    "print_threshold": DEFAULT_PRINT_THRESHOLD,
    "disable_gc": False,
    "summary_csv": None,
    "meta_json": None,
    "config_out": None,
}

SUMMARY_COLUMNS = ["algo", "n", "status", "comparisons", "swaps", "passes", "elapsed_ms"]


# ------------------------- helpers: config & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def resolve_config(
    config_path: Optional[Path] = None, overrides: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Defaults, then the YAML file (if any), then `overrides` (None values skipped).

    Raises ValueError on unknown keys or algorithm names.
    """
    cfg: Dict[str, Any] = {**DEFAULT_CONFIG, "outputs": dict(DEFAULT_CONFIG["outputs"])}
    layers: List[Dict[str, Any]] = []
    if config_path is not None:
        loaded = _load_yaml(config_path)
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")
        layers.append(loaded)
    if overrides:
        layers.append({k: v for k, v in overrides.items() if v is not None})

    for layer in layers:
        unknown = set(layer) - set(DEFAULT_CONFIG)
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        for k, v in layer.items():
            if k == "outputs":
                cfg["outputs"].update(v or {})
            else:
                cfg[k] = v

    for name in cfg["algorithms"]:
        if name not in ALGORITHM_NAMES:
            raise ValueError(f"Unknown algorithm in config: {name!r}")
        if name not in cfg["outputs"]:
            raise ValueError(f"No output file configured for algorithm: {name!r}")
    threshold = cfg["print_threshold"]
    if not isinstance(threshold, int) or threshold < 0:
        raise ValueError(f"print_threshold must be an integer >= 0; got {threshold!r}")
    return cfg


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
        return out.decode("utf-8").strip()
    except (OSError, subprocess.CalledProcessError):
        return None


def _gather_meta() -> Dict[str, Any]:
    import platform
    meta = {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }
    return meta


def _say(text: str = "") -> None:
    _console.print(text, markup=False, highlight=False, soft_wrap=True)


def _try_write(path: Path, write: Callable[[Path], None]) -> bool:
    """Run `write(path)`; an unwritable path is reported and skipped."""
    try:
        write(path)
    except OSError as e:
        report_open_error(path, e)
        return False
    return True


# ------------------------- demo steps ------------------------- #

def sort_numbers(input_path: Path, cfg: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Load floats from `input_path` and run every configured algorithm on its
    own copy. Returns one summary row per algorithm; empty if the file could
    not be opened.
    """
    data = load_sequence(input_path, FLOAT)
    if data is None:
        return []

    output_dir = Path(cfg["output_dir"])
    sort_config = {"print_threshold": cfg["print_threshold"]}
    rows: List[Dict[str, Any]] = []

    for name in cfg["algorithms"]:
        _say()
        _say(f"Sorting using the {TITLES[name]}.")
        res = time_sort_call(
            algo_name=name,
            algo_fn=get_sort(name),
            a=data,
            less=FLOAT.less,
            config=sort_config,
            disable_gc=bool(cfg["disable_gc"]),
        )

        row: Dict[str, Any] = {"algo": name, "n": len(data), "status": res["status"]}
        if res["status"] == "ok":
            stats = res["stats"]
            row.update(
                comparisons=stats.comparisons,
                swaps=stats.swaps,
                passes=stats.passes,
                elapsed_ms=res["elapsed_ms"],
            )
            _say(RULE)
            _say(f"Time taken (ms): {res['elapsed_ms']}")
            _say(RULE)
            out_path = output_dir / cfg["outputs"][name]
            if _try_write(out_path, lambda p: p.parent.mkdir(parents=True, exist_ok=True)):
                dump_sequence(res["output"], out_path, FLOAT)
        else:
            _console.print(f"[bold red]{TITLES[name]} failed:[/bold red] {escape(res['error'])}")
        rows.append(row)

    return rows


def sort_records(records_path: Path, cfg: Dict[str, Any]) -> Optional[List[Any]]:
    """Bubble-sort the Cat weights in `records_path` and print the result."""
    _say()
    _say("Sorting a user defined class using the bubble sort.")
    _say()
    cats = load_sequence(records_path, CAT)
    if cats is None:
        return None

    get_sort("bubble_sort")(cats, less=CAT.less, config={"print_threshold": cfg["print_threshold"]})
    _say(format_sequence(cats, CAT.format))
    return cats


# ------------------------- summary ------------------------- #

def summarize(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    return pd.DataFrame(rows).reindex(columns=SUMMARY_COLUMNS)


def _print_rich_summary(summary: pd.DataFrame) -> None:
    if summary.empty:
        return
    table = Table(title="Sort Summary")
    table.add_column("Algorithm", style="bold")
    for col in ("n", "comparisons", "swaps", "passes", "elapsed_ms"):
        table.add_column(col, justify="right")

    def _cell(v: Any) -> str:
        return "—" if pd.isna(v) else str(int(v))

    for rec in summary.to_dict("records"):
        table.add_row(
            TITLES.get(rec["algo"], rec["algo"]),
            _cell(rec["n"]),
            _cell(rec["comparisons"]),
            _cell(rec["swaps"]),
            _cell(rec["passes"]),
            _cell(rec["elapsed_ms"]),
        )
    _console.print()
    _console.print(table)


# ------------------------- core runner ------------------------- #

def _write_meta(path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)


def _write_summary(summary: pd.DataFrame, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(path, index=False)


def run_demo(input_path: Path, cfg: Dict[str, Any]) -> pd.DataFrame:
    """Run the float demo, then the record demo. Returns the float summary."""
    if cfg.get("config_out"):
        _try_write(Path(cfg["config_out"]), lambda p: _write_yaml(cfg, p))
    if cfg.get("meta_json"):
        _try_write(Path(cfg["meta_json"]), _write_meta)

    summary = summarize(sort_numbers(input_path, cfg))
    sort_records(Path(cfg["records_file"]), cfg)

    _print_rich_summary(summary)
    if cfg.get("summary_csv"):
        _try_write(Path(cfg["summary_csv"]), lambda p: _write_summary(summary, p))
    return summary


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Sort a data file with bubble, shuttle and quick sort.")
    p.add_argument("input", type=str, help="Whitespace separated floats to sort")
    p.add_argument("--records", dest="records_file", type=str, default=None,
                   help="File of Cat weights (default: cats.dat)")
    p.add_argument("--config", type=str, default=None, help="Optional YAML config")
    p.add_argument("--output-dir", dest="output_dir", type=str, default=None)
    p.add_argument("--print-threshold", dest="print_threshold", type=int, default=None,
                   help="Trace passes only for lists up to this length (default: 10)")
    p.add_argument("--summary-csv", dest="summary_csv", type=str, default=None)
    p.add_argument("--meta-json", dest="meta_json", type=str, default=None)
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve() if args.config else None
    if config_path is not None and not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")

    overrides = {
        k: getattr(args, k)
        for k in ("records_file", "output_dir", "print_threshold", "summary_csv", "meta_json")
    }
    cfg = resolve_config(config_path, overrides)
    run_demo(Path(args.input), cfg)
    return 0


def _parse_make_data_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Write a generated dataset, one value per line.")
    p.add_argument("output", type=str)
    p.add_argument("n", type=int)
    p.add_argument("--dist", type=str, default="reversed", choices=sorted(SUPPORTED_DISTS))
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--k", type=int, default=3, help="Distinct values for few_uniques")
    return p.parse_args(argv)


def make_data_main(argv: Optional[List[str]] = None) -> int:
    args = _parse_make_data_args(argv)
    rng = np.random.default_rng(args.seed)
    params = {"k": args.k} if args.dist == "few_uniques" else {}
    values = make_dataset(args.n, {"dist": args.dist, "params": params}, rng)
    fmt = FLOAT if args.dist == "uniform" else INT
    ok = dump_sequence(values, Path(args.output), fmt)
    if ok:
        _console.print(f"[bold green]Wrote[/bold green] {len(values)} values to {escape(args.output)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
