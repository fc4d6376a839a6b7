"""
Tests for element types, sequence file I/O and the dataset generators.
"""

from __future__ import annotations

import pathlib
import sys

import numpy as np
import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from sortdemo.algorithms import get_sort
from sortdemo.datasets import (
    CAT,
    FLOAT,
    INT,
    SUPPORTED_DISTS,
    Cat,
    by_weight,
    dump_sequence,
    load_sequence,
    make_dataset,
    write_list,
)


# ------------------------- element types ------------------------- #

def test_cat_parse_and_format() -> None:
    cat = Cat.parse("12")
    assert cat == Cat(12)
    assert str(cat) == "12"
    assert CAT.format(Cat(3)) == "3"
    assert Cat().weight == 0


def test_cat_ordering_by_weight() -> None:
    assert by_weight(Cat(1), Cat(2))
    assert not by_weight(Cat(2), Cat(1))
    assert not by_weight(Cat(2), Cat(2))
    assert CAT.less is by_weight


def test_float_type_round_trips_text() -> None:
    for x in (0.1, -3.5, 1e-12, 123456.789):
        assert FLOAT.parse(FLOAT.format(x)) == x
    assert FLOAT.less(1.0, 2.0)


# ------------------------- file I/O ------------------------- #

def test_load_whitespace_separated(tmp_path: pathlib.Path) -> None:
    p = tmp_path / "floats.dat"
    p.write_text("3.5 1\n\n  -2.25\t8\n", encoding="utf-8")
    assert load_sequence(p) == [3.5, 1.0, -2.25, 8.0]


def test_load_stops_at_first_bad_token(tmp_path: pathlib.Path) -> None:
    p = tmp_path / "floats.dat"
    p.write_text("4 2 oops 7 1\n", encoding="utf-8")
    assert load_sequence(p, FLOAT) == [4.0, 2.0]


def test_load_cats(tmp_path: pathlib.Path) -> None:
    p = tmp_path / "cats.dat"
    p.write_text("5\n3\n9\n", encoding="utf-8")
    cats = load_sequence(p, CAT)
    assert [c.weight for c in cats] == [5, 3, 9]


def test_load_cats_stops_at_non_integer(tmp_path: pathlib.Path) -> None:
    p = tmp_path / "cats.dat"
    p.write_text("5 3.5 9", encoding="utf-8")
    assert [c.weight for c in load_sequence(p, CAT)] == [5]


def test_load_empty_file(tmp_path: pathlib.Path) -> None:
    p = tmp_path / "empty.dat"
    p.write_text("", encoding="utf-8")
    assert load_sequence(p) == []


def test_load_missing_file_reports_and_returns_none(
    tmp_path: pathlib.Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert load_sequence(tmp_path / "nope.dat") is None
    assert "Error! Could not open file" in capsys.readouterr().out


def test_dump_one_value_per_line(tmp_path: pathlib.Path) -> None:
    p = tmp_path / "out.dat"
    assert dump_sequence([1.5, 2.0, 10.25], p) is True
    assert p.read_text(encoding="utf-8") == "1.5\n2.0\n10.25\n"


def test_dump_unwritable_path_reports_and_returns_false(
    tmp_path: pathlib.Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert dump_sequence([1.0], tmp_path / "missing_dir" / "out.dat") is False
    assert "Error! Could not open file" in capsys.readouterr().out


def test_sorted_output_round_trip(tmp_path: pathlib.Path) -> None:
    a = [0.1, 3.3333333333333335, -7.0, 2.5e-8, 1e21]
    get_sort("quick_sort")(a, config={"verbose": False})
    p = tmp_path / "sorted.dat"
    dump_sequence(a, p, FLOAT)
    assert load_sequence(p, FLOAT) == a


def test_cat_round_trip(tmp_path: pathlib.Path) -> None:
    cats = [Cat(4), Cat(1), Cat(4)]
    p = tmp_path / "cats_out.dat"
    dump_sequence(cats, p, CAT)
    assert load_sequence(p, CAT) == cats


def test_write_list_counts_inclusive(tmp_path: pathlib.Path) -> None:
    p = tmp_path / "list.dat"
    assert write_list(p, 4)
    assert load_sequence(p, INT) == [0, 1, 2, 3, 4]
    with pytest.raises(ValueError):
        write_list(p, -1)


# ------------------------- generators ------------------------- #

@pytest.mark.parametrize("dist", sorted(SUPPORTED_DISTS))
def test_generators_length_and_empty(dist: str) -> None:
    spec = {"dist": dist, "params": {"k": 3} if dist == "few_uniques" else {}}
    rng = np.random.default_rng(0)
    assert len(make_dataset(25, spec, rng)) == 25
    assert make_dataset(0, spec, rng) == []


def test_generators_deterministic_per_seed() -> None:
    spec = {"dist": "uniform", "params": {"low": -1.0, "high": 1.0}}
    a = make_dataset(50, spec, np.random.default_rng(7))
    b = make_dataset(50, spec, np.random.default_rng(7))
    assert a == b
    assert all(isinstance(x, float) and -1.0 <= x < 1.0 for x in a)


def test_reversed_and_ascending() -> None:
    rng = np.random.default_rng(0)
    assert make_dataset(4, {"dist": "reversed"}, rng) == [3, 2, 1, 0]
    assert make_dataset(4, {"dist": "ascending"}, rng) == [0, 1, 2, 3]


def test_few_uniques_caps_distinct_weights() -> None:
    xs = make_dataset(100, {"dist": "few_uniques", "params": {"k": 3, "max_weight": 9}}, np.random.default_rng(2))
    assert 1 <= len(set(xs)) <= 3
    assert all(type(x) is int and 1 <= x <= 9 for x in xs)


@pytest.mark.parametrize(
    "n, spec",
    [
        (-1, {"dist": "reversed"}),
        (5, {"dist": "bogus"}),
        (5, "reversed"),
        (5, {"dist": "uniform", "params": {"low": 2.0, "high": 2.0}}),
        (5, {"dist": "uniform", "params": {"low": 0.0, "high": float("inf")}}),
        (5, {"dist": "few_uniques", "params": {"k": 5, "max_weight": 4}}),
        (True, {"dist": "ascending"}),
        (5, {"dist": "few_uniques", "params": {}}),
    ],
)
def test_invalid_specs_raise(n: int, spec) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, spec, np.random.default_rng(0))


def test_load_stops_at_undecodable_bytes(tmp_path: pathlib.Path) -> None:
    p = tmp_path / "floats.dat"
    p.write_bytes(b"3 1 2\n\xff\xfe 7\n")
    assert load_sequence(p, FLOAT) == [3.0, 1.0, 2.0]


@pytest.mark.parametrize("token", ["nan", "inf", "-Infinity", "NaN"])
def test_non_finite_floats_end_input(tmp_path: pathlib.Path, token: str) -> None:
    p = tmp_path / "floats.dat"
    p.write_text(f"4 2 {token} 1\n", encoding="utf-8")
    assert load_sequence(p, FLOAT) == [4.0, 2.0]
