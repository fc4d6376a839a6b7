"""
Datasets package public API.

Re-export element types, file helpers and the generator so callers can write:
    from sortdemo.datasets import FLOAT, CAT, load_sequence, dump_sequence
"""

from .elements import CAT, FLOAT, INT, Cat, ElementType, by_weight
from .generators import SUPPORTED_DISTS, make_dataset
from .io import dump_sequence, load_sequence, write_list

__all__ = [
    "CAT",
    "FLOAT",
    "INT",
    "Cat",
    "ElementType",
    "by_weight",
    "SUPPORTED_DISTS",
    "make_dataset",
    "dump_sequence",
    "load_sequence",
    "write_list",
]
