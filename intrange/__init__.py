from .core import ALL, EMPTY, IntRange, intersection
from .util import INT_MAX, INT_MIN

__all__ = [
    "IntRange",
    "EMPTY",
    "ALL",
    "INT_MIN",
    "INT_MAX",
    "intersection",
]
