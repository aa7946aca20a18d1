"""Printing, copying and summary statistics over inclusive index ranges."""

from __future__ import annotations

import sys
from typing import Any, MutableSequence, Sequence, TextIO

from flameyutils.ranges import check_range

__all__ = [
    "format_array",
    "print_array",
    "copy_into",
    "average",
    "minimum",
    "maximum",
    "median",
    "index_min",
    "index_max",
    "index_median",
]


def _indices(array: Sequence[Any] | None, start: int, end: int | None, funcname: str) -> range:
    if end is None:
        end = len(array) - 1 if array is not None else 0
    indices = check_range(array, start, end, funcname)
    if end >= len(array):
        raise IndexError(
            f"{funcname}(): `end` must be less than the array length "
            f"{len(array)}, but it was {end}."
        )
    return indices


def format_array(
    array: Sequence[Any], fmt: str = "%s", start: int = 0, end: int | None = None
) -> str:
    """Return ``array[start..end]`` (inclusive) as ``[a, b, c]``, each item %-formatted with ``fmt``."""
    indices = _indices(array, start, end, "printarr")
    return "[" + ", ".join(fmt % (array[i],) for i in indices) + "]"


def print_array(
    array: Sequence[Any],
    fmt: str = "%s",
    start: int = 0,
    end: int | None = None,
    file: TextIO | None = None,
) -> None:
    """Write ``format_array(...)`` followed by a newline to ``file`` (standard output by default)."""
    text = format_array(array, fmt, start, end)
    print(text, file=file if file is not None else sys.stdout)


def copy_into(
    dest: MutableSequence[Any], orig: Sequence[Any], start: int, end: int
) -> None:
    """Copy ``orig[start..end]`` (inclusive) into the same positions of ``dest``."""
    indices = _indices(orig, start, end, "arrcopy")
    needed = end - start + 1
    if len(dest) < needed:
        raise ValueError(
            "arrcopy(): `dest` should be big enough to hold `orig`'s items from "
            f"`start` to `end`.\nExpected length of `dest` to be >= {needed}, "
            f"but it was {len(dest)}."
        )
    if end >= len(dest):
        raise IndexError(
            f"arrcopy(): `end` must be less than the length of `dest` "
            f"{len(dest)}, but it was {end}."
        )
    for i in indices:
        dest[i] = orig[i]


def average(array: Sequence[Any], start: int = 0, end: int | None = None) -> float:
    """Return the arithmetic mean of ``array[start..end]`` (inclusive)."""
    indices = _indices(array, start, end, "average")
    return sum(array[i] for i in indices) / len(indices)


def index_min(array: Sequence[Any], start: int = 0, end: int | None = None) -> int:
    """Return the index of the first smallest item in ``array[start..end]``."""
    indices = _indices(array, start, end, "imin")
    return min(indices, key=array.__getitem__)


def index_max(array: Sequence[Any], start: int = 0, end: int | None = None) -> int:
    """Return the index of the first largest item in ``array[start..end]``."""
    indices = _indices(array, start, end, "imax")
    return max(indices, key=array.__getitem__)


def index_median(array: Sequence[Any], start: int = 0, end: int | None = None) -> int:
    """Return the index of the first item closest to the mean of ``array[start..end]``."""
    indices = _indices(array, start, end, "imed")
    mean = average(array, start, indices[-1])
    return min(indices, key=lambda i: abs(array[i] - mean))


def minimum(array: Sequence[Any], start: int = 0, end: int | None = None) -> Any:
    """Return the smallest item in ``array[start..end]`` (inclusive)."""
    return array[index_min(array, start, end)]


def maximum(array: Sequence[Any], start: int = 0, end: int | None = None) -> Any:
    """Return the largest item in ``array[start..end]`` (inclusive)."""
    return array[index_max(array, start, end)]


def median(array: Sequence[Any], start: int = 0, end: int | None = None) -> Any:
    """Return the item of ``array[start..end]`` closest to its mean."""
    return array[index_median(array, start, end)]