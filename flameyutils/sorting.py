"""Comparison functions and sorting algorithms over inclusive index ranges."""

from __future__ import annotations

import functools
import random
from typing import Any, Callable, MutableSequence, Sequence

from flameyutils.randomness import shuffle
from flameyutils.ranges import check_range

__all__ = [
    "ascending",
    "descending",
    "swap",
    "is_sorted",
    "quick_sort",
    "bubble_sort",
    "gnome_sort",
    "bogosort",
    "miracle_sort",
]

Compare = Callable[[Any, Any], int]


def ascending(a: Any, b: Any) -> int:
    """Compare for ascending order: negative, zero or positive as ``a`` is below, equal to or above ``b``."""
    return (a > b) - (a < b)


def descending(a: Any, b: Any) -> int:
    """Compare for descending order: the reverse of :func:`ascending`."""
    return ascending(b, a)


def swap(array: MutableSequence[Any], i: int, j: int) -> None:
    """Exchange the items at positions ``i`` and ``j``."""
    array[i], array[j] = array[j], array[i]


def _indices(array: Sequence[Any] | None, start: int, end: int, funcname: str) -> range:
    indices = check_range(array, start, end, funcname)
    if end >= len(array):
        raise IndexError(
            f"{funcname}(): `end` must be less than the array length "
            f"{len(array)}, but it was {end}."
        )
    return indices


def _sorted(array: Sequence[Any], start: int, end: int, compare: Compare) -> bool:
    return all(compare(array[i - 1], array[i]) <= 0 for i in range(start + 1, end + 1))


def is_sorted(
    array: Sequence[Any], start: int, end: int, compare: Compare = ascending
) -> bool:
    """Return whether ``array[start..end]`` (inclusive) is ordered by ``compare``."""
    _indices(array, start, end, "is_sorted")
    return _sorted(array, start, end, compare)


def quick_sort(
    array: MutableSequence[Any], start: int, end: int, compare: Compare = ascending
) -> None:
    """Sort ``array[start..end]`` (inclusive) in place with the built-in sort."""
    _indices(array, start, end, "qsort")
    array[start:end + 1] = sorted(array[start:end + 1], key=functools.cmp_to_key(compare))


def bubble_sort(
    array: MutableSequence[Any], start: int, end: int, compare: Compare = ascending
) -> None:
    """Sort ``array[start..end]`` (inclusive) in place by repeatedly swapping neighbours out of order."""
    _indices(array, start, end, "bsort")
    for done in range(end - start):
        for j in range(start, end - done):
            if compare(array[j], array[j + 1]) > 0:
                swap(array, j, j + 1)


def gnome_sort(
    array: MutableSequence[Any], start: int, end: int, compare: Compare = ascending
) -> None:
    """Sort ``array[start..end]`` (inclusive) in place.

    Walks the range; an item out of order is carried back through the
    already-read items into its place.
    """
    _indices(array, start, end, "gsort")
    for i in range(start + 1, end + 1):
        if compare(array[i - 1], array[i]) > 0:
            for j in range(start, i):
                if not compare(array[i], array[j]) > 0:
                    swap(array, i, j)


def bogosort(
    array: MutableSequence[Any],
    start: int,
    end: int,
    compare: Compare = ascending,
    rng: random.Random | None = None,
) -> None:
    """Shuffle ``array[start..end]`` (inclusive) until it happens to be sorted."""
    _indices(array, start, end, "bogosort")
    generator = rng if rng is not None else random.Random()
    while not _sorted(array, start, end, compare):
        shuffle(array, start, end, generator)


def miracle_sort(
    array: Sequence[Any],
    start: int,
    end: int,
    compare: Compare = ascending,
) -> None:
    """Wait, checking again and again, until ``array[start..end]`` is sorted.

    Nothing is ever changed; an unsorted range makes this wait forever.
    """
    _indices(array, start, end, "mrclsort")
    while not _sorted(array, start, end, compare):
        pass