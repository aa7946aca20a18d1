"""Random integers and in-place shuffling over inclusive index ranges."""

from __future__ import annotations

import random
from typing import Any, MutableSequence

from flameyutils.ranges import check_range

__all__ = ["randint", "randints", "shuffle"]


def _generator(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _check_bounds(array: MutableSequence[Any], end: int, funcname: str) -> None:
    if end >= len(array):
        raise IndexError(
            f"{funcname}(): `end` must be less than the array length "
            f"{len(array)}, but it was {end}."
        )


def randint(minimum: int, maximum: int, rng: random.Random | None = None) -> int:
    """Return a random integer between ``minimum`` and ``maximum``, both inclusive."""
    if minimum > maximum:
        raise ValueError(
            f"randint(): `minimum` must be <= `maximum`, got {minimum} and {maximum}."
        )
    return _generator(rng).randint(minimum, maximum)


def randints(
    array: MutableSequence[int],
    start: int,
    end: int,
    minimum: int,
    maximum: int,
    rng: random.Random | None = None,
) -> None:
    """Fill ``array[start..end]`` (inclusive) with random integers in ``[minimum, maximum]``."""
    indices = check_range(array, start, end, "randints")
    _check_bounds(array, end, "randints")
    generator = _generator(rng)
    for i in indices:
        array[i] = randint(minimum, maximum, generator)


def shuffle(
    array: MutableSequence[Any],
    start: int,
    end: int,
    rng: random.Random | None = None,
) -> None:
    """Shuffle ``array[start..end]`` (inclusive) in place.

    Each position in turn is swapped with a random position in the range.
    """
    indices = check_range(array, start, end, "shuffle")
    _check_bounds(array, end, "shuffle")
    generator = _generator(rng)
    for i in indices:
        j = randint(start, end, generator)
        array[i], array[j] = array[j], array[i]