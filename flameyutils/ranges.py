"""Validation of inclusive index ranges over sequences."""

from __future__ import annotations

from typing import Any

__all__ = ["RangeError", "check_range"]


class RangeError(ValueError):
    """Raised when an inclusive ``start``/``end`` range over a sequence is invalid."""


def check_range(array: Any, start: int, end: int, funcname: str) -> range:
    """Validate an inclusive index range and return the matching ``range``.

    Raises :class:`RangeError` when ``array`` is ``None``, when ``start`` is
    negative, or when ``start`` is greater than ``end``.
    """
    if start < 0:
        raise RangeError(
            f"{funcname}(): `start` cannot be negative, but it was {start}."
        )
    if start > end:
        raise RangeError(
            f"{funcname}(): `start` must be less than or equal to `end`.\n"
            f"Expected `start` to be <= {end}, but it was {start}."
        )
    if array is None:
        raise RangeError(f"{funcname}(): `array` cannot be None.")
    return range(start, end + 1)