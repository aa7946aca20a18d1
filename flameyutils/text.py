"""Case conversion over an inclusive slice of a string."""

from __future__ import annotations

from flameyutils.ranges import check_range

__all__ = ["lowercase", "uppercase"]


def _convert(string: str, start: int, end: int, funcname: str, upper: bool) -> str:
    check_range(string, start, end, funcname)
    if end >= len(string):
        raise IndexError(
            f"{funcname}(): `end` must be less than the string length "
            f"{len(string)}, but it was {end}."
        )
    middle = string[start:end + 1]
    middle = middle.upper() if upper else middle.lower()
    return string[:start] + middle + string[end + 1:]


def lowercase(string: str, start: int, end: int) -> str:
    """Return ``string`` with the characters from ``start`` to ``end`` (inclusive) lowercased."""
    return _convert(string, start, end, "lowercase", upper=False)


def uppercase(string: str, start: int, end: int) -> str:
    """Return ``string`` with the characters from ``start`` to ``end`` (inclusive) uppercased."""
    return _convert(string, start, end, "uppercase", upper=True)