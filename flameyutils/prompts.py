"""Prompting for values, one at a time or to fill a range, with optional checks."""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

from flameyutils.ranges import check_range

__all__ = ["Prompter"]

Convert = Callable[[str], Any]
Condition = Callable[[Any], bool]


def _render(text: str, args: tuple[Any, ...]) -> str:
    return text % args if args else text


class Prompter:
    """Writes hints to ``writer`` and reads answers, one line each, from ``reader``.

    Both default to the process's standard input and output.
    """

    def __init__(self, reader: TextIO | None = None, writer: TextIO | None = None) -> None:
        self.reader = reader if reader is not None else sys.stdin
        self.writer = writer if writer is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.writer.write(text)
        self.writer.flush()

    def _read(self) -> str:
        line = self.reader.readline()
        if not line:
            raise EOFError("no more input to read")
        return line.strip()

    def _show_item(self, text: str, ordinal: str, position: int,
                   ordinal_before: bool, args: tuple[Any, ...]) -> None:
        hint = _render(text, args)
        number = ordinal % (position + 1,)
        self._write(number + hint if ordinal_before else hint + number)

    def _until(self, show: Callable[[], None], convert: Convert,
               fail: str, condition: Condition) -> Any:
        while True:
            show()
            raw = self._read()
            try:
                value = convert(raw)
            except ValueError:
                self._write(fail)
                continue
            if condition(value):
                return value
            self._write(fail)

    def ask(self, text: str, convert: Convert, *args: Any) -> Any:
        """Show ``text % args`` and return the next answer passed through ``convert``.

        A ``ValueError`` from ``convert`` is left to propagate.
        """
        self._write(_render(text, args))
        return convert(self._read())

    def ask_until(self, text: str, convert: Convert, fail: str,
                  condition: Condition, *args: Any) -> Any:
        """Like :meth:`ask`, but asks again, after showing ``fail``, until ``condition`` holds.

        An answer that ``convert`` rejects with ``ValueError`` counts as failing.
        """
        return self._until(lambda: self._write(_render(text, args)),
                           convert, fail, condition)

    def ask_array(self, text: str, ordinal: str, convert: Convert, start: int,
                  end: int, ordinal_before: bool, *args: Any) -> list[Any]:
        """Ask for one value for each position from ``start`` to ``end`` (inclusive).

        Each hint is ``text % args`` together with ``ordinal`` formatted with
        the one-based position, placed before or after the hint.
        """
        values = []
        for i in check_range(self, start, end, "arrinput"):
            self._show_item(text, ordinal, i, ordinal_before, args)
            values.append(convert(self._read()))
        return values

    def ask_array_until(self, text: str, ordinal: str, convert: Convert, start: int,
                        end: int, ordinal_before: bool, fail: str,
                        condition: Condition, *args: Any) -> list[Any]:
        """Like :meth:`ask_array`, but each position is asked again until ``condition`` holds."""
        values = []
        for i in check_range(self, start, end, "carrinput"):
            values.append(self._until(
                lambda i=i: self._show_item(text, ordinal, i, ordinal_before, args),
                convert, fail, condition,
            ))
        return values