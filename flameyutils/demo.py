"""Small interactive and random demonstrations of the package."""

from __future__ import annotations

import argparse
import random
import sys
from typing import TextIO

from flameyutils.prompts import Prompter
from flameyutils.randomness import randints, shuffle
from flameyutils.sorting import ascending, is_sorted, quick_sort
from flameyutils.stats import average, median, print_array

__all__ = ["is_in_range", "cool_number", "range_array", "random_array", "main"]


def is_in_range(number: int, low: int, high: int) -> bool:
    """Return whether ``low <= number <= high``."""
    return low <= number <= high


def cool_number(prompter: Prompter) -> int:
    """Ask for a number between 8 and 16 and praise it."""
    number = prompter.ask_until(
        "Look at these cool numbers: %d, %d, %d! Can you give me another? ",
        int,
        "\nThat's not a cool number.\n",
        lambda value: is_in_range(value, 8, 16),
        10, 16, 14,
    )
    prompter.writer.write("\nYes! %d is so cool!\n" % number)
    return number


def range_array(prompter: Prompter) -> list[int]:
    """Ask for four numbers between 6 and 43, then print them."""
    values = prompter.ask_array_until(
        "for example %d or %d: ",
        "Give me element number %d, ",
        int,
        0, 3,
        True,
        "\nInvalid value. Try again.\n",
        lambda value: is_in_range(value, 6, 43),
        6, 43,
    )
    prompter.writer.write("\n")
    print_array(values, "%d", 0, 3, file=prompter.writer)
    return values


def random_array(rng: random.Random | None = None, writer: TextIO | None = None) -> list[int]:
    """Fill, shuffle and sort a hundred random numbers, printing each stage."""
    out = writer if writer is not None else sys.stdout
    generator = rng if rng is not None else random.Random()
    end = 99
    array = [0] * (end + 1)

    randints(array, 0, end, 0, 1000, generator)
    out.write("The array: ")
    print_array(array, "%d", 0, end, file=out)

    shuffle(array, 0, end, generator)
    out.write("\nShuffled: ")
    print_array(array, "%d", 0, end, file=out)

    quick_sort(array, 0, end, ascending)
    out.write("\nSorted: ")
    print_array(array, "%d", 0, end, file=out)

    out.write(
        "\nAverage: %.3f\nMedian: %d\nSorted: %s\n"
        % (
            average(array, 0, end),
            median(array, 0, end),
            "Yes" if is_sorted(array, 0, end, ascending) else "No",
        )
    )
    return array


def main(argv: list[str] | None = None) -> int:
    """Run one of the demonstrations chosen on the command line."""
    parser = argparse.ArgumentParser(prog="flameyutils", description=__doc__)
    parser.add_argument("example", nargs="?", choices=["1", "2", "3"], default="3",
                        help="1: cool number, 2: range array, 3: random array")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random demonstration")
    options = parser.parse_args(argv)

    try:
        if options.example == "1":
            cool_number(Prompter())
        elif options.example == "2":
            range_array(Prompter())
        else:
            random_array(random.Random(options.seed))
    except EOFError:
        sys.stderr.write("\ninput ended early\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())