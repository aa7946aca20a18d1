# flameyutils

A small collection of everyday helpers. It has no dependencies outside the standard library.

| Module | What it holds |
| --- | --- |
| `flameyutils.ranges` | `check_range` and `RangeError`, which validate inclusive index ranges |
| `flameyutils.text` | `lowercase` and `uppercase` over a slice of a string |
| `flameyutils.randomness` | `randint`, `randints` and `shuffle` |
| `flameyutils.stats` | `format_array`, `print_array`, `copy_into`, `average`, `minimum`, `maximum`, `median`, `index_min`, `index_max`, `index_median` |
| `flameyutils.sorting` | `ascending`, `descending`, `swap`, `is_sorted`, `quick_sort`, `bubble_sort`, `gnome_sort`, `bogosort`, `miracle_sort` |
| `flameyutils.prompts` | `Prompter`, which asks for values on text streams |
| `flameyutils.demo` | three small demonstrations and the `flameyutils-demo` command |

## Inclusive ranges

Every function that takes `start` and `end` treats them as an inclusive pair of indices. A `start` and `end` of `0` and `len(items) - 1` cover the whole sequence. `flameyutils.ranges.RangeError`, a subclass of `ValueError`, is raised in three cases:

- `start` is negative.
- `start` is greater than `end`.
- The array is `None`.

Functions that index into a sequence also raise `IndexError` when `end` is past its last item. In `flameyutils.stats`, `end` may be left out, and it then defaults to the last index.

## Installation

```
pip install .
```

## Usage

```python
import random

from flameyutils.randomness import randints
from flameyutils.sorting import ascending, is_sorted, quick_sort
from flameyutils.stats import average, format_array, median

rng = random.Random(42)
values = [0] * 10
randints(values, 0, 9, 0, 1000, rng)   # fills in place, bounds inclusive

quick_sort(values, 0, 9, ascending)
print(format_array(values, "%d", 0, 9))  # e.g. "[12, 57, ...]"
print(average(values, 0, 9), median(values, 0, 9), is_sorted(values, 0, 9, ascending))
```

Notes on behaviour:

- **Random functions.** `randint`, `randints`, `shuffle` and `bogosort` take an optional `random.Random`. Pass one to get reproducible results.
- **Shuffling.** `shuffle` swaps each position in the range with a randomly chosen position in the same range.
- **Median.** `median` and `index_median` pick the first item closest to the arithmetic mean of the range. They do not give the middle of the sorted values.
- **Minimum and maximum.** `index_min` and `index_max` return the index of the first smallest or largest item.
- **Comparison functions.** These return a negative number, zero or a positive number, as `ascending` and `descending` do.
- **Sorting.** `quick_sort` sorts the slice with Python's built-in sort. `bubble_sort` and `gnome_sort` sort in place by swapping items.
- **Bogosort.** `bogosort` shuffles until the range is sorted.
- **Miracle sort.** `miracle_sort` never changes anything. It returns at once for a sorted range and loops forever otherwise.
- **Case conversion.** `lowercase` and `uppercase` return a new string. Python strings cannot be changed in place.
- **Copying.** `copy_into` copies `orig[start..end]` into the same positions of `dest`.

### Prompts

`Prompter(reader, writer)` writes hints to `writer` and reads one line per answer from `reader`. Both default to standard input and output. The `text` argument is %-formatted with any extra positional arguments.

```python
from flameyutils.prompts import Prompter

prompter = Prompter()
number = prompter.ask_until(
    "Pick a number between %d and %d: ", int,
    "That's out of range.\n",
    lambda n: 1 <= n <= 10,
    1, 10,
)
values = prompter.ask_array(
    "a number: ", "Element %d, ", int, 0, 2, True,
)
```

The `Prompter` methods behave as follows:

- **`ask`** returns the converted answer. A `ValueError` raised by the converter propagates.
- **`ask_until`** asks again, after writing `fail`, until `condition` holds. An answer the converter rejects with `ValueError` also counts as a failure.
- **`ask_array`** asks once for each position from `start` to `end`. **`ask_array_until`** asks for each position until `condition` holds. Both return a list.
- **Position labels.** The `ordinal` string is formatted with the one-based position. It is shown before the hint or after it, depending on `ordinal_before`.
- **End of input.** If input runs out, `EOFError` is raised.

## Demo

```
flameyutils-demo          # same as: flameyutils-demo 3
flameyutils-demo 1        # asks for a "cool" number between 8 and 16
flameyutils-demo 2        # asks for four numbers between 6 and 43 and prints them
flameyutils-demo 3 --seed 7
```

Demonstration 3 does the following:

1. Fills a list with a hundred random numbers from 0 to 1000.
2. Shuffles the list and sorts it, printing it at each stage.
3. Prints the average, the median and whether the list is sorted.

`--seed` makes its output reproducible. If input ends early in demonstrations 1 or 2, the command exits with status 1.

## What it does not do

This is a library of small in-memory helpers. It has no persistent storage and no configuration. The only command is the demonstration above. Prompts are plain line-based reads with no line editing or history.

## Tests

```
pip install .[test]
pytest
```