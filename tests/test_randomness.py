import random
from collections import Counter

import pytest

from flameyutils.randomness import randint, randints, shuffle
from flameyutils.ranges import RangeError


def test_randint_within_bounds():
    rng = random.Random(1)
    values = [randint(0, 1000, rng) for _ in range(500)]
    assert all(0 <= v <= 1000 for v in values)


def test_randint_equal_bounds():
    assert randint(5, 5, random.Random(3)) == 5


def test_randint_reaches_both_ends():
    rng = random.Random(7)
    seen = {randint(8, 10, rng) for _ in range(300)}
    assert seen == {8, 9, 10}


def test_randint_inverted_bounds_raises():
    with pytest.raises(ValueError):
        randint(10, 2)


def test_randints_fills_only_range():
    array = [-1] * 10
    randints(array, 2, 6, 0, 1000, random.Random(2))
    assert array[:2] == [-1, -1]
    assert array[7:] == [-1, -1, -1]
    assert all(0 <= v <= 1000 for v in array[2:7])


def test_randints_deterministic_with_seed():
    first = [0] * 20
    second = [0] * 20
    randints(first, 0, 19, 0, 1000, random.Random(42))
    randints(second, 0, 19, 0, 1000, random.Random(42))
    assert first == second


def test_randints_invalid_range_raises():
    with pytest.raises(RangeError, match="randints"):
        randints([0, 0], 1, 0, 0, 10)


def test_randints_end_past_array_raises():
    with pytest.raises(IndexError):
        randints([0, 0], 0, 2, 0, 10)


def test_shuffle_is_permutation_of_range():
    array = list(range(100))
    original = list(array)
    shuffle(array, 10, 89, random.Random(5))
    assert array[:10] == original[:10]
    assert array[90:] == original[90:]
    assert Counter(array[10:90]) == Counter(original[10:90])


def test_shuffle_deterministic_with_seed():
    first = list(range(30))
    second = list(range(30))
    shuffle(first, 0, 29, random.Random(9))
    shuffle(second, 0, 29, random.Random(9))
    assert first == second


def test_shuffle_single_element():
    array = ["a", "b", "c"]
    shuffle(array, 1, 1, random.Random(0))
    assert array == ["a", "b", "c"]


def test_shuffle_invalid_range_raises():
    with pytest.raises(RangeError, match="shuffle"):
        shuffle([1, 2, 3], 2, 0)


def test_shuffle_none_raises():
    with pytest.raises(RangeError):
        shuffle(None, 0, 0)