import random

import pytest

from flameyutils.ranges import RangeError
from flameyutils.sorting import (
    ascending,
    bogosort,
    bubble_sort,
    descending,
    gnome_sort,
    is_sorted,
    miracle_sort,
    quick_sort,
    swap,
)


def _random_list(seed, size=30):
    rng = random.Random(seed)
    return [rng.randint(-1000, 1000) for _ in range(size)]


def test_ascending_and_descending_signs():
    assert ascending(3, 5) < 0
    assert ascending(5, 3) > 0
    assert ascending(4, 4) == 0
    assert descending(3, 5) > 0
    assert descending(5, 3) < 0
    assert descending(4, 4) == 0


def test_swap_exchanges_items():
    items = ["a", "b", "c"]
    swap(items, 0, 2)
    assert items == ["c", "b", "a"]


def test_is_sorted():
    assert is_sorted([1, 2, 2, 3], 0, 3, ascending)
    assert not is_sorted([1, 3, 2], 0, 2, ascending)
    assert is_sorted([3, 2, 1], 0, 2, descending)
    assert is_sorted([9, 1, 2, 3, 0], 1, 3, ascending)


def test_is_sorted_single_item():
    assert is_sorted([42], 0, 0, ascending)


def test_is_sorted_rejects_bad_range():
    with pytest.raises(RangeError):
        is_sorted([1, 2], 1, 0, ascending)
    with pytest.raises(RangeError):
        is_sorted(None, 0, 0, ascending)
    with pytest.raises(IndexError):
        is_sorted([1, 2], 0, 2, ascending)


@pytest.mark.parametrize("seed", range(6))
def test_quick_sort_ascending_and_descending(seed):
    items = _random_list(seed)
    quick_sort(items, 0, len(items) - 1, ascending)
    assert items == sorted(_random_list(seed))
    quick_sort(items, 0, len(items) - 1, descending)
    assert items == sorted(_random_list(seed), reverse=True)


@pytest.mark.parametrize("seed", range(6))
def test_bubble_sort_ascending_and_descending(seed):
    items = _random_list(seed)
    bubble_sort(items, 0, len(items) - 1, ascending)
    assert items == sorted(_random_list(seed))
    items = _random_list(seed)
    bubble_sort(items, 0, len(items) - 1, descending)
    assert items == sorted(_random_list(seed), reverse=True)


@pytest.mark.parametrize("seed", range(6))
def test_gnome_sort_ascending_and_descending(seed):
    items = _random_list(seed)
    gnome_sort(items, 0, len(items) - 1, ascending)
    assert items == sorted(_random_list(seed))
    items = _random_list(seed)
    gnome_sort(items, 0, len(items) - 1, descending)
    assert items == sorted(_random_list(seed), reverse=True)


@pytest.mark.parametrize("seed", range(4))
def test_quick_sort_touches_only_subrange(seed):
    original = _random_list(seed, size=20)
    items = list(original)
    quick_sort(items, 5, 14, ascending)
    assert items[:5] == original[:5]
    assert items[15:] == original[15:]
    assert items[5:15] == sorted(original[5:15])


@pytest.mark.parametrize("seed", range(4))
def test_bubble_sort_touches_only_subrange(seed):
    original = _random_list(seed, size=20)
    items = list(original)
    bubble_sort(items, 5, 14, ascending)
    assert items[:5] == original[:5]
    assert items[15:] == original[15:]
    assert items[5:15] == sorted(original[5:15])


@pytest.mark.parametrize("seed", range(4))
def test_gnome_sort_touches_only_subrange(seed):
    original = _random_list(seed, size=20)
    items = list(original)
    gnome_sort(items, 5, 14, ascending)
    assert items[:5] == original[:5]
    assert items[15:] == original[15:]
    assert items[5:15] == sorted(original[5:15])


def test_sorters_reject_reversed_range():
    with pytest.raises(RangeError):
        quick_sort([3, 2, 1], 2, 1, ascending)
    with pytest.raises(RangeError):
        bubble_sort([3, 2, 1], 2, 1, ascending)
    with pytest.raises(RangeError):
        gnome_sort([3, 2, 1], 2, 1, ascending)


def test_bogosort_sorts_small_list():
    items = [4, 1, 3, 2, 0]
    bogosort(items, 0, 4, ascending, random.Random(7))
    assert items == [0, 1, 2, 3, 4]


def test_bogosort_leaves_sorted_list_alone():
    items = [1, 2, 3]
    bogosort(items, 0, 2, ascending, random.Random(1))
    assert items == [1, 2, 3]


def test_miracle_sort_returns_for_sorted_list():
    items = [1, 2, 3]
    miracle_sort(items, 0, 2, ascending)
    assert items == [1, 2, 3]


def test_miracle_sort_returns_for_sorted_subrange():
    items = [5, 1, 2, 3, 0]
    miracle_sort(items, 1, 3, ascending)
    assert items == [5, 1, 2, 3, 0]


def test_miracle_sort_rejects_bad_range():
    with pytest.raises(RangeError):
        miracle_sort([1, 2, 3], 2, 0, ascending)
    with pytest.raises(IndexError):
        miracle_sort([1, 2, 3], 0, 3, ascending)