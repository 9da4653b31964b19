import random

import pytest

from algobox.searching import binary_search, index_of_max, linear_search, min_max

SOURCE_ARRAY = [2, 3, 4, 7, 10, 11, 40]


def test_binary_search_source_example():
    assert binary_search(SOURCE_ARRAY, 40) == 6


def test_linear_search_source_example():
    assert linear_search(SOURCE_ARRAY, 10) == 4


@pytest.mark.parametrize("target", SOURCE_ARRAY)
def test_binary_search_finds_every_element(target):
    index = binary_search(SOURCE_ARRAY, target)
    assert SOURCE_ARRAY[index] == target


@pytest.mark.parametrize("target", [-5, 1, 5, 12, 41])
def test_binary_search_missing(target):
    assert binary_search(SOURCE_ARRAY, target) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


@pytest.mark.parametrize("seed", range(5))
def test_binary_search_agrees_with_membership(seed):
    rng = random.Random(seed)
    data = sorted(rng.randint(0, 100) for _ in range(40))
    for target in range(-1, 102):
        index = binary_search(data, target)
        if target in data:
            assert data[index] == target
        else:
            assert index is None


@pytest.mark.parametrize("target", SOURCE_ARRAY)
def test_linear_search_matches_list_index(target):
    assert linear_search(SOURCE_ARRAY, target) == SOURCE_ARRAY.index(target)


def test_linear_search_first_occurrence_and_missing():
    data = [5, 1, 5, 1]
    assert linear_search(data, 1) == data.index(1)
    assert linear_search(data, 9) is None
    assert linear_search(iter([]), 9) is None


def test_index_of_max_first_occurrence():
    assert index_of_max([1, 5, 5, 2]) == 1


@pytest.mark.parametrize("seed", range(5))
def test_index_of_max_invariant(seed):
    rng = random.Random(seed)
    data = [rng.randint(-20, 20) for _ in range(25)]
    index = index_of_max(data)
    assert data[index] == max(data)
    assert all(value < data[index] for value in data[:index])


def test_index_of_max_empty():
    with pytest.raises(ValueError):
        index_of_max([])


@pytest.mark.parametrize("seed", range(5))
def test_min_max_matches_builtins(seed):
    rng = random.Random(seed)
    data = [rng.randint(-100, 100) for _ in range(rng.randint(1, 30))]
    assert min_max(data) == (min(data), max(data))


def test_min_max_all_negative():
    data = [-7, -3, -12]
    assert min_max(data) == (min(data), max(data))


def test_min_max_single():
    assert min_max([42]) == (42, 42)


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])