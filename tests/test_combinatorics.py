import itertools

import pytest

from algobox.combinatorics import (
    Move,
    assign,
    hanoi_moves,
    knapsack,
    partition_equal,
)


MATRIX = [
    [9, 2, 7, 8],
    [6, 4, 3, 7],
    [5, 8, 1, 8],
    [7, 6, 9, 4],
]


def test_assignment_is_a_permutation_with_matching_cost():
    result = assign(MATRIX)
    assert sorted(result.jobs) == list(range(len(MATRIX)))
    assert result.cost == sum(MATRIX[p][j] for p, j in enumerate(result.jobs))


def test_assignment_is_no_worse_than_any_permutation():
    result = assign(MATRIX)
    for jobs in itertools.permutations(range(len(MATRIX))):
        assert result.cost <= sum(MATRIX[p][j] for p, j in enumerate(jobs))


def test_assignment_costs_above_hundred_are_handled():
    big = [[row_value + 1000 for row_value in row] for row in MATRIX]
    result = assign(big)
    assert result.cost == assign(MATRIX).cost + 4000


def test_assignment_prefers_free_diagonal():
    matrix = [[0 if p == j else 5 for j in range(3)] for p in range(3)]
    result = assign(matrix)
    assert result.jobs == (0, 1, 2)
    assert result.cost == 0


def test_assignment_single_person():
    result = assign([[7]])
    assert result.jobs == (0,)
    assert result.cost == 7


@pytest.mark.parametrize("matrix", [[], [[1, 2], [3]], [[1, 2]]])
def test_assignment_rejects_bad_matrices(matrix):
    with pytest.raises(ValueError):
        assign(matrix)


def test_knapsack_known_case():
    result = knapsack([1, 2, 3], [6, 10, 12], 5)
    assert result.items == (1, 2)
    assert result.value == 22
    assert result.weight == 5


def test_knapsack_result_is_consistent():
    weights = [4, 3, 7, 2, 5, 1]
    values = [10, 4, 13, 7, 8, 2]
    result = knapsack(weights, values, 11)
    assert result.weight <= 11
    assert result.weight == sum(weights[i] for i in result.items)
    assert result.value == sum(values[i] for i in result.items)
    assert result.operations == 2 ** len(weights) - 1
    for size in range(len(weights) + 1):
        for subset in itertools.combinations(range(len(weights)), size):
            if sum(weights[i] for i in subset) <= 11:
                assert sum(values[i] for i in subset) <= result.value


def test_knapsack_nothing_fits():
    result = knapsack([5, 6], [3, 4], 0)
    assert result.items == ()
    assert result.value == 0
    assert result.weight == 0


def test_knapsack_length_mismatch():
    with pytest.raises(ValueError):
        knapsack([1, 2], [3], 4)


@pytest.mark.parametrize("items", [[1, 5, 11, 5], [3, 1, 1, 2, 2, 1], [4, 4]])
def test_partition_splits_evenly(items):
    result = partition_equal(items)
    assert result is not None
    first, second = result
    assert sum(first) == sum(second) == sum(items) // 2
    assert sorted(first + second) == sorted(items)


def test_partition_keeps_original_order():
    items = [3, 1, 1, 2, 2, 1]
    first, second = partition_equal(items)
    positions = iter(items)
    assert all(value in positions for value in first)
    positions = iter(items)
    assert all(value in positions for value in second)


@pytest.mark.parametrize("items", [[], [1, 2, 4], [2, 3, 7]])
def test_partition_impossible(items):
    assert partition_equal(items) is None


def test_hanoi_single_disk_uses_default_pegs():
    assert list(hanoi_moves(1)) == [Move(1, "A", "C")]


@pytest.mark.parametrize("disks", [0, 1, 2, 3, 5, 8])
def test_hanoi_moves_are_legal_and_complete(disks):
    pegs = {"A": list(range(disks, 0, -1)), "B": [], "C": []}
    moves = list(hanoi_moves(disks))
    for move in moves:
        assert pegs[move.source][-1] == move.disk
        pegs[move.source].pop()
        if pegs[move.target]:
            assert pegs[move.target][-1] > move.disk
        pegs[move.target].append(move.disk)
    assert pegs["C"] == list(range(disks, 0, -1))
    assert len(moves) == 2 ** disks - 1


def test_hanoi_custom_pegs():
    moves = list(hanoi_moves(2, "X", "Z", "Y"))
    assert {move.source for move in moves} | {move.target for move in moves} == {
        "X",
        "Y",
        "Z",
    }
    assert moves[-1].target == "Z"