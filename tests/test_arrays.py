import random

import pytest

from dsalgos.arrays import binary_search, bubble_sort, reverse_in_place, transpose


@pytest.mark.parametrize(
    "items",
    [[1, 2, 3, 4, 5, 6, 7], [1, 2, 3, 4], [9], [], ["a", "b", "c"]],
)
def test_reverse_in_place(items):
    expected = list(reversed(items))
    reverse_in_place(items)
    assert items == expected


def test_reverse_twice_restores():
    items = [3, 1, 4, 1, 5, 9, 2, 6]
    original = list(items)
    reverse_in_place(items)
    reverse_in_place(items)
    assert items == original


def test_binary_search_finds_every_element():
    items = [2, 5, 8, 12, 16, 23, 38, 56, 72, 91]
    for index, value in enumerate(items):
        assert binary_search(items, value) == index


@pytest.mark.parametrize("target", [0, 3, 100])
def test_binary_search_missing_raises(target):
    with pytest.raises(ValueError):
        binary_search([1, 2, 4, 8, 16], target)


def test_binary_search_empty_raises():
    with pytest.raises(ValueError):
        binary_search([], 1)


def test_binary_search_duplicates_hit_matching_value():
    items = [1, 3, 3, 3, 7]
    assert items[binary_search(items, 3)] == 3


@pytest.mark.parametrize("seed", range(5))
def test_bubble_sort_matches_sorted(seed):
    rng = random.Random(seed)
    data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 30))]
    snapshot = list(data)
    assert bubble_sort(data) == sorted(data)
    assert data == snapshot


def test_bubble_sort_already_sorted_and_reversed():
    assert bubble_sort(range(10)) == list(range(10))
    assert bubble_sort(range(9, -1, -1)) == list(range(10))


def test_transpose_square():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    result = transpose(matrix)
    for i in range(3):
        for j in range(3):
            assert result[i][j] == matrix[j][i]


def test_transpose_rectangular_shape_and_round_trip():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8]]
    result = transpose(matrix)
    assert len(result) == 4
    assert all(len(row) == 2 for row in result)
    assert transpose(result) == matrix


def test_transpose_empty():
    assert transpose([]) == []


def test_transpose_ragged_raises():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])