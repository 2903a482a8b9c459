"""Basic array algorithms: reversal, searching, sorting and transposition."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def reverse_in_place(items: MutableSequence[Any]) -> None:
    """Reverse ``items`` by swapping elements from both ends towards the middle."""
    size = len(items)
    for i in range(size // 2):
        items[i], items[size - 1 - i] = items[size - 1 - i], items[i]


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Index of ``target`` in the ascending sequence ``items``.

    Raises ValueError when the value is not present.
    """
    index = bisect_left(items, target)
    if index < len(items) and items[index] == target:
        return index
    raise ValueError(f"{target!r} not found")


def bubble_sort(items: Sequence[T]) -> list[T]:
    """Return a new ascending list sorted by repeated adjacent swaps."""
    result = list(items)
    size = len(result)
    for _ in range(size - 1):
        for d in range(size - 1):
            if result[d] > result[d + 1]:
                result[d], result[d + 1] = result[d + 1], result[d]
    return result


def transpose(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    """Return the transpose of a rectangular matrix."""
    if not matrix:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*matrix)]