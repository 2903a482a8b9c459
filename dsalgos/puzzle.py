"""Solvability check for sliding-tile puzzles, with 0 as the blank."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain


def inversion_count(tiles: Iterable[int]) -> int:
    """Count pairs of non-blank tiles that appear out of order."""
    values = [tile for tile in tiles if tile]
    return sum(
        1 for i, earlier in enumerate(values) for later in values[i + 1:] if earlier > later
    )


def blank_row_from_bottom(grid: Sequence[Sequence[int]]) -> int:
    """Row of the blank tile, counted from the bottom starting at 1."""
    for offset, row in enumerate(reversed(grid), start=1):
        if 0 in row:
            return offset
    raise ValueError("grid has no blank tile")


def is_solvable(grid: Sequence[Sequence[int]]) -> bool:
    """Whether the puzzle can reach the ordered position by sliding tiles."""
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")
    inversions = inversion_count(chain.from_iterable(grid))
    if size % 2:
        return inversions % 2 == 0
    if blank_row_from_bottom(grid) % 2:
        return inversions % 2 == 0
    return inversions % 2 == 1