"""Text patterns of stars and numbers, each returned as newline-terminated lines."""

from __future__ import annotations


def _lines(rows) -> str:
    return "".join(f"{row}\n" for row in rows)


def concentric_square(n: int) -> str:
    """Square of numbers falling from ``n`` at the border to 1 at the centre.

    Every number is followed by a single space.
    """

    def row(level: int) -> str:
        left = (max(j, level) for j in range(n, 0, -1))
        right = (max(j, level) for j in range(2, n + 1))
        return "".join(f"{value} " for value in (*left, *right))

    levels = [*range(n, 1, -1), *range(1, n + 1)]
    return _lines(row(level) for level in levels)


def hollow_rectangle(rows: int, cols: int) -> str:
    """Rectangle outline drawn with ``"* "`` cells and single-space interior cells."""

    def row(i: int) -> str:
        if i in (1, rows):
            return "* " * cols
        return "".join("* " if j in (1, cols) else " " for j in range(1, cols + 1))

    return _lines(row(i) for i in range(1, rows + 1))


def right_aligned_triangle(n: int) -> str:
    """Triangle of stars aligned to the right edge, growing by one per row."""
    return _lines(" " * (n - i) + "*" * i for i in range(1, n + 1))


def butterfly(n: int) -> str:
    """Butterfly of stars: wings widening towards the middle, then narrowing."""

    def row(i: int) -> str:
        wing = "*" * i
        return wing + " " * (2 * n - 2 * i) + wing

    widths = [*range(1, n + 1), *range(n, 0, -1)]
    return _lines(row(i) for i in widths)


def star_triangle(rows: int) -> str:
    """Left-aligned triangle with one star on the first row."""
    return _lines("*" * count for count in range(1, rows + 1))


def reverse_star_triangle(rows: int) -> str:
    """Left-aligned triangle with ``rows`` stars on the first row."""
    return _lines("*" * count for count in range(rows, 0, -1))


def pyramid(rows: int) -> str:
    """Centred pyramid with an odd number of stars per row, no trailing spaces."""
    return _lines(" " * (rows - 1 - i) + "*" * (2 * i + 1) for i in range(rows))


def centered_pyramid(rows: int) -> str:
    """Centred pyramid padded on both sides to a width of ``2 * rows - 1``."""
    width = 2 * rows - 1

    def row(i: int) -> str:
        low, high = rows - i + 1, rows + i - 1
        return "".join("*" if low <= j <= high else " " for j in range(1, width + 1))

    return _lines(row(i) for i in range(1, rows + 1))