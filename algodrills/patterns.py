"""Text patterns of stars, numbers and letters, built row by row.

Every function returns the rows of its pattern as a list of strings,
exactly as they would be printed. Rows are empty lists for n < 1.
"""

from __future__ import annotations

from itertools import count


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def _spaced(items: object) -> str:
    return "".join(f"{item} " for item in items)  # type: ignore[attr-defined]


def square(n: int) -> list[str]:
    """An n by n block of stars."""
    return ["*" * n for _ in range(n)]


def row_digits(n: int) -> list[str]:
    """Row i repeats the digit i, n times."""
    return [str(row) * n for row in range(1, n + 1)]


def counting_columns(n: int) -> list[str]:
    """Every row counts 1..n."""
    line = "".join(str(col) for col in range(1, n + 1))
    return [line for _ in range(n)]


def reversed_columns(n: int) -> list[str]:
    """Every row counts down n..1."""
    line = "".join(str(col) for col in range(n, 0, -1))
    return [line for _ in range(n)]


def numbered_grid(n: int) -> list[str]:
    """An n by n grid numbered 1..n*n row by row."""
    numbers = count(1)
    return [_spaced(next(numbers) for _ in range(n)) for _ in range(n)]


def staircase(n: int) -> list[str]:
    """Row i holds i stars."""
    return ["* " * row for row in range(1, n + 1)]


def floyd_triangle(n: int) -> list[str]:
    """Row i holds the next i consecutive numbers, starting from 1."""
    numbers = count(1)
    return [_spaced(next(numbers) for _ in range(row)) for row in range(1, n + 1)]


def rising_rows(n: int) -> list[str]:
    """Row i counts up from i, holding i numbers."""
    return [_spaced(range(row, 2 * row)) for row in range(1, n + 1)]


def rising_rows_by_sum(n: int) -> list[str]:
    """Row k holds k + l - 1 for each column l in 1..k."""
    return [
        _spaced(row + col - 1 for col in range(1, row + 1)) for row in range(1, n + 1)
    ]


def countdown_triangle(n: int) -> list[str]:
    """Row i counts down from i to 1."""
    return [_spaced(range(row, 0, -1)) for row in range(1, n + 1)]


def letter_rows(n: int) -> list[str]:
    """Row i repeats the i-th letter n times."""
    return [_spaced(_letter(row) for _ in range(n)) for row in range(n)]


def letter_grid(n: int) -> list[str]:
    """Row i, column j holds the letter at offset i + j (both from 0)."""
    return [_spaced(_letter(row + col) for col in range(n)) for row in range(n)]


def letter_triangle(n: int) -> list[str]:
    """Row i repeats the i-th letter i times."""
    return [_spaced(_letter(row - 1) for _ in range(row)) for row in range(1, n + 1)]


def trailing_letter_triangle(n: int) -> list[str]:
    """Row i holds the last i letters of the first n, in order."""
    return [
        _spaced(_letter(n - row + col) for col in range(row)) for row in range(1, n + 1)
    ]


def right_aligned_stairs(n: int) -> list[str]:
    """Row i is i stars pushed right to width n."""
    return [" " * (n - row) + "*" * row for row in range(1, n + 1)]


def number_pyramid(n: int) -> list[str]:
    """Row i counts 1..i and back to 1, indented so the rows are centred."""
    return [
        "  " * (n - row) + _spaced(range(1, row + 1)) + _spaced(range(row - 1, 0, -1))
        for row in range(1, n + 1)
    ]


def hollow_numbers(n: int) -> list[str]:
    """Numbers counting in from both edges with a widening band of stars between."""
    rows = []
    for row in range(1, n + 1):
        width = n - row + 1
        rows.append(
            _spaced(range(1, width + 1))
            + "* " * (2 * (row - 1))
            + _spaced(range(width, 0, -1))
        )
    return rows