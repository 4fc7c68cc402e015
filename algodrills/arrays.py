"""Everyday operations on lists of integers."""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Iterable, MutableSequence, Sequence


def min_of(values: Iterable[int]) -> int:
    """Return the smallest element; raise ValueError for an empty input."""
    items = list(values)
    if not items:
        raise ValueError("cannot take the minimum of an empty sequence")
    return min(items)


def max_of(values: Iterable[int]) -> int:
    """Return the largest element; raise ValueError for an empty input."""
    items = list(values)
    if not items:
        raise ValueError("cannot take the maximum of an empty sequence")
    return max(items)


def format_array(values: Iterable[object]) -> str:
    """Render the elements each followed by a single space."""
    return "".join(f"{value} " for value in values)


def reverse_in_place(values: MutableSequence[int]) -> MutableSequence[int]:
    """Reverse the sequence in place and return it."""
    values.reverse()
    return values


def array_sum(values: Iterable[int]) -> int:
    """Return the sum of all elements (0 for an empty input)."""
    return sum(values)


def swap_alternate(values: MutableSequence[int]) -> MutableSequence[int]:
    """Swap each pair of neighbours (0,1), (2,3), ... in place and return it.

    A trailing element without a partner stays where it is.
    """
    paired = len(values) - len(values) % 2
    values[0:paired:2], values[1:paired:2] = values[1:paired:2], values[0:paired:2]
    return values


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the common elements of two ascending sequences, duplicates included."""
    result: list[int] = []
    left, right = iter(first), iter(second)
    try:
        a, b = next(left), next(right)
        while True:
            if a == b:
                result.append(a)
                a, b = next(left), next(right)
            elif a < b:
                a = next(left)
            else:
                b = next(right)
    except StopIteration:
        pass
    return result


def pair_sum(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return every pair of positions whose values add to target.

    Each pair is ordered (smaller, larger) and the list is sorted.
    """
    return sorted(
        (min(a, b), max(a, b))
        for a, b in combinations(values, 2)
        if a + b == target
    )


def sort_zeros_ones(values: MutableSequence[int]) -> MutableSequence[int]:
    """Sort a sequence of 0s and 1s in place with one two-ended scan and return it."""
    left, right = 0, len(values) - 1
    while left < right:
        if values[left] == 0:
            left += 1
        elif values[right] == 1:
            right -= 1
        else:
            values[left], values[right] = values[right], values[left]
            left += 1
            right -= 1
    return values


def find_duplicates(nums: Iterable[int]) -> list[int]:
    """Return each value every time it is seen again, in order of reappearance."""
    seen: set[int] = set()
    repeats: list[int] = []
    for value in nums:
        if value in seen:
            repeats.append(value)
        else:
            seen.add(value)
    return repeats


def unique_occurrences(values: Iterable[int]) -> bool:
    """Tell whether no two distinct values occur the same number of times."""
    counts = Counter(values)
    return len(set(counts.values())) == len(counts)