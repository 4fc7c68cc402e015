"""Linear and binary searches over lists of integers."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence


def linear_search(values: Sequence[int], key: int) -> bool:
    """Tell whether key occurs anywhere in values."""
    return key in values


def binary_search(values: Sequence[int], key: int) -> int:
    """Return an index of key in ascending values, or -1 if it is absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == key:
            return mid
        if key > values[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def first_position(values: Sequence[int], key: int) -> int:
    """Return the first index of key in ascending values, or -1."""
    index = bisect_left(values, key)
    return index if index < len(values) and values[index] == key else -1


def last_position(values: Sequence[int], key: int) -> int:
    """Return the last index of key in ascending values, or -1."""
    index = bisect_right(values, key) - 1
    return index if index >= 0 and values[index] == key else -1


def first_and_last_position(values: Sequence[int], key: int) -> tuple[int, int]:
    """Return (first, last) indices of key in ascending values, (-1, -1) if absent."""
    return first_position(values, key), last_position(values, key)


def count_occurrences(values: Sequence[int], key: int) -> int:
    """Count key in ascending values using two binary searches."""
    first = first_position(values, key)
    if first == -1:
        return 0
    return last_position(values, key) - first + 1


def pivot_index(values: Sequence[int]) -> int:
    """Return the first index whose left and right sums are equal, or -1."""
    left, right = 0, sum(values)
    for index, value in enumerate(values):
        right -= value
        if left == right:
            return index
        left += value
    return -1


def rotation_pivot(values: Sequence[int]) -> int:
    """Return the index of the smallest element of a rotated ascending sequence."""
    if not values:
        raise ValueError("cannot find the pivot of an empty sequence")
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] >= values[end]:
            start = mid + 1
        else:
            end = mid
    return start


def peak_index(values: Sequence[int]) -> int:
    """Return the index of the peak of a mountain-shaped sequence."""
    if not values:
        raise ValueError("cannot find the peak of an empty sequence")
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] < values[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start