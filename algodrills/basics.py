"""First steps: greetings, comparisons, simple loops and switch-style lookups."""

from __future__ import annotations

_NUMBER_WORDS = {1: "One", 2: "Two", 3: "Three"}
_GROUPED = frozenset(_NUMBER_WORDS)


def greeting(name: str = "World") -> str:
    """Return the classic greeting for name."""
    return f"Hello {name}!"


def larger(a: int, b: int) -> int:
    """Return the greater of a and b (a when they are equal)."""
    return a if a >= b else b


def sign(x: int) -> str:
    """Describe x as "+ve", "0" or "-ve"."""
    if x > 0:
        return "+ve"
    if x == 0:
        return "0"
    return "-ve"


def count_up(n: int) -> list[int]:
    """Return 1..n."""
    return list(range(1, n + 1))


def number_word(x: int) -> str:
    """Name 1, 2 or 3; anything else is "Zero"."""
    return _NUMBER_WORDS.get(x, "Zero")


def group_word(y: int) -> str:
    """Return "1/2/3" for any of 1, 2 or 3, otherwise "Zero"."""
    if y in _GROUPED:
        return "/".join(str(value) for value in sorted(_GROUPED))
    return "Zero"


def swap(a: object, b: object) -> tuple[object, object]:
    """Return the two values in exchanged order."""
    return b, a