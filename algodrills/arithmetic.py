"""Small arithmetic exercises and an interactive calculator."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Iterator, Sequence, TextIO

DENOMINATIONS = (100, 50, 20, 1)

_MENU = "\n".join(
    [
        "---------- Calculator Program ----------",
        "Addition (+)",
        "Subtraction (-)",
        "Multiplication (*)",
        "Division (/)",
        "Exit (0)",
    ]
)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting 0 as the first."""
    if n < 1:
        raise ValueError("Invalid Number of Terms!")
    first, second = 0, 1
    for _ in range(n - 1):
        first, second = second, first + second
    return first


def power(base: int, exponent: int) -> int:
    """Multiply base by itself exponent times; a non-positive exponent gives 1."""
    return base ** max(exponent, 0)


def natural_sum(n: int) -> int:
    """Sum 1..n (0 when n < 1)."""
    return sum(range(1, n + 1))


def even_sum(n: int) -> int:
    """Sum the even numbers between 1 and n."""
    return sum(range(2, n + 1, 2))


def odd_sum(n: int) -> int:
    """Sum the odd numbers between 1 and n."""
    return sum(range(1, n + 1, 2))


def character_type(char: str) -> str:
    """Classify a single ASCII character as digit, letter case or special."""
    if len(char) != 1:
        raise ValueError("expected exactly one character")
    if "0" <= char <= "9":
        return "Numeric Digit"
    if "A" <= char <= "Z":
        return "Uppercase Alphabet"
    if "a" <= char <= "z":
        return "Lowercase Alphabet"
    return "Special Character"


def is_prime(x: int) -> bool:
    """Tell whether x is a prime number."""
    if x < 2:
        return False
    return all(x % divisor for divisor in range(2, math.isqrt(x) + 1))


def factorial(x: int) -> int:
    """Return x!; raise ValueError for negative x."""
    if x < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.factorial(x)


def n_choose_r(n: int, r: int) -> int:
    """Return the binomial coefficient nCr; raise ValueError unless 0 <= r <= n."""
    if not 0 <= r <= n:
        raise ValueError("Invalid Parameters!")
    return factorial(n) // (factorial(r) * factorial(n - r))


def nth_term(n: int) -> int:
    """Return the n-th term of the progression 3n + 7."""
    return 3 * n + 7


def natural_numbers(n: int) -> list[int]:
    """Return the counting numbers 1..n."""
    return list(range(1, n + 1))


def notes_required(amount: int) -> dict[int, int]:
    """Split amount greedily into 100, 50, 20 and 1 notes, keyed by denomination."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    notes: dict[int, int] = {}
    for denomination in DENOMINATIONS:
        notes[denomination], amount = divmod(amount, denomination)
    return notes


def calculate(operator: str, x: float, y: float) -> float:
    """Apply one of + - * / to x and y."""
    if operator == "+":
        return x + y
    if operator == "-":
        return x - y
    if operator == "*":
        return x * y
    if operator == "/":
        if y == 0:
            raise ZeroDivisionError("Can't divide by zero.")
        return x / y
    raise ValueError(f"unknown operator: {operator!r}")


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_operand(prompt: str, tokens: Iterator[str]) -> float | None:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        return None
    return float(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive calculator on standard input and output."""
    parser = argparse.ArgumentParser(description="Interactive four-function calculator.")
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    while True:
        print(_MENU)
        print("Enter your choice: ", end="", flush=True)
        choice = next(tokens, None)
        if choice is None:
            print()
            return 0
        if choice == "0":
            print("Program quitted.")
            return 0
        try:
            x = _read_operand("Enter 1st operand (num, double): ", tokens)
            if x is None:
                print()
                return 0
            y = _read_operand("Enter 2nd operand (num, double): ", tokens)
            if y is None:
                print()
                return 0
        except ValueError as exc:
            print(f"\ninvalid operand: {exc}", file=sys.stderr)
            return 1
        try:
            print(f"{calculate(choice, x, y):g}")
        except ZeroDivisionError:
            print("Can't divide by zero.")
        except ValueError:
            pass