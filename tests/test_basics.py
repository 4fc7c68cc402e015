import pytest

from algodrills import basics


def test_greeting_default_world():
    assert basics.greeting() == "Hello World!"


def test_greeting_universe():
    assert basics.greeting("Universe") == "Hello Universe!"


@pytest.mark.parametrize("a,b", [(3, 5), (5, 3), (-2, -7), (4, 4)])
def test_larger_is_max(a, b):
    assert basics.larger(a, b) == max(a, b)


@pytest.mark.parametrize("x,expected", [(7, "+ve"), (0, "0"), (-3, "-ve")])
def test_sign(x, expected):
    assert basics.sign(x) == expected


def test_count_up_consecutive():
    values = basics.count_up(5)
    assert len(values) == 5
    assert values[0] == 1
    assert all(b - a == 1 for a, b in zip(values, values[1:]))


def test_count_up_empty_for_zero():
    assert basics.count_up(0) == []


@pytest.mark.parametrize(
    "x,expected", [(1, "One"), (2, "Two"), (3, "Three"), (0, "Zero"), (9, "Zero")]
)
def test_number_word(x, expected):
    assert basics.number_word(x) == expected


@pytest.mark.parametrize("y,expected", [(1, "1/2/3"), (2, "1/2/3"), (3, "1/2/3"), (4, "Zero")])
def test_group_word(y, expected):
    assert basics.group_word(y) == expected


def test_swap_exchanges():
    assert basics.swap(2, 3) == (3, 2)


def test_swap_twice_restores():
    assert basics.swap(*basics.swap("x", "y")) == ("x", "y")