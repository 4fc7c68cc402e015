import pytest

from algodrills.bits import (
    binary_to_decimal,
    bitwise_complement,
    decimal_to_binary,
    even_odd,
    find_complement,
    hamming_weight,
    is_power_of_two,
    reverse_integer,
    subtract_product_and_sum,
    to_base7,
)


def test_complement_of_zero_is_one():
    assert bitwise_complement(0) == 1
    assert find_complement(0) == 1


@pytest.mark.parametrize("n", range(1, 300))
def test_complement_fills_the_bit_length(n):
    c = bitwise_complement(n)
    assert c & n == 0
    assert c | n == (1 << n.bit_length()) - 1
    assert find_complement(n) == c


def test_complement_rejects_negative():
    with pytest.raises(ValueError):
        bitwise_complement(-5)
    with pytest.raises(ValueError):
        find_complement(-1)


@pytest.mark.parametrize("n", [0, 1, 7, 11, 128, 255, 2**31 - 1, 123456])
def test_hamming_weight_matches_binary_digits(n):
    assert hamming_weight(n) == bin(n).count("1")


@pytest.mark.parametrize("n", [0, 5, -5, 1000, -(2**31), 2**31 - 1])
def test_hamming_weight_of_n_and_not_n_fill_word(n):
    assert hamming_weight(n) + hamming_weight(~n) == 32


def test_hamming_weight_of_minus_one():
    assert hamming_weight(-1) == 32


def test_hamming_weight_rejects_out_of_range():
    with pytest.raises(ValueError):
        hamming_weight(2**31)


def test_power_of_two():
    powers = {2**k for k in range(31)}
    for n in range(-20, 5000):
        assert is_power_of_two(n) == (n in powers)
    assert is_power_of_two(2**30)


@pytest.mark.parametrize("n", range(-100, 101))
def test_base7_round_trip(n):
    text = to_base7(n)
    assert int(text, 7) == n
    assert text.startswith("-") == (n < 0)


def test_base7_zero():
    assert to_base7(0) == "0"


@pytest.mark.parametrize("n", [1, 12, 123, 4567, 98761, 1234567])
def test_reverse_integer_round_trip(n):
    assert reverse_integer(reverse_integer(n)) == n
    assert reverse_integer(-n) == -reverse_integer(n)


@pytest.mark.parametrize("n", [3, 42, 987])
def test_reverse_integer_drops_trailing_zeros(n):
    assert reverse_integer(n * 100) == reverse_integer(n)


def test_reverse_integer_overflow_gives_zero():
    assert reverse_integer(2**31 - 1) == 0
    assert reverse_integer(-(2**31)) == 0


def test_subtract_product_and_sum_example():
    assert subtract_product_and_sum(234) == 15


def test_subtract_product_and_sum_of_zero():
    assert subtract_product_and_sum(0) == 1


@pytest.mark.parametrize("d", range(1, 10))
def test_subtract_product_and_sum_single_digit(d):
    assert subtract_product_and_sum(d) == 0


@pytest.mark.parametrize("n", [123, 4567, 98, 3141])
def test_subtract_product_and_sum_ignores_digit_order(n):
    assert subtract_product_and_sum(n) == subtract_product_and_sum(int(str(n)[::-1]))


@pytest.mark.parametrize("n", [0, 1, 2, 255, 1024, 2**31 - 1])
def test_decimal_binary_round_trip(n):
    text = decimal_to_binary(n)
    assert len(text) == 32
    assert binary_to_decimal(text) == n


@pytest.mark.parametrize("n", [-1, -2, -100, -(2**31)])
def test_decimal_to_binary_negative_is_twos_complement(n):
    text = decimal_to_binary(n)
    assert len(text) == 32
    assert binary_to_decimal(text) == n + 2**32


def test_decimal_to_binary_extremes():
    assert set(decimal_to_binary(-1)) == {"1"}
    assert set(decimal_to_binary(0)) == {"0"}


def test_decimal_to_binary_rejects_out_of_range():
    with pytest.raises(ValueError):
        decimal_to_binary(2**31)


@pytest.mark.parametrize("text", ["", "0", "1", "101", "1111", "100000", "1" * 40])
def test_binary_to_decimal_matches_int(text):
    assert binary_to_decimal(text) == int(text or "0", 2)


@pytest.mark.parametrize("n", range(-10, 11))
def test_even_odd(n):
    assert even_odd(2 * n) == "Even"
    assert even_odd(2 * n + 1) == "Odd"