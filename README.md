# algodrills

Short solutions to classic programming exercises. They cover array
manipulation, searching, bit tricks, basic arithmetic and text patterns.
Every function takes plain Python values and returns plain Python values.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algodrills.arrays`
  - `min_of` and `max_of` raise `ValueError` on empty input.
  - `format_array` writes each element followed by a space.
  - `array_sum` adds the elements.
  - `reverse_in_place`, `swap_alternate` and `sort_zeros_ones` change the
    list they are given and also return it.
  - `intersection` takes two ascending lists and keeps duplicates.
  - `pair_sum` returns a sorted list of `(smaller, larger)` tuples.
  - `find_duplicates` returns every value that appears again.
  - `unique_occurrences` tells whether no two values share a count.
- `algodrills.searching`
  - `linear_search` returns a bool.
  - `binary_search` returns an index or `-1`.
  - `first_position`, `last_position` and `first_and_last_position` work
    on ascending lists and return `-1` when the key is absent.
  - `count_occurrences` counts a key in an ascending list.
  - `pivot_index` finds the first index where the sums to its left and
    right are equal.
  - `rotation_pivot` returns the index of the smallest element of a rotated
    ascending list.
  - `peak_index` returns the index of the peak of a mountain-shaped list.
  - `rotation_pivot` and `peak_index` raise `ValueError` on empty input.
- `algodrills.bits`
  - `bitwise_complement` and `find_complement` work on non-negative
    integers.
  - `hamming_weight` counts the set bits of the 32-bit two's complement
    form.
  - `is_power_of_two` tests for a single set bit.
  - `to_base7` converts to base 7.
  - `reverse_integer` returns 0 when the result does not fit in 32 bits.
  - `subtract_product_and_sum` works on the decimal digits.
  - `decimal_to_binary` returns a 32-character two's complement string.
  - `binary_to_decimal` reads a binary string.
  - `even_odd` returns `"Even"` or `"Odd"`.
  - `hamming_weight` and `decimal_to_binary` raise `ValueError` for values
    outside the 32-bit signed range.
- `algodrills.arithmetic`
  - `fibonacci(1)` is 0.
  - `power` returns 1 for a non-positive exponent.
  - `natural_sum`, `even_sum` and `odd_sum` add numbers from 1 to n.
  - `character_type` classifies one character.
  - `is_prime`, `factorial` and `n_choose_r` do what their names say.
  - `nth_term` gives the progression `3n + 7`.
  - `natural_numbers` returns 1 to n.
  - `notes_required` splits an amount into 100, 50, 20 and 1 notes. It
    returns a dict keyed by denomination.
  - `calculate` applies one of `+ - * /` to two numbers.
- `algodrills.patterns`: each function takes a number of rows `n` and
  returns the rows as a list of strings. The list is empty when `n < 1`.
  - `square`, `row_digits`, `counting_columns`, `reversed_columns`,
    `numbered_grid`
  - `staircase`, `floyd_triangle`, `rising_rows`, `rising_rows_by_sum`,
    `countdown_triangle`
  - `letter_rows`, `letter_grid`, `letter_triangle`,
    `trailing_letter_triangle`
  - `right_aligned_stairs`, `number_pyramid`, `hollow_numbers`
- `algodrills.basics`
  - `greeting` defaults to `"Hello World!"`.
  - `larger` returns the greater of two values.
  - `sign` returns `"+ve"`, `"0"` or `"-ve"`.
  - `count_up` returns 1 to n.
  - `number_word` names 1, 2 and 3. Anything else is `"Zero"`.
  - `group_word` returns `"1/2/3"` for any of 1, 2 or 3. Anything else is
    `"Zero"`.
  - `swap` returns its two arguments in exchanged order.

## Example

```python
from algodrills.searching import binary_search, first_and_last_position
from algodrills.bits import to_base7
from algodrills.patterns import floyd_triangle

binary_search([3, 8, 11, 14, 16], 11)                 # 2
first_and_last_position([1, 2, 3, 3, 3, 4, 5, 5], 3)  # (2, 4)
to_base7(-7)                                          # "-10"
print("\n".join(floyd_triangle(3)))
```

Functions raise `ValueError` when their input has no sensible result, for
example `fibonacci(0)` or `n_choose_r(2, 5)`. `calculate` raises
`ZeroDivisionError` on division by zero.

## Calculator

The package installs an interactive calculator:

```
algodrills-calc
```

The calculator reads whitespace-separated input from standard input.

1. It shows a menu.
2. You enter an operation (`+`, `-`, `*`, `/`).
3. You enter two operands.
4. It prints the result.

Entering `0` as the choice quits, and so does reaching the end of input.

- Division by zero prints `Can't divide by zero.` instead of a result.
- An unknown operation prints nothing and the menu shows again.
- An operand that is not a number ends the program with exit status 1.