# drills

A collection of small, classic programming exercises, exposed as plain
Python functions and a `drills` command-line tool.

## Installation

```
pip install .
```

## Modules

- `drills.numbers`: `classify_sign` (returns a `Sign` member: `NEGATIVE`,
  `ZERO` or `POSITIVE`), `is_armstrong` (sum of the cubes of the digits),
  `factorial` (1 for zero or negative input), `fibonacci_series` (the
  first `count` terms, never fewer than `[0, 1]`), `gcd` and `lcm` (positive
  integers only, otherwise `ValueError`), `largest_of_three`,
  `is_leap_year`, `is_even`, `reverse_integer` (keeps the sign),
  `is_palindrome_number`, `is_prime`, `multiplication_table` (ten lines of
  the form `n * i = p`) and `swap`.
- `drills.calculator`: `calculate(op, n1, n2)` for `+`, `-`, `*` and `/`;
  division by zero raises `ZeroDivisionError` and an unknown operator
  raises `ValueError`. `format_calculation(op, n1, n2)` returns a line such
  as `Result : 7.00 / 2.00 = 3.50`.
- `drills.arrays`: `format_array` (flat or nested lists as space- and
  newline-separated text), `arrays_equal`, `is_sorted`, `common_elements`,
  `duplicate_elements`, `find_max`, `find_min`, `max_min` (the last three
  raise `ValueError` on an empty sequence), `missing_number`,
  `rotate_left`, `rotate_right`, `zeros_to_front`, `zeros_to_end`,
  `is_palindrome_sequence`, `remove_duplicates`.
- `drills.matrices`: `matrices_equal`, `determinant_2x2` (`ValueError` for
  any other shape), `transpose` (`ValueError` for ragged rows),
  `format_matrix`.
- `drills.strings`: `is_palindrome_string`, `reverse_string`, `compare`
  (byte-wise comparison returning zero or the difference of the first
  differing bytes), `find_substring` (position or `None`), `byte_length`
  (length of the UTF-8 encoding).

## Library use

```python
from drills.numbers import gcd, lcm, is_leap_year
from drills.arrays import rotate_left, zeros_to_end
from drills.calculator import calculate

gcd(15, 25)                     # 5
lcm(15, 25)                     # 75
is_leap_year(2000)              # True
rotate_left([1, 2, 3, 4, 5])    # [2, 3, 4, 5, 1]
zeros_to_end([0, 1, 0, 3, 12])  # [1, 3, 12, 0, 0]
calculate("/", 7, 2)            # 3.5
```

## Command line

Installing the package provides a `drills` command with six subcommands:

```
drills calc / 7 2                  # Result : 7.00 / 2.00 = 3.50
drills calc '*' 3 4                # quote * so the shell leaves it alone
drills table 7                     # 7 * 1 = 7 ... 7 * 10 = 70
drills fibonacci 8                 # Fibonacci Series : 0 1 1 2 3 5 8 13
drills transpose 2 3 1 2 3 4 5 6   # prints the 3 x 2 transpose
drills reverse 1 2 3               # Reversed Array : 3 2 1
drills sum 10 20 30 40 50          # Sum of All Elements = 150
drills --help
```

`drills calc` exits with status 1 after printing an error line when asked
to divide by zero or given an operator other than `+ - * /`. `drills
transpose` takes the row count, the column count and then exactly
rows × cols values, row by row.

## What it does not do

The command does not prompt for input; every value is given as an
argument. Only the six subcommands above are available from the command
line; the other exercises are reached through the Python functions.

## Running the tests

```
pip install .[test]
pytest
```