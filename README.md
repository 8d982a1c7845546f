# episolve

A small library of solutions to classic array and primitive-type
problems. It covers stock trading, three-way partitioning, permutations,
random sampling, Sudoku checking, spiral traversal, bitwise arithmetic,
digit reversal, fast exponentiation and rectangle intersection.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `episolve.stocks`

- `buy_and_sell_once(prices)` returns a frozen `TradeSummary` with the
  fields `bought_at`, `sold_at` and `profit`. These describe the best
  single buy-then-sell trade. When no trade makes money, all three are
  zero. `str()` of a summary gives a short printable report. An empty
  `prices` raises `ValueError`.
- `max_profit_two_transactions(prices)` returns a `TwoTradeSummary` with
  `first_buy_price`, `first_sell_price`, `second_buy_price`,
  `second_sell_price` and `total_profit`. `total_profit` is the most that
  at most two non-overlapping trades can earn.

### `episolve.dutch_flag`

- `Color` is an `IntEnum` with the members `RED < GREEN < BLUE`. `str()`
  gives the lower-case name.
- `dutch_flag(pivot_index, colors)` reorders `colors` in place into three
  parts: smaller than the pivot, equal to it, and larger. It returns the
  same sequence. An out-of-range `pivot_index` raises `ValueError`.

### `episolve.sequences`

- `can_reach_end(steps)` tells whether the last index can be reached.
  Each entry is the longest jump allowed from that position.
- `plus_one(digits)` returns a new list of decimal digits for the number
  plus one, for example `[9, 9, 9]` becomes `[1, 0, 0, 0]`. Empty input
  raises `ValueError`.
- `multiply(num1, num2)` multiplies two numbers given as decimal digits.
  A negative number carries its sign on its first digit, and so does the
  result. Empty input raises `ValueError`.
- `next_permutation(nums)` rearranges `nums` in place into the next
  permutation in lexicographic order. It returns `False`, leaving `nums`
  unchanged, if there is none.
- `deduplicate(items)` returns a list with repeated neighbours dropped,
  so a sorted input keeps each value once.
- `apply_permutation(items, perm)` moves `items[i]` to position `perm[i]`
  in place. It raises `ValueError` if the lengths differ or `perm` is not
  a permutation of `0..n-1`.

### `episolve.primes`

- `generate_primes(n)` returns the primes up to and including `n`, using
  a sieve over odd numbers. For `n <= 2` it returns an empty list.

### `episolve.sampling`

Each function takes an optional `rng`, a `random.Random` instance. Pass
a seeded one to get reproducible results. Without one, a fresh generator
is used.

- `random_permutation(n, rng=None)` returns a uniformly random
  permutation of `0..n-1`.
- `nonuniform_random(values, probabilities, rng=None)` picks one of
  `values`, each with its matching probability.
- `random_subset(n, k, rng=None)` returns `k` distinct values from
  `0..n-1`. It uses O(k) extra space.
- `sample_offline(items, k, rng=None)` shuffles `items` in place so that
  its first `k` entries form a random subset, and returns those entries.
- `online_random_sample(stream, k, rng=None)` keeps a uniformly random
  sample of `k` integers from any iterable. Entries may be ints or lines
  of text. Lines that are not integers are skipped, so an open text file
  or `sys.stdin` can be passed directly.

Invalid sizes or mismatched lengths raise `ValueError`.

### `episolve.grids`

- `is_valid_sudoku(board)` checks a partially filled board for conflicts
  in its rows, columns and square regions. `0` marks an empty cell.
- `has_duplicate(board, start_row, start_col, end_row, end_col)` tells
  whether a non-zero value repeats inside the given half-open block.
- `spiral_order(matrix)` returns the entries in clockwise spiral order,
  starting at the top left. An empty matrix raises `ValueError`.

### `episolve.bits`

These functions work on unsigned integers. An argument outside the
32-bit range (for division) or the 64-bit range (for the others) raises
`ValueError`.

- `bitwise_divide(x, y)` computes `x // y` for 32-bit values with shifts
  and subtraction. A zero `y` raises `ZeroDivisionError`.
- `bitwise_add(a, b)` adds bit by bit and wraps at 64 bits.
- `bitwise_multiply(x, y)` multiplies with shifts and additions and wraps
  at 64 bits.
- `reverse_bits(x)` reverses the order of all 64 bits.

### `episolve.arithmetic`

- `reverse_digits(x)` reverses the decimal digits of `x` and keeps its
  sign. Zero raises `ValueError`. A result beyond the 32-bit signed range
  raises `OverflowError`.
- `power(x, y)` raises `x` to the integer power `y` by repeated squaring.
  `0 ** 0` raises `ValueError`, and zero to a negative power raises
  `ZeroDivisionError`.

### `episolve.rectangles`

- `Rectangle(x, y, width, height)` is a frozen dataclass.
  `is_valid()` is true when the width and height are not negative.
- `is_intersecting(a, b)` tells whether two rectangles overlap in an
  area. Rectangles that only touch along an edge do not count.
- `intersect(a, b)` returns the overlapping `Rectangle`, or `None` if the
  two do not overlap.

## Example

```python
import random

from episolve.stocks import buy_and_sell_once
from episolve.sequences import plus_one
from episolve.sampling import random_subset

summary = buy_and_sell_once([20.0, 18.0, 25.0, 17.0])
print(summary.profit)          # 7.0

print(plus_one([9, 9, 9]))     # [1, 0, 0, 0]

print(random_subset(10, 4, random.Random(0)))
```

## What it does not do

`episolve` is a library only. It installs no command-line program, and
nothing in it reads from the terminal or prints on its own. Call the
functions from your own code and pass them the input you have.