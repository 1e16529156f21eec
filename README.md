# hornetkit

Small host-side building blocks for graph-processing work. Everything works
on plain Python lists and integers and needs nothing outside the standard
library.

## Modules

- `hornetkit.numeric`: integer helpers `ceil_div`, `round_div`,
  `lower_approx`, `upper_approx`, `power`, `log_floor`, `log2_floor`,
  `roundup_pow2`, `ceil_log2`, `ceil_log`, `product_sequence`,
  `binomial_coeff` and `geometric_serie`. It also has
  `inclusive_prefix_sum`, and `exclusive_prefix_sum`, whose result is one
  item longer than its input and ends with the total. The predicates are
  `is_vectorizable` (equal byte sizes, at most four, summing to at most 16),
  `is_integer` (decimal digits only) and `is_aligned`. Bad arguments raise
  `ValueError` or `ZeroDivisionError`.
- `hornetkit.statistics`: `average`, `std_deviation` (population) and
  `gini_coefficient` (clamped to be at least zero) over a sequence of numbers.
  An empty input raises `ValueError`.
- `hornetkit.properties`: `PropertyClass` is a set of flags from one
  enumeration. `a | b` returns the union, and `a & b` tells whether the two
  share a flag. `+=` adds flags, `-=` removes them, and `is_undefined()` is
  true when no flag is set. `BatchGenProperty` holds `BatchGenEnum` flags.
  `WEIGHTED`, `PRINT` and `UNIQUE` are ready-made properties, and
  `BatchGenType` is `INSERT` or `REMOVE`.
- `hornetkit.bits`: `BitMatrix` packs each row into 32-bit words. Indexing
  gives a `BitRow` whose items are `BitRef` references. The matrix also has
  `reset`, `row_reset`, `nnz`, `copy` and `render`. `Matrix` is a dense
  matrix with mutable rows, `copy` and `render`.
- `hornetkit.collection`: `Collection` has a fixed capacity. `+=` appends an
  element, or every element of another `Collection`, and going over capacity
  raises `OverflowError`. It also has `assign` and `reverse`. `ArrayWrapper`
  iterates, forwards or in reverse, over the first `size` items of a
  sequence.
- `hornetkit.printing`:
  - `format_number` adds thousands separators. It rounds floats to two
    decimals and then cuts the fraction to `precision` digits.
  - `format_array` / `print_array` render arrays.
  - `format_matrix` / `print_matrix` render flat matrices, row- or
    column-major with a leading dimension, as right-aligned columns.
  - `format_bits` and `format_bit_array` list bits least significant first.
- `hornetkit.timer`: `Timer` reads one of three clocks, chosen with
  `TimerType`: wall-clock (`HOST`), process CPU (`CPU`), or user plus system
  time (`SYS`).
  - Results come in `us`, `ms`, `s`, `min` or `h`.
  - It keeps the last, total, average, minimum, maximum and standard
    deviation over repeated runs.
  - `print` and `print_all` report these values.
  - It works as a context manager.
- `hornetkit.hostapi`: array helpers.
  - `zeros` returns a list of 0.
  - `ones` returns a list of -1, the value of a signed integer whose bytes are
    all 0xFF.
  - `copy_array` copies a sequence or its first items.
  - `generate_randoms` draws uniform integers in `[low, high]`. A seed is
    optional; without one the time is used.
  - `excl_prefixsum` returns a list the same length as its input, starting at
    0.
  - `reduce` sums.
  - `equal` checks that one sequence matches the start of another.
- `hornetkit.batch`: `generate_batch(adjacency, batch_size, ...)` returns a
  list of `(source, destination)` pairs for a graph given as out-neighbour
  lists.
  - A `REMOVE` batch picks existing edges.
  - An `INSERT` batch picks random vertex pairs. When `prop` is `WEIGHTED`,
    vertices are drawn in proportion to their out-degree.
  - With `UNIQUE` the pairs are sorted and duplicates dropped.
  - With `PRINT` the sorted batch is written to `file` (standard output by
    default).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from hornetkit.numeric import ceil_div, exclusive_prefix_sum
from hornetkit.statistics import gini_coefficient
from hornetkit.timer import Timer

print(ceil_div(10, 3))                   # 4
print(exclusive_prefix_sum([1, 2, 3]))   # [0, 1, 3, 6]
print(gini_coefficient([1, 1, 1, 1]))    # 0.0

with Timer() as timer:
    sum(range(100_000))
timer.print("sum")
```

## What it does not do

The package is a library only and has no command-line program. It does not:

- read or write graph files;
- hold a graph data structure beyond the adjacency lists you pass in;
- allocate or copy memory on an accelerator device.

All arrays are ordinary Python lists kept in host memory.