# lcsbench

lcsbench computes the length of the longest common subsequence (LCS) of two
strings. It offers several dynamic-programming strategies and times each run.

## Strategies

In `lcsbench.sequential`:

- `lcs_matrix(a, b)` returns the full `(len(a)+1) x (len(b)+1)` table.
  `lcs_full(a, b)` returns its last cell.
- `lcs_two_rows(a, b)` keeps only two rows. When a character of `a` repeats
  the one before it, it copies the row above up to and including the first
  match in `b`.
- `format_matrix(matrix)` renders a table as text. Each value is followed by
  a space, and each row ends with a newline.

In `lcsbench.antidiagonal`:

- `lcs_antidiagonal(a, b, workers=16)` fills the full table one anti-diagonal
  (`i + j == d`) at a time. It splits the cells of each diagonal among
  `workers` threads and keeps them in step with a barrier.
- `lcs_antidiagonal_compact(a, b, workers=8)` runs the same sweep but keeps
  only the current diagonal and the two before it.
- `diagonal_rows(d, len_a, len_b)` returns the range of row indices on
  diagonal `d`.
- `chunk_bounds(count, workers, worker_id)` returns the half-open slice of
  `count` items that belongs to one worker. The first `count % workers`
  workers get one extra item.

Either solver raises `ValueError` if `workers` is less than 1.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Input format

A problem file holds two lengths followed by the two strings. The items are
separated by whitespace:

```
5 4
ABCBD
BDCB
```

The file may also use an extended form with a third length and an alphabet
string: `<len_a> <len_b> <len_c> <A> <B> <C>`. The alphabet is read into
`Problem.alphabet`, but no solver uses it.

Each string is cut to its declared length. Parsing raises `InputError`, a
subclass of `ValueError`, in these cases:

- a length is missing or is not a number,
- a length is not positive,
- a string is missing,
- a string is shorter than its declared length.

`parse_problem(text)` parses a string. `read_problem(path)` reads and parses
a file. Both return a `Problem` with fields `a`, `b` and `alphabet`.

## Command line

### Sequential solver

```
lcsbench-seq input.txt
lcsbench-seq input.txt --algorithm full --print-matrix
```

- `--algorithm` is either `two-rows` (the default) or `full`.
- `--print-matrix` computes the full table and prints it after the result.

### Anti-diagonal solver

```
lcsbench-antidiagonal input.txt
lcsbench-antidiagonal input.txt --compact --workers 4
```

- `--workers` sets the number of threads. The default is 16, or 8 with
  `--compact`.
- `--compact` selects the three-diagonal solver.

### Output and exit status

Both commands print:

- the lengths of the two strings,
- the LCS length,
- the elapsed time in microseconds.

The anti-diagonal command also prints the number of threads.

A command exits with status 1 in these cases:

- no file is given,
- the file cannot be opened,
- the file is invalid,
- the number of threads is less than 1.

## Library use

```python
from lcsbench.sequential import lcs_full, lcs_two_rows, parse_problem
from lcsbench.antidiagonal import lcs_antidiagonal, lcs_antidiagonal_compact

problem = parse_problem("5 4\nABCBD\nBDCB\n")
print(lcs_two_rows(problem.a, problem.b))        # 3
print(lcs_full(problem.a, problem.b))            # 3
print(lcs_antidiagonal(problem.a, problem.b, 4)) # 3
print(lcs_antidiagonal_compact(problem.a, problem.b, 2))
```

## What it does not do

The commands report wall-clock time only. They do not read hardware
performance counters such as cache misses.

The workers are ordinary Python threads. Splitting the work among them shows
how the anti-diagonal scheme divides a diagonal. It is not expected to make a
run faster.

## Running the tests

```
pytest
```