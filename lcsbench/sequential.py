"""Sequential longest-common-subsequence solvers and their command-line driver."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence


class InputError(ValueError):
    """Raised when a problem description cannot be used."""


@dataclass(frozen=True)
class Problem:
    """Two sequences to compare, plus the optional alphabet of the extended format."""

    a: str
    b: str
    alphabet: str | None = None


def _parse_length(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InputError(f"Unable to read {what}.") from None


def _take(token: str, length: int, name: str) -> str:
    if len(token) < length:
        raise InputError(
            f"String {name} is shorter than its declared length {length}."
        )
    return token[:length]


def parse_problem(text: str) -> Problem:
    """Parse ``<len_a> <len_b> <A> <B>`` or ``<len_a> <len_b> <len_c> <A> <B> <C>``."""
    tokens = text.split()
    if len(tokens) < 2:
        raise InputError("Unable to read string lengths.")
    len_a = _parse_length(tokens[0], "string lengths")
    len_b = _parse_length(tokens[1], "string lengths")
    if len_a <= 0 or len_b <= 0:
        raise InputError("Invalid string lengths. Please check the input file.")

    extended = len(tokens) >= 6 and tokens[2].lstrip("+-").isdigit()
    if extended:
        len_c = int(tokens[2])
        a_tok, b_tok, c_tok = tokens[3:6]
        return Problem(
            _take(a_tok, len_a, "A"),
            _take(b_tok, len_b, "B"),
            c_tok[: max(len_c, 0)],
        )

    rest = tokens[2:]
    if len(rest) < 2:
        raise InputError("One of the strings is empty. Please check the input file.")
    return Problem(_take(rest[0], len_a, "A"), _take(rest[1], len_b, "B"))


def read_problem(path: str | Path) -> Problem:
    """Read and parse a problem file."""
    return parse_problem(Path(path).read_text())


def lcs_matrix(a: str, b: str) -> list[list[int]]:
    """Return the full ``(len(a)+1) x (len(b)+1)`` LCS table."""
    rows = [[0] * (len(b) + 1)]
    for ch in a:
        above = rows[-1]
        row = [0]
        for j, other in enumerate(b, 1):
            if ch == other:
                row.append(above[j - 1] + 1)
            else:
                row.append(max(above[j], row[j - 1]))
        rows.append(row)
    return rows


def lcs_full(a: str, b: str) -> int:
    """LCS length computed from the full table."""
    return lcs_matrix(a, b)[-1][-1]


def lcs_two_rows(a: str, b: str) -> int:
    """LCS length using two rows, copying the row above for repeated characters.

    When a character of ``a`` repeats its predecessor, the new row equals the
    previous one up to and including the first match in ``b``.
    """
    prev = [0] * (len(b) + 1)
    previous_char: str | None = None
    for ch in a:
        copying = ch == previous_char
        curr = [0]
        for j, other in enumerate(b, 1):
            if ch != other:
                curr.append(prev[j] if copying else max(prev[j], curr[j - 1]))
            else:
                curr.append(prev[j] if copying else prev[j - 1] + 1)
                copying = False
        prev = curr
        previous_char = ch
    return prev[-1]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a table with each value followed by a space, one row per line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the problem in the given file and report the LCS length and timing."""
    parser = argparse.ArgumentParser(
        prog="lcsbench-seq", description="Sequential LCS length."
    )
    parser.add_argument("input", nargs="?", help="problem file")
    parser.add_argument(
        "--algorithm",
        choices=("full", "two-rows"),
        default="two-rows",
        help="full table or two-row solver (default: two-rows)",
    )
    parser.add_argument(
        "--print-matrix", action="store_true", help="print the full table"
    )
    args = parser.parse_args(argv)

    if args.input is None:
        print(
            "\nError: No input file specified. Please specify the input file, "
            "and run again."
        )
        return 1

    try:
        problem = read_problem(args.input)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    except InputError as exc:
        print(f"Error: {exc}")
        return 1

    if args.algorithm == "full":
        print(f"\nYour input file: {args.input} ")
    print(f"String A length: {len(problem.a)}\nString B length: {len(problem.b)}")

    start = time.perf_counter_ns()
    if args.algorithm == "full" or args.print_matrix:
        matrix = lcs_matrix(problem.a, problem.b)
        length = matrix[-1][-1]
    else:
        matrix = None
        length = lcs_two_rows(problem.a, problem.b)
    elapsed_us = (time.perf_counter_ns() - start) // 1000

    print(f"Length of LCS is: {length}")
    print(f"Time taken by sequential algorithm is: {elapsed_us} μs")
    if matrix is not None and args.print_matrix:
        print(format_matrix(matrix), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())