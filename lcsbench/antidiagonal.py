"""Longest-common-subsequence solvers that sweep anti-diagonals with worker threads.

Cells on one anti-diagonal ``i + j == d`` depend only on the two previous
anti-diagonals, so each diagonal is split among the workers. A barrier keeps
them in step between diagonals.
"""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Callable, Sequence

from lcsbench.sequential import InputError, read_problem

DEFAULT_WORKERS = 16
DEFAULT_COMPACT_WORKERS = 8


def diagonal_rows(d: int, len_a: int, len_b: int) -> range:
    """Row indices ``i`` of the cells with ``i + j == d``, ``1 <= i <= len_a``, ``1 <= j <= len_b``."""
    i_min = max(1, d - len_b)
    i_max = min(len_a, d - 1)
    return range(i_min, max(i_max + 1, i_min))


def chunk_bounds(count: int, workers: int, worker_id: int) -> tuple[int, int]:
    """Half-open slice ``(start, end)`` of ``count`` items given to ``worker_id``.

    The first ``count % workers`` workers get one extra item.
    """
    if workers < 1:
        raise ValueError("workers must be at least 1")
    if not 0 <= worker_id < workers:
        raise ValueError(f"worker_id must be in range 0..{workers - 1}")
    if count < 0:
        raise ValueError("count must not be negative")
    chunk, rem = divmod(count, workers)
    if worker_id < rem:
        start = worker_id * (chunk + 1)
        return start, start + chunk + 1
    start = worker_id * chunk + rem
    return start, start + chunk


def _check_workers(workers: int) -> None:
    if workers < 1:
        raise ValueError("workers must be at least 1")


def _run_workers(
    workers: int,
    body: Callable[[int, threading.Barrier], None],
    action: Callable[[], None] | None = None,
) -> None:
    """Run ``body(worker_id, barrier)`` on ``workers`` threads and re-raise the first failure."""
    barrier = threading.Barrier(workers, action=action)
    errors: list[BaseException] = []
    lock = threading.Lock()

    def target(worker_id: int) -> None:
        try:
            body(worker_id, barrier)
        except threading.BrokenBarrierError:
            pass
        except BaseException as exc:  # propagated to the caller below
            with lock:
                errors.append(exc)
            barrier.abort()

    threads = [
        threading.Thread(target=target, args=(worker_id,), daemon=True)
        for worker_id in range(workers)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]


def lcs_antidiagonal(a: str, b: str, workers: int = DEFAULT_WORKERS) -> int:
    """LCS length filling the full table one anti-diagonal at a time."""
    _check_workers(workers)
    len_a, len_b = len(a), len(b)
    table = [[0] * (len_b + 1) for _ in range(len_a + 1)]

    def body(worker_id: int, barrier: threading.Barrier) -> None:
        for d in range(2, len_a + len_b + 1):
            rows = diagonal_rows(d, len_a, len_b)
            start, end = chunk_bounds(len(rows), workers, worker_id)
            for i in rows[start:end]:
                j = d - i
                if a[i - 1] == b[j - 1]:
                    table[i][j] = table[i - 1][j - 1] + 1
                else:
                    table[i][j] = max(table[i - 1][j], table[i][j - 1])
            barrier.wait()

    _run_workers(workers, body)
    return table[len_a][len_b]


def lcs_antidiagonal_compact(
    a: str, b: str, workers: int = DEFAULT_COMPACT_WORKERS
) -> int:
    """LCS length keeping only the current and two previous anti-diagonals."""
    _check_workers(workers)
    len_a, len_b = len(a), len(b)
    if len_a == 0 or len_b == 0:
        return 0
    size = min(len_a, len_b) + 1
    # buffers[0] is the current diagonal, [1] the previous, [2] the one before.
    buffers = [[0] * size for _ in range(3)]

    def rotate() -> None:
        cur, prev1, prev2 = buffers
        buffers[:] = [prev2, cur, prev1]

    def body(worker_id: int, barrier: threading.Barrier) -> None:
        for d in range(2, len_a + len_b + 1):
            rows = diagonal_rows(d, len_a, len_b)
            prev_rows = diagonal_rows(d - 1, len_a, len_b) if d >= 3 else range(0)
            prev2_rows = diagonal_rows(d - 2, len_a, len_b) if d >= 4 else range(0)
            cur, prev1, prev2 = buffers
            start, end = chunk_bounds(len(rows), workers, worker_id)
            for k in range(start, end):
                i = rows[k]
                j = d - i
                if a[i - 1] == b[j - 1]:
                    pos = (i - 1) - prev2_rows.start
                    in_range = d >= 4 and 0 <= pos < len(prev2_rows)
                    cur[k] = prev2[pos] + 1 if in_range else 1
                else:
                    top = left = 0
                    if d >= 3:
                        pos_top = (i - 1) - prev_rows.start
                        if 0 <= pos_top < len(prev_rows):
                            top = prev1[pos_top]
                        pos_left = i - prev_rows.start
                        if 0 <= pos_left < len(prev_rows):
                            left = prev1[pos_left]
                    cur[k] = max(top, left)
            barrier.wait()

    _run_workers(workers, body, action=rotate)
    final_rows = diagonal_rows(len_a + len_b, len_a, len_b)
    return buffers[1][len_a - final_rows.start]


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the problem in the given file with worker threads and report the result."""
    parser = argparse.ArgumentParser(
        prog="lcsbench-antidiagonal",
        description="LCS length by parallel anti-diagonal sweep.",
    )
    parser.add_argument("input", nargs="?", help="problem file")
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help=f"number of threads (default: {DEFAULT_WORKERS}, "
        f"or {DEFAULT_COMPACT_WORKERS} with --compact)",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="keep only three diagonals instead of the full table",
    )
    args = parser.parse_args(argv)

    if args.input is None:
        print(
            "\nError: No input file specified. Please specify the input file, "
            "and run again."
        )
        return 1

    workers = args.workers
    if workers is None:
        workers = DEFAULT_COMPACT_WORKERS if args.compact else DEFAULT_WORKERS
    if workers < 1:
        print("Error: The number of threads must be at least 1.")
        return 1

    try:
        problem = read_problem(args.input)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    except InputError as exc:
        print(f"Error: {exc}")
        return 1

    print(f"String A length: {len(problem.a)}\nString B length: {len(problem.b)}")

    solver = lcs_antidiagonal_compact if args.compact else lcs_antidiagonal
    start = time.perf_counter_ns()
    length = solver(problem.a, problem.b, workers)
    elapsed_us = (time.perf_counter_ns() - start) // 1000

    print(f"Length of LCS is: {length}")
    print(f"Number of threads: {workers}")
    print(f"Total Execution Time: {elapsed_us} μs")
    return 0


if __name__ == "__main__":
    sys.exit(main())