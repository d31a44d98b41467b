"""Banker's algorithm: find a safe order in which every process can finish."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence


class UnsafeStateError(Exception):
    """No safe sequence exists; ``completed`` holds the processes that could finish."""

    def __init__(self, completed: Iterable[int]) -> None:
        super().__init__("The system is not in safe state!")
        self.completed = list(completed)


def safe_sequence(
    available: Sequence[int],
    maximum: Sequence[Sequence[int]],
    allocation: Sequence[Sequence[int]],
) -> list[int]:
    """Return process indices in a safe execution order.

    Processes are scanned in index order, repeatedly, and each one whose
    remaining need fits into the free resources runs and releases its
    allocation. Raises UnsafeStateError when a full pass makes no progress.
    """
    work = list(available)
    max_rows = [list(row) for row in maximum]
    alloc_rows = [list(row) for row in allocation]
    if len(max_rows) != len(alloc_rows):
        raise ValueError(
            f"maximum has {len(max_rows)} rows but allocation has {len(alloc_rows)}"
        )
    for row in (*max_rows, *alloc_rows):
        if len(row) != len(work):
            raise ValueError(
                f"every row needs {len(work)} resource columns, got {len(row)}"
            )

    need = [[m - a for m, a in zip(max_row, alloc_row)] for max_row, alloc_row in zip(max_rows, alloc_rows)]
    finished = [False] * len(need)
    order: list[int] = []

    while len(order) < len(need):
        progressed = False
        for index, (need_row, alloc_row) in enumerate(zip(need, alloc_rows)):
            if finished[index] or any(n > w for n, w in zip(need_row, work)):
                continue
            work = [w + a for w, a in zip(work, alloc_row)]
            finished[index] = True
            order.append(index)
            progressed = True
        if not progressed:
            raise UnsafeStateError(order)
    return order


def _read_matrix(numbers: list[int], rows: int, columns: int) -> list[list[int]]:
    matrix = [numbers[start:start + columns] for start in range(0, rows * columns, columns)]
    del numbers[: rows * columns]
    return matrix


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-banker",
        description=(
            "Read P R, then R available counts, the P x R max matrix and the "
            "P x R allocation matrix, and print a safe sequence."
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="file holding the numbers (standard input by default)",
    )
    args = parser.parse_args(argv)

    try:
        numbers = [int(token) for token in args.input.read().split()]
    except ValueError as error:
        parser.error(f"invalid number: {error}")
    if len(numbers) < 2:
        parser.error("expected the number of processes and resources")
    processes, resources = numbers[:2]
    del numbers[:2]
    if processes < 0 or resources < 0:
        parser.error("counts must not be negative")
    if len(numbers) < resources + 2 * processes * resources:
        parser.error("not enough numbers for the available, max and allocation matrices")

    available = numbers[:resources]
    del numbers[:resources]
    maximum = _read_matrix(numbers, processes, resources)
    allocation = _read_matrix(numbers, processes, resources)

    try:
        order = safe_sequence(available, maximum, allocation)
    except UnsafeStateError as error:
        print(error)
        return 0
    print("The safe seq is :")
    print(" ".join(f"P {index}" for index in order))
    return 0