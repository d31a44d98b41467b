"""Process demonstrations: sorting in parent and child, exec and fork."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
import time
from pathlib import Path
from typing import Iterable, Optional, Sequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by repeated adjacent swaps."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by selecting each minimum."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def child_report(args: Sequence[str]) -> str:
    """Describe the numbers received on the command line and print them reversed."""
    if not args:
        raise ValueError("No data recieved from parent.")
    numbers = [int(arg) for arg in args]
    received = "".join(str(n) for n in numbers)
    reversed_ = "".join(str(n) for n in reversed(numbers))
    return (
        "Child recieved the array as :\n"
        f"{received}"
        "Child sorted array in reverse order is:\n"
        f"{reversed_}\n"
    )


def run_child(values: Iterable[int]) -> str:
    """Start the child program with the values as arguments and return its output."""
    env = dict(os.environ)
    root = str(Path(__file__).resolve().parent.parent)
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = root if not existing else os.pathsep.join([root, existing])
    command = [sys.executable, "-m", "oslab.processes", *(str(v) for v in values)]
    completed = subprocess.run(command, capture_output=True, text=True, env=env, check=True)
    return completed.stdout


def fork_demo(values: Iterable[int], child_delay: float = 10.0, parent_delay: float = 15.0) -> list[int]:
    """Fork a child that sorts and outlives its wait; the parent sorts, sleeps, then reaps it.

    Returns the parent's sorted list.
    """
    if not hasattr(os, "fork"):
        raise OSError("fork is not available on this platform")
    items = list(values)
    sys.stdout.flush()
    pid = os.fork()
    if pid == 0:
        status = 0
        try:
            print(f"\n[Child] Process ID: {os.getpid()} | Parent ID: {os.getppid()}")
            print("[Child] Sorting using Selection Sort...")
            ordered = selection_sort(items)
            print("[Child] Sorted array: " + "".join(f"{v} " for v in ordered))
            print("[Child] Exiting now...")
            sys.stdout.flush()
            time.sleep(child_delay)
            print(f"[Child] After sleep, new Parent ID: {os.getppid()} (init/adopted)")
            sys.stdout.flush()
        except BaseException:
            status = 1
        finally:
            os._exit(status)

    print(f"\n[Parent] Process ID: {os.getpid()} | Child ID: {pid}")
    print("[Parent] Sorting using Bubble Sort...")
    ordered = bubble_sort(items)
    print("[Parent] Sorted array: " + "".join(f"{v} " for v in ordered))
    print("[Parent] Sleeping to create Zombie...")
    sys.stdout.flush()
    time.sleep(parent_delay)
    print("[Parent] Now calling wait() to remove zombie...")
    os.waitpid(pid, 0)
    print("[Parent] Child process reaped. Exiting.")
    return ordered


def child_main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        report = child_report(args)
    except ValueError as error:
        print(error)
        return 1
    print(report, end="")
    return 0


def parent_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-parent", description="Sort numbers, then hand them to the child program."
    )
    parser.add_argument("values", type=int, nargs="+")
    args = parser.parse_args(argv)

    ordered = bubble_sort(args.values)
    print("The parent sorted array :")
    print(" ".join(str(v) for v in ordered))
    print("Child executing by execve!")
    try:
        output = run_child(ordered)
    except subprocess.CalledProcessError as error:
        print(error.stdout, end="")
        print("execve failed", file=sys.stderr)
        return 1
    print(output, end="")
    print("Process complete!")
    return 0


def fork_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-fork", description="Show zombie and orphan processes while sorting."
    )
    parser.add_argument("values", type=int, nargs="+")
    parser.add_argument("--child-delay", type=float, default=10.0)
    parser.add_argument("--parent-delay", type=float, default=15.0)
    args = parser.parse_args(argv)
    fork_demo(args.values, args.child_delay, args.parent_delay)
    return 0


if __name__ == "__main__":
    sys.exit(child_main())