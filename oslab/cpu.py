"""CPU scheduling simulations: round robin and preemptive shortest job first."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from statistics import fmean
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class Process:
    """A job with its arrival time and CPU burst."""

    pid: int
    arrival: int
    burst: int


@dataclass(frozen=True)
class ProcessStats:
    """Waiting and turnaround times of a finished process."""

    pid: int
    arrival: int
    burst: int
    waiting: int
    turnaround: int


@dataclass
class ScheduleResult:
    """Execution order and per-process statistics of a run."""

    gantt: list[int]
    stats: list[ProcessStats]

    @property
    def average_waiting(self) -> float:
        return fmean(s.waiting for s in self.stats)

    @property
    def average_turnaround(self) -> float:
        return fmean(s.turnaround for s in self.stats)


def _prepare(processes: Iterable[Process]) -> list[Process]:
    queue = sorted(processes, key=lambda p: p.arrival)
    if not queue:
        raise ValueError("at least one process is required")
    for process in queue:
        if process.burst <= 0:
            raise ValueError(f"P{process.pid} has a non-positive burst time")
    return queue


def _collect(queue: list[Process], finish: list[int]) -> list[ProcessStats]:
    stats = []
    for process, end in zip(queue, finish):
        turnaround = end - process.arrival
        stats.append(
            ProcessStats(
                process.pid,
                process.arrival,
                process.burst,
                turnaround - process.burst,
                turnaround,
            )
        )
    return stats


def round_robin(processes: Iterable[Process], quantum: int) -> ScheduleResult:
    """Give each arrived process up to one quantum per pass, in arrival order."""
    if quantum <= 0:
        raise ValueError(f"time quantum must be positive, got {quantum}")
    queue = _prepare(processes)
    remaining = [p.burst for p in queue]
    finish = [0] * len(queue)
    gantt: list[int] = []
    time = completed = 0

    while completed < len(queue):
        ran = False
        for index, process in enumerate(queue):
            if process.arrival > time or remaining[index] == 0:
                continue
            ran = True
            gantt.append(process.pid)
            run = min(quantum, remaining[index])
            time += run
            remaining[index] -= run
            if remaining[index] == 0:
                finish[index] = time
                completed += 1
        if not ran:
            time += 1

    return ScheduleResult(gantt, _collect(queue, finish))


def srtf(processes: Iterable[Process]) -> ScheduleResult:
    """Run the arrived process with the least remaining time, one unit at a time."""
    queue = _prepare(processes)
    remaining = [p.burst for p in queue]
    finish = [0] * len(queue)
    gantt: list[int] = []
    time = completed = 0

    while completed < len(queue):
        ready = [
            index
            for index, process in enumerate(queue)
            if process.arrival <= time and remaining[index] > 0
        ]
        time += 1
        if not ready:
            continue
        index = min(ready, key=remaining.__getitem__)
        gantt.append(queue[index].pid)
        remaining[index] -= 1
        if remaining[index] == 0:
            finish[index] = time
            completed += 1

    return ScheduleResult(gantt, _collect(queue, finish))


def render(result: ScheduleResult, title: str) -> str:
    """Format a run as a Gantt chart, a table and the averages."""
    lines = [
        title,
        "Gantt Chart:",
        "".join(f"|P{pid}" for pid in result.gantt) + "|",
        "",
        "Process\tAT\tBT\tWT\tTAT",
    ]
    lines.extend(
        f"P{s.pid}\t{s.arrival}\t{s.burst}\t{s.waiting}\t{s.turnaround}"
        for s in result.stats
    )
    lines.append("")
    lines.append(f"Average WT: {result.average_waiting:.2f}")
    lines.append(f"Average TAT: {result.average_turnaround:.2f}")
    return "\n".join(lines)


def _job(text: str) -> tuple[int, int]:
    try:
        arrival, burst = text.split(":")
        return int(arrival), int(burst)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ARRIVAL:BURST, got {text!r}") from None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-cpu", description="Simulate a CPU scheduling algorithm."
    )
    parser.add_argument("algorithm", choices=["rr", "srtf"])
    parser.add_argument("-q", "--quantum", type=int, help="time quantum for round robin")
    parser.add_argument("jobs", type=_job, nargs="+", metavar="ARRIVAL:BURST")
    args = parser.parse_args(argv)

    processes = [
        Process(pid, arrival, burst) for pid, (arrival, burst) in enumerate(args.jobs, start=1)
    ]
    try:
        if args.algorithm == "rr":
            if args.quantum is None:
                parser.error("round robin needs --quantum")
            result = round_robin(processes, args.quantum)
            title = "Round Robin Scheduling"
        else:
            result = srtf(processes)
            title = "SJF (Preemptive - SRTF) Scheduling"
    except ValueError as error:
        parser.error(str(error))
    print(render(result, title))
    return 0