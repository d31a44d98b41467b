"""Disk arm scheduling: shortest seek first, C-LOOK and SCAN."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class DiskSchedule:
    """The order in which requests are served and the total head movement."""

    order: tuple[int, ...]
    total_seek: int


def _travel(start: int, tracks: Iterable[int]) -> int:
    total = 0
    position = start
    for track in tracks:
        total += abs(position - track)
        position = track
    return total


def _split(tracks: list[int], head: int) -> int:
    return next((i for i, track in enumerate(tracks) if track > head), len(tracks))


def sstf(requests: Iterable[int], head: int) -> DiskSchedule:
    """Always serve the pending request closest to the head."""
    pending = list(requests)
    order = []
    position = head
    while pending:
        track = min(pending, key=lambda t: abs(t - position))
        pending.remove(track)
        order.append(track)
        position = track
    return DiskSchedule(tuple(order), _travel(head, order))


def clook(requests: Iterable[int], head: int) -> DiskSchedule:
    """Sweep upwards, then jump back to the lowest request and sweep up again."""
    tracks = sorted(requests)
    split = _split(tracks, head)
    order = tracks[split:] + tracks[:split]
    return DiskSchedule(tuple(order), _travel(head, order))


def scan(requests: Iterable[int], head: int, disk_size: int) -> DiskSchedule:
    """Sweep up to the last track of the disk, then sweep back down."""
    tracks = sorted(requests)
    split = _split(tracks, head)
    upper = tracks[split:]
    lower = tracks[:split][::-1]
    end = disk_size - 1
    total = _travel(head, upper)
    total += abs((upper[-1] if upper else head) - end)
    total += _travel(end, lower)
    return DiskSchedule(tuple(upper + lower), total)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-disk", description="Simulate a disk scheduling algorithm."
    )
    parser.add_argument("algorithm", choices=["sstf", "clook", "scan"])
    parser.add_argument("--head", type=int, required=True, help="initial head position")
    parser.add_argument("--disk-size", type=int, help="number of tracks (SCAN only)")
    parser.add_argument("requests", type=int, nargs="+")
    args = parser.parse_args(argv)

    if args.algorithm == "sstf":
        schedule, label = sstf(args.requests, args.head), "Total seek is"
    elif args.algorithm == "clook":
        schedule, label = clook(args.requests, args.head), "Total Seek Time"
    else:
        if args.disk_size is None:
            parser.error("SCAN needs --disk-size")
        schedule = scan(args.requests, args.head, args.disk_size)
        label = "Total seek is"

    print(f"{args.algorithm.upper()} Disk Scheduling Order:")
    print(" ".join(str(track) for track in schedule.order))
    print(f"{label}: {schedule.total_seek}")
    return 0