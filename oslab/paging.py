"""Page replacement simulations: first-come-first-served, LRU and optimal."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

Frames = tuple[Optional[int], ...]


@dataclass(frozen=True)
class PageStep:
    """One page reference and the frame contents after it was handled."""

    page: int
    frames: Frames
    hit: bool


@dataclass
class PagingResult:
    """Every step of a simulation run."""

    steps: list[PageStep] = field(default_factory=list)

    @property
    def faults(self) -> int:
        return sum(not step.hit for step in self.steps)

    @property
    def hits(self) -> int:
        return sum(step.hit for step in self.steps)


def _empty_frames(frame_count: int) -> list[Optional[int]]:
    if frame_count < 1:
        raise ValueError(f"frame count must be positive, got {frame_count}")
    return [None] * frame_count


def fcfs(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Replace the page that was loaded first (FIFO)."""
    frames = _empty_frames(frame_count)
    next_slot = 0
    result = PagingResult()
    for page in pages:
        hit = page in frames
        if not hit:
            frames[next_slot] = page
            next_slot = (next_slot + 1) % frame_count
        result.steps.append(PageStep(page, tuple(frames), hit))
    return result


def lru(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Replace the page that was used least recently."""
    frames = _empty_frames(frame_count)
    last_used = [0] * frame_count
    clock = 0
    result = PagingResult()
    for page in pages:
        clock += 1
        hit = page in frames
        if hit:
            slot = frames.index(page)
        else:
            slot = min(range(frame_count), key=last_used.__getitem__)
            frames[slot] = page
        last_used[slot] = clock
        result.steps.append(PageStep(page, tuple(frames), hit))
    return result


def _optimal_victim(frames: list[Optional[int]], pages: Sequence[int], position: int) -> int:
    future = list(pages[position + 1:])
    victim, farthest = 0, position + 1
    for slot, current in enumerate(frames):
        if current is None:
            return slot
        try:
            next_use = future.index(current) + position + 1
        except ValueError:
            return slot
        if next_use > farthest:
            farthest, victim = next_use, slot
    return victim


def optimal(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Replace the page whose next use lies farthest in the future."""
    frames = _empty_frames(frame_count)
    reference = list(pages)
    result = PagingResult()
    for position, page in enumerate(reference):
        hit = page in frames
        if not hit:
            frames[_optimal_victim(frames, reference, position)] = page
        result.steps.append(PageStep(page, tuple(frames), hit))
    return result


def format_frames(frames: Iterable[Optional[int]]) -> str:
    """Show frames side by side, an empty frame as '-'."""
    return "".join("-" if frame is None else str(frame) for frame in frames)


def render(result: PagingResult, title: str) -> str:
    """Format a run as a per-reference trace followed by the fault count."""
    lines = [title]
    lines.extend(f"Page {step.page} -> {format_frames(step.frames)}" for step in result.steps)
    lines.append(f"Total Page Faults: {result.faults}")
    return "\n".join(lines)


ALGORITHMS: dict[str, tuple[Callable[[Iterable[int], int], PagingResult], str]] = {
    "fcfs": (fcfs, "FCFS Page Replacement"),
    "lru": (lru, "LRU Page Replacement Algorithm"),
    "optimal": (optimal, "--- Optimal Page Replacement ---"),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-paging", description="Simulate a page replacement algorithm."
    )
    parser.add_argument("algorithm", choices=sorted(ALGORITHMS))
    parser.add_argument("-f", "--frames", type=int, required=True, help="number of frames")
    parser.add_argument("pages", type=int, nargs="+", help="page reference string")
    args = parser.parse_args(argv)

    simulate, title = ALGORITHMS[args.algorithm]
    try:
        result = simulate(args.pages, args.frames)
    except ValueError as error:
        parser.error(str(error))
    print(render(result, title))
    return 0