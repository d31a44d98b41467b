"""Classic synchronisation problems: readers-writers and producer-consumer."""

from __future__ import annotations

import argparse
import itertools
import random
import threading
import time
from collections import deque
from typing import Any, Callable, Iterable, Optional, Sequence

Reporter = Callable[[str], Any]

PRODUCE_DELAY = 1.0
CONSUME_DELAY = 2.0


class ReadersWriters:
    """Shared counter guarded with readers-preference locking.

    Any number of readers may read together; a writer needs the resource to
    itself. The first reader to enter locks writers out and the last one to
    leave lets them back in.
    """

    def __init__(
        self,
        *,
        read_time: float = 1.0,
        write_time: float = 2.0,
        read_pause: int = 2,
        write_pause: int = 3,
        rng: Optional[random.Random] = None,
        report: Reporter = print,
    ) -> None:
        self.data = 0
        self.read_time = read_time
        self.write_time = write_time
        self.read_pause = read_pause
        self.write_pause = write_pause
        self._rng = rng or random.Random()
        self._report = report
        self._read_count = 0
        self._count_lock = threading.Lock()
        # A plain Lock may be released by a thread other than the one that took it,
        # which the last reader relies on.
        self._resource = threading.Lock()

    def read(self, reader_id: int) -> int:
        """Read the shared value once and return it."""
        with self._count_lock:
            self._read_count += 1
            if self._read_count == 1:
                self._resource.acquire()
        try:
            value = self.data
            self._report(f"Reader {reader_id}: Reading data = {value}")
            time.sleep(self.read_time)
        finally:
            with self._count_lock:
                self._read_count -= 1
                if self._read_count == 0:
                    self._resource.release()
        return value

    def write(self, writer_id: int) -> int:
        """Increment the shared value once and return the new value."""
        with self._resource:
            self.data += 1
            value = self.data
            self._report(f"Writer {writer_id}: Writing data = {value}")
            time.sleep(self.write_time)
        return value

    def _loop(self, action: Callable[[int], int], ident: int, rounds: Optional[int], pause: int) -> None:
        counter: Iterable[int] = itertools.count() if rounds is None else range(rounds)
        for _ in counter:
            action(ident)
            time.sleep(self._rng.randint(0, pause))

    def run(self, readers: int, writers: int, rounds: Optional[int]) -> int:
        """Run reader and writer threads for ``rounds`` each (forever if None).

        Returns the final shared value.
        """
        if readers < 0 or writers < 0:
            raise ValueError("thread counts must not be negative")
        if rounds is not None and rounds < 0:
            raise ValueError("rounds must not be negative")
        threads = [
            threading.Thread(target=self._loop, args=(self.read, ident, rounds, self.read_pause))
            for ident in range(1, readers + 1)
        ]
        threads += [
            threading.Thread(target=self._loop, args=(self.write, ident, rounds, self.write_pause))
            for ident in range(1, writers + 1)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return self.data


class BoundedBuffer:
    """Fixed-capacity FIFO guarded by counting semaphores and a lock."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._empty = threading.Semaphore(capacity)
        self._full = threading.Semaphore(0)
        self._lock = threading.Lock()

    def put(self, item: Any) -> None:
        """Add an item, blocking while the buffer is full."""
        self._empty.acquire()
        with self._lock:
            self._items.append(item)
        self._full.release()

    def get(self) -> Any:
        """Remove the oldest item, blocking while the buffer is empty."""
        self._full.acquire()
        with self._lock:
            item = self._items.popleft()
        self._empty.release()
        return item

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


def run_producer_consumer(count: int = 10, capacity: int = 5) -> list[int]:
    """Produce the items 1..count through a bounded buffer; return what was consumed.

    The producer pauses ``PRODUCE_DELAY`` seconds after each item and the
    consumer ``CONSUME_DELAY`` seconds.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    buffer = BoundedBuffer(capacity)
    consumed: list[int] = []

    def producer() -> None:
        for item in range(1, count + 1):
            buffer.put(item)
            print(f"Producer produced: {item}")
            time.sleep(PRODUCE_DELAY)

    def consumer() -> None:
        for _ in range(count):
            item = buffer.get()
            consumed.append(item)
            print(f"Consumer consumed: {item}")
            time.sleep(CONSUME_DELAY)

    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return consumed


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-sync", description="Run a classic synchronisation demonstration."
    )
    sub = parser.add_subparsers(dest="problem", required=True)

    rw = sub.add_parser("readers-writers", help="five readers and two writers")
    rw.add_argument("--readers", type=int, default=5)
    rw.add_argument("--writers", type=int, default=2)
    rw.add_argument("--rounds", type=int, default=None, help="iterations per thread (forever by default)")

    pc = sub.add_parser("producer-consumer", help="one producer and one consumer")
    pc.add_argument("--count", type=int, default=10)
    pc.add_argument("--capacity", type=int, default=5)

    args = parser.parse_args(argv)
    try:
        if args.problem == "readers-writers":
            ReadersWriters().run(args.readers, args.writers, args.rounds)
        else:
            run_producer_consumer(args.count, args.capacity)
    except ValueError as error:
        parser.error(str(error))
    return 0