# oslab

Small, readable implementations of classic operating-systems lab exercises,
usable both as a library and as console programs. No third-party
dependencies.

## What is inside

| Module | Topic |
| --- | --- |
| `oslab.paging` | Page replacement: `fcfs`, `lru`, `optimal`, returning a `PagingResult` of `PageStep`s |
| `oslab.cpu` | CPU scheduling: `round_robin`, `srtf` (preemptive shortest job first), returning a `ScheduleResult` |
| `oslab.disk` | Disk scheduling: `sstf`, `clook`, `scan`, returning a `DiskSchedule` |
| `oslab.banker` | Banker's algorithm: `safe_sequence`, raising `UnsafeStateError` |
| `oslab.sync` | Readers–writers (`ReadersWriters`) and producer–consumer (`BoundedBuffer`, `run_producer_consumer`) |
| `oslab.textstats` | Character, word and line counts (`count_text`), also computed in a child process (`analyse_in_child`) |
| `oslab.addressbook` | A plain-text address book (`AddressBook`, `RecordNotFound`) |
| `oslab.processes` | `bubble_sort`, `selection_sort`, running a child program (`run_child`) and a zombie/orphan fork demo (`fork_demo`) |
| `oslab.shm` | Passing a message between processes (`post_message`, `read_message`) |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using it as a library

```python
from oslab.paging import lru, render

pages = [7, 0, 1, 2, 0, 3, 0, 4]
result = lru(pages, 3)
print(result.faults, result.hits)
print(render(result, "LRU Page Replacement"))
```

Empty frames are `None` in each `PageStep.frames` and shown as `-` by
`format_frames`.

```python
from oslab.cpu import Process, round_robin, render

jobs = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 1)]
result = round_robin(jobs, 2)
print(result.gantt, result.average_waiting, result.average_turnaround)
print(render(result, "Round Robin Scheduling"))
```

```python
from oslab.disk import scan

schedule = scan([98, 183, 37, 122, 14, 124, 65, 67], 53, 200)
print(schedule.order, schedule.total_seek)
```

`scan` sweeps up to the last track (`disk_size - 1`) before coming back down;
`clook` jumps back to the lowest request instead.

```python
from oslab.banker import safe_sequence, UnsafeStateError

available = [3, 3, 2]
maximum = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
allocation = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
try:
    print(safe_sequence(available, maximum, allocation))
except UnsafeStateError as error:
    print(error, error.completed)
```

```python
from oslab.addressbook import AddressBook, RecordNotFound

book = AddressBook("add.txt")
book.create()
book.insert("Alice", "x100", "alice@example.com")
for record in book.records():
    print(record)
try:
    book.delete("Bob")
except RecordNotFound:
    print("No record found")
```

Records are stored one per line as `name | phone | email`; `delete` and
`modify` act on every line that starts with the given name.

## Console programs

| Command | Does |
| --- | --- |
| `oslab-paging {fcfs,lru,optimal} -f FRAMES PAGE...` | page replacement trace and fault count |
| `oslab-cpu {rr,srtf} [-q QUANTUM] ARRIVAL:BURST...` | Gantt chart, per-process table and averages (`-q` is required for `rr`) |
| `oslab-disk {sstf,clook,scan} --head HEAD [--disk-size N] REQUEST...` | service order and total seek (`--disk-size` is required for `scan`) |
| `oslab-banker [FILE]` | reads `P R`, the available vector, the max and allocation matrices from the file or standard input and prints a safe sequence |
| `oslab-sync readers-writers [--readers N] [--writers N] [--rounds N]` | readers–writers run; without `--rounds` the threads loop forever |
| `oslab-sync producer-consumer [--count N] [--capacity N]` | producer–consumer run through a bounded buffer |
| `oslab-textstats [-o FILE]` | reads a line from standard input, counts it in a child process that writes the result file (default `result.txt`), and prints what it reports |
| `oslab-addressbook [-f FILE]` | menu-driven address book on standard input (default file `add.txt`) |
| `oslab-parent VALUE...` | sorts the numbers, then runs the child program in a new Python process with them as arguments |
| `oslab-child VALUE...` | prints the numbers it is given and their reverse |
| `oslab-fork VALUE... [--child-delay S] [--parent-delay S]` | zombie and orphan process demonstration |
| `oslab-shm-server [--name NAME]` | reads a line from standard input and stores it in a named segment |
| `oslab-shm-client [--name NAME]` | prints that message and removes the segment |

Run `oslab-shm-server` first, then `oslab-shm-client` from another terminal.

## Limits

- The message segment used by `oslab.shm` is a memory-mapped file of 1024
  bytes in the system's temporary directory, not an operating-system
  shared-memory object; messages longer than 1023 bytes are cut short.
- `fork_demo` and `oslab-fork` need `os.fork` and therefore a POSIX system;
  elsewhere they raise `OSError`.