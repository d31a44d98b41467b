import threading

import pytest

from oslab.sync import BoundedBuffer, ReadersWriters, main, run_producer_consumer


def _quiet(lines, **overrides):
    options = dict(read_time=0, write_time=0, read_pause=0, write_pause=0, report=lines.append)
    options.update(overrides)
    return ReadersWriters(**options)


def test_write_increments_and_read_sees_value():
    lines = []
    rw = _quiet(lines)
    first = rw.write(1)
    second = rw.write(2)
    assert second == first + 1
    assert rw.read(3) == second
    assert lines[-1] == f"Reader 3: Reading data = {second}"
    assert lines[0] == f"Writer 1: Writing data = {first}"


def test_run_final_value_counts_every_write():
    lines = []
    rw = _quiet(lines)
    readers, writers, rounds = 3, 2, 4
    assert rw.run(readers, writers, rounds) == writers * rounds
    read_lines = [line for line in lines if line.startswith("Reader")]
    write_lines = [line for line in lines if line.startswith("Writer")]
    assert len(read_lines) == readers * rounds
    assert len(write_lines) == writers * rounds


def test_each_reader_sees_non_decreasing_values():
    lines = []
    rw = _quiet(lines)
    rw.run(4, 2, 5)
    for reader in range(1, 5):
        prefix = f"Reader {reader}: Reading data = "
        values = [int(line[len(prefix):]) for line in lines if line.startswith(prefix)]
        assert values == sorted(values)
        assert all(0 <= v <= rw.data for v in values)


def test_writer_waits_for_active_reader():
    started = threading.Event()
    lines = []

    def report(line):
        lines.append(line)
        if line.startswith("Reader"):
            started.set()

    rw = ReadersWriters(read_time=0.5, write_time=0, read_pause=0, write_pause=0, report=report)
    reader = threading.Thread(target=rw.read, args=(1,))
    reader.start()
    assert started.wait(5)
    writer = threading.Thread(target=rw.write, args=(1,))
    writer.start()
    writer.join(0.1)
    assert writer.is_alive()
    assert rw.data == 0
    reader.join()
    writer.join()
    assert rw.data == 1


def test_run_rejects_negative_counts():
    with pytest.raises(ValueError):
        _quiet([]).run(-1, 1, 1)


def test_buffer_is_fifo():
    buffer = BoundedBuffer(3)
    for item in ("a", "b", "c"):
        buffer.put(item)
    assert len(buffer) == 3
    assert [buffer.get() for _ in range(3)] == ["a", "b", "c"]
    assert len(buffer) == 0


def test_buffer_put_blocks_when_full():
    buffer = BoundedBuffer(1)
    buffer.put("first")
    blocked = threading.Thread(target=buffer.put, args=("second",))
    blocked.start()
    blocked.join(0.1)
    assert blocked.is_alive()
    assert buffer.get() == "first"
    blocked.join(5)
    assert not blocked.is_alive()
    assert buffer.get() == "second"


def test_buffer_rejects_zero_capacity():
    with pytest.raises(ValueError):
        BoundedBuffer(0)


def test_producer_consumer_delivers_all_items_in_order():
    consumed = run_producer_consumer(2, 1)
    assert consumed == [1, 2]


def test_producer_consumer_rejects_negative_count():
    with pytest.raises(ValueError):
        run_producer_consumer(-1, 2)


def test_main_rejects_bad_capacity():
    with pytest.raises(SystemExit):
        main(["producer-consumer", "--count", "1", "--capacity", "0"])