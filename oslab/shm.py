"""Pass a message between processes through a named shared-memory segment."""

from __future__ import annotations

import argparse
import mmap
import os
import sys
import tempfile
from pathlib import Path
from typing import Optional, Sequence

SHM_SIZE = 1024


def _segment_path(name: str) -> Path:
    if not name or "/" in name or "\\" in name or name in (".", ".."):
        raise ValueError(f"invalid segment name: {name!r}")
    return Path(tempfile.gettempdir()) / f"oslab-shm-{name}"


def post_message(name: str, message: str) -> int:
    """Store a message in the segment, creating it if needed.

    At most SHM_SIZE - 1 bytes are kept, followed by a terminating NUL.
    Returns the number of message bytes stored.
    """
    payload = message.encode()[: SHM_SIZE - 1]
    fd = os.open(_segment_path(name), os.O_RDWR | os.O_CREAT, 0o666)
    try:
        if os.fstat(fd).st_size < SHM_SIZE:
            os.ftruncate(fd, SHM_SIZE)
        with mmap.mmap(fd, SHM_SIZE) as segment:
            segment[: len(payload) + 1] = payload + b"\0"
            segment.flush()
    finally:
        os.close(fd)
    return len(payload)


def read_message(name: str) -> str:
    """Read the segment's message and remove the segment; an absent one reads as empty."""
    path = _segment_path(name)
    try:
        fd = os.open(path, os.O_RDONLY)
    except FileNotFoundError:
        return ""
    try:
        size = os.fstat(fd).st_size
        if size == 0:
            data = b""
        else:
            with mmap.mmap(fd, size, access=mmap.ACCESS_READ) as segment:
                data = segment[:]
    finally:
        os.close(fd)
    path.unlink(missing_ok=True)
    return data.split(b"\0", 1)[0].decode(errors="ignore")


def _parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--name", default="shmfile", help="segment name")
    return parser


def server_main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser("oslab-shm-server", "Write a message into shared memory.").parse_args(argv)
    print("Enter a message:")
    message = sys.stdin.readline()
    try:
        post_message(args.name, message)
    except (OSError, ValueError) as error:
        print(f"shm: {error}", file=sys.stderr)
        return 1
    return 0


def client_main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser("oslab-shm-client", "Read and remove a message from shared memory.").parse_args(argv)
    try:
        message = read_message(args.name)
    except (OSError, ValueError) as error:
        print(f"shm: {error}", file=sys.stderr)
        return 1
    print(f"Message from server:{message}", end="")
    return 0