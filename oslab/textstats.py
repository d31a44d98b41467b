"""Character, word and line counts, computed in a separate process."""

from __future__ import annotations

import argparse
import multiprocessing
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

_SEPARATORS = frozenset(" \t\n")


@dataclass(frozen=True)
class TextCounts:
    """Counts of characters, words and lines in a text."""

    characters: int
    words: int
    lines: int


def count_text(text: str) -> TextCounts:
    """Count characters, words (split on space, tab and newline) and newlines."""
    words = 0
    in_word = False
    for char in text:
        if char in _SEPARATORS:
            in_word = False
        elif not in_word:
            in_word = True
            words += 1
    return TextCounts(len(text), words, text.count("\n"))


def format_counts(counts: TextCounts) -> str:
    """Render counts in the layout written to the result file."""
    return (
        f"character:{counts.characters}\n"
        f" words:{counts.words}\n"
        f" lines :{counts.lines}\n"
    )


def _child(conn, result_path: str) -> None:
    text = conn.recv()
    path = Path(result_path)
    path.write_text(format_counts(count_text(text)))
    conn.send(path.read_text())
    conn.close()


def analyse_in_child(text: str, result_path: Union[str, Path]) -> str:
    """Send text to a child process that counts it, stores the result file and sends it back."""
    context = multiprocessing.get_context()
    parent_end, child_end = context.Pipe()
    worker = context.Process(target=_child, args=(child_end, str(result_path)))
    worker.start()
    child_end.close()
    try:
        parent_end.send(text)
        result = parent_end.recv()
    except EOFError:
        raise RuntimeError("the counting process ended without a result") from None
    finally:
        parent_end.close()
        worker.join()
    if worker.exitcode != 0:
        raise RuntimeError(f"the counting process failed with exit code {worker.exitcode}")
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-textstats",
        description="Count a sentence in a child process and print what it reports.",
    )
    parser.add_argument("-o", "--output", default="result.txt", help="result file")
    args = parser.parse_args(argv)

    print("Enter the sentence")
    sentence = sys.stdin.readline()
    result = analyse_in_child(sentence, args.output)
    print(f"result from process2:\n {result} ")
    return 0