"""Print the last lines of a file."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable
from os import PathLike
from typing import Sequence

DEFAULT_COUNT = 10
DEFAULT_PATH = "text.txt"


def last_lines(lines: Iterable[str], count: int) -> list[str]:
    """Return the final ``count`` items of ``lines`` in order."""
    if count < 0:
        raise ValueError("count must not be negative")
    return list(deque(lines, maxlen=count))


def last_lines_of_file(path: str | PathLike[str], count: int) -> list[str]:
    """Return the final ``count`` lines of the file at ``path``, without line endings."""
    with open(path, encoding="utf-8") as handle:
        return last_lines((line.rstrip("\r\n") for line in handle), count)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the last lines of a file; returns the exit status."""
    parser = argparse.ArgumentParser(description="Print the last lines of a file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("-n", "--lines", type=int, default=DEFAULT_COUNT)
    args = parser.parse_args(argv)
    try:
        lines = last_lines_of_file(args.path, args.lines)
    except (OSError, ValueError) as error:
        parser.error(str(error))
    for line in lines:
        print(line)
    return 0