import sys
from typing import Iterable, Iterator, Tuple

VERBOSE = False


# Iterators


def numbered_lines(input_: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Yield (line number, line) for the non-blank lines of `input_`, numbered from 1 and
    stripped of trailing whitespace"""
    for line_no, line in enumerate(map(str.rstrip, input_), 1):
        if line:
            yield line_no, line


# I/O


def set_verbose(value: bool):
    global VERBOSE
    VERBOSE = value


def print_(*args, **kwargs):
    if VERBOSE:
        print(*args, **kwargs, file=sys.stderr)
