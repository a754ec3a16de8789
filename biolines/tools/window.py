"""
head and tail for record streams.
"""

import itertools
from collections import deque
from typing import Iterable, Iterator, Tuple

from biolines.io.records import SequenceRecord


def head(records: Iterable[SequenceRecord], n: int = 10) -> Iterator[SequenceRecord]:
    """
    First n records; with a negative n, all but the last |n| records.

    Example:
        >>> [r.id for r in head(records, 2)]
        ['a', 'b']
    """
    if n >= 0:
        yield from itertools.islice(records, n)
        return

    look_ahead = -n
    window = deque()
    for record in records:
        window.append(record)
        if len(window) > look_ahead:
            yield window.popleft()


def tail(records: Iterable[SequenceRecord], n: int = 10, from_start: bool = False) -> Iterator[SequenceRecord]:
    """
    Last n records, or with from_start every record from the n-th on.

    Args:
        records: Records of one file
        n: Record count, must not be negative
        from_start: Treat n as a 1-based starting record ('+n')
    """
    if n < 0:
        raise ValueError("Can't have a negative number of records")

    if from_start:
        yield from itertools.islice(records, max(n - 1, 0), None)
        return

    if n == 0:
        for _ in records:
            pass
        return
    yield from deque(records, maxlen=n)


def parse_tail_count(text: str) -> Tuple[int, bool]:
    """
    Parse a tail count such as '10' or '+3'.

    Returns:
        (count, from_start)

    Raises:
        ValueError: If the count is not an integer or is negative
    """
    text = text.strip()
    from_start = text.startswith("+")
    count = int(text[1:] if from_start else text)
    if count < 0:
        raise ValueError("Can't have a negative number of lines")
    return count, from_start
