"""
Regex search over record identifiers or sequences.

Sequence searches can look at several strands of each record:
    f  forward
    r  reverse
    c  complement
    R  reverse complement
    a  all of the above
"""

import re
from typing import Iterable, Iterator, Pattern

from biolines.io.records import SequenceRecord
from biolines.utils.sequences import complement, reverse, reverse_complement

MATCH_TYPES = "frcR"

_STRANDS = {
    "f": lambda s: s,
    "r": reverse,
    "c": complement,
    "R": reverse_complement,
}


def normalize_match_type(match_type: str) -> str:
    """
    Expand 'a' to every strand and check the letters.

    Raises:
        ValueError: On a letter outside 'frcRa'
    """
    if "a" in match_type:
        return MATCH_TYPES
    unknown = set(match_type) - set(MATCH_TYPES)
    if unknown or not match_type:
        raise ValueError(f"Invalid match type {match_type!r}; use a combination of f, r, c, R or a")
    return match_type


def search(pattern: Pattern, text: str) -> bool:
    """True if pattern matches a non-empty stretch of text."""
    for match in pattern.finditer(text):
        if match.end() > match.start():
            return True
    return False


class RecordMatcher:
    """
    Decides whether a record matches a pattern.

    Args:
        pattern: Regular expression
        sequence_regex: Search sequences instead of identifiers
        ignore_case: Case-insensitive matching
        match_type: Strands to search for sequence matches

    Example:
        >>> matcher = RecordMatcher("GGA", sequence_regex=True, match_type="R")
        >>> matcher(SequenceRecord("x", "ATCCT"))
        True
    """

    def __init__(
        self,
        pattern: str,
        sequence_regex: bool = False,
        ignore_case: bool = False,
        match_type: str = "f",
    ):
        flags = re.IGNORECASE if ignore_case else 0
        self.pattern = re.compile(pattern, flags)
        self.sequence_regex = sequence_regex
        self.match_type = normalize_match_type(match_type) if sequence_regex else "f"

    def __call__(self, record: SequenceRecord) -> bool:
        if not self.sequence_regex:
            return search(self.pattern, record.id)
        return any(
            search(self.pattern, _STRANDS[strand](record.sequence))
            for strand in self.match_type
        )


def grep(
    records: Iterable[SequenceRecord],
    matcher: RecordMatcher,
    invert: bool = False,
) -> Iterator[SequenceRecord]:
    """Yield records that match (or, with invert, do not match)."""
    for record in records:
        if matcher(record) != invert:
            yield record
