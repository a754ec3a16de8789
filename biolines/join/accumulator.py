"""
Alignment accumulator for joining sequence files.

Each input file is assumed to be an alignment: every record in it has the
width of the file's first record. The accumulator concatenates, per join
key, the records of successive files, and fills gaps with a block of pad
characters wherever a key is missing from a file, so every key's buffer
stays column-aligned with every other key's.

Usage follows the file loop:

    acc = AlignmentAccumulator(JoinOptions())
    for each file:
        acc.begin_file(path)
        for each record:
            acc.ingest(key, sequence)
        acc.end_file()
    sequences = acc.finalize()
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Set

from biolines.errors import AlignmentLengthMismatch, DuplicateKeyError
from biolines.join.options import DuplicatePolicy, JoinOptions

logger = logging.getLogger(__name__)


class SequenceBuffer:
    """Growable sequence built from appended fragments."""

    __slots__ = ("_parts", "_length")

    def __init__(self, initial: str = ""):
        self._parts: List[str] = [initial] if initial else []
        self._length = len(initial)

    def append(self, text: str) -> None:
        if text:
            self._parts.append(text)
            self._length += len(text)

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""


class AlignmentAccumulator:
    """
    Per-key concatenation of aligned sequences across files.

    Args:
        options: Padding, separator and duplicate settings

    Attributes:
        file_lengths: Width of each file that contributed records, in order
        mismatches: Length mismatch notices raised so far
        files_processed: Number of completed begin_file/end_file cycles
    """

    def __init__(self, options: Optional[JoinOptions] = None):
        self.options = options if options is not None else JoinOptions()
        self.file_lengths: List[int] = []
        self.mismatches: List[AlignmentLengthMismatch] = []
        self.files_processed = 0

        self._buffers: Dict[str, SequenceBuffer] = {}
        self._seen: Set[str] = set()
        self._expected: Optional[int] = None
        self._completed = 0  # file_lengths entries from finished files
        self._in_file = False
        self._file_name = ""
        self._duplicate_warned = False

    def __len__(self) -> int:
        return len(self._buffers)

    def __contains__(self, key: str) -> bool:
        return key in self._buffers

    @property
    def expected_length(self) -> Optional[int]:
        """Width of the current file, or None before its first record."""
        return self._expected

    def begin_file(self, name: str = "") -> None:
        if self._in_file:
            raise RuntimeError("begin_file() called while a file is still open")
        self._in_file = True
        self._file_name = name
        self._seen.clear()
        self._expected = None
        self._duplicate_warned = False

    def ingest(self, key: str, sequence: str) -> None:
        """
        Add one record of the current file.

        Raises:
            DuplicateKeyError: If the key was already seen in this file and
                the duplicate policy is ERROR
        """
        if not self._in_file:
            raise RuntimeError("ingest() called outside begin_file()/end_file()")

        length = len(sequence)
        if self._expected is None:
            self._expected = length
            self.file_lengths.append(length)
        elif length != self._expected:
            notice = AlignmentLengthMismatch(key, self._expected, length, self._file_name)
            self.mismatches.append(notice)
            logger.warning("%s", notice)

        if key in self._seen:
            self._duplicate(key, sequence)
            return
        self._seen.add(key)

        buffer = self._buffers.get(key)
        if buffer is None:
            buffer = SequenceBuffer(self._leading_gap())
            self._buffers[key] = buffer
        self._append(buffer, sequence)

    def end_file(self) -> None:
        """Pad every key that did not occur in the current file."""
        if not self._in_file:
            raise RuntimeError("end_file() called without begin_file()")

        if self._expected is None:
            logger.debug("%s: no records joined", self._file_name or "input")
        elif self.options.pad:
            block = self.options.pad_char * self._expected
            padded = 0
            for key, buffer in self._buffers.items():
                if key not in self._seen:
                    self._append(buffer, block)
                    padded += 1
            logger.debug(
                "%s: width %d, %d keys present, %d padded",
                self._file_name or "input", self._expected, len(self._seen), padded,
            )

        self._completed = len(self.file_lengths)
        self._in_file = False
        self.files_processed += 1

    def finalize(self) -> Mapping[str, str]:
        """
        Return the joined sequences as a read-only mapping sorted by key.
        """
        if self._in_file:
            raise RuntimeError("finalize() called while a file is still open")
        return MappingProxyType({key: str(self._buffers[key]) for key in sorted(self._buffers)})

    def lengths(self) -> Dict[str, int]:
        """Current buffer length for every key."""
        return {key: len(buffer) for key, buffer in self._buffers.items()}

    def _append(self, buffer: SequenceBuffer, text: str) -> None:
        if len(buffer):
            buffer.append(self.options.separator)
        buffer.append(text)

    def _leading_gap(self) -> str:
        # Gap blocks for every finished file, laid out the way end_file()
        # would have padded a key absent from all of them.
        if not self.options.pad:
            return ""
        separator = self.options.separator
        pad_char = self.options.pad_char
        parts: List[str] = []
        size = 0
        for width in self.file_lengths[:self._completed]:
            if size:
                parts.append(separator)
                size += len(separator)
            parts.append(pad_char * width)
            size += width
        return "".join(parts)

    def _duplicate(self, key: str, sequence: str) -> None:
        policy = self.options.duplicates
        if policy is DuplicatePolicy.ERROR:
            raise DuplicateKeyError(key, path=self._file_name or None)
        if policy is DuplicatePolicy.DROP:
            logger.debug("%s: dropping duplicate %s", self._file_name or "input", key)
            return
        if not self._duplicate_warned:
            logger.warning(
                "%s: appending duplicate %s; joined sequences will differ in length",
                self._file_name or "input", key,
            )
            self._duplicate_warned = True
        self._append(self._buffers[key], sequence)
