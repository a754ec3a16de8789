"""
Record streams over FASTA/FASTQ files.

A RecordStream wraps one open input (a path, a gzip file, or stdin) and
hands out records one at a time:

    stream = RecordStream.open("alignment.fasta")
    try:
        while not stream.at_end():
            record = stream.read_record()
    finally:
        stream.close()

The format is detected from the first non-blank, non-comment line ('>' for FASTA,
'@' for FASTQ). An empty input is a valid stream with no records.
"""

import gzip
import io
import itertools
import logging
import sys
import zlib
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, TextIO, Tuple, Union

from biolines.errors import FileCloseError, FileOpenError, RecordReadError
from biolines.io.fasta import iter_fasta
from biolines.io.fastq import iter_fastq
from biolines.io.records import SequenceRecord

logger = logging.getLogger(__name__)

STDIN = "-"

_PENDING = object()
_END = object()


def _open_file(filepath: Union[str, Path], mode: str = "rt") -> TextIO:
    """Open a file, handling gzip compression if needed."""
    filepath = Path(filepath)
    if filepath.suffix == ".gz":
        return gzip.open(filepath, mode)
    return open(filepath, mode)


class RecordStream:
    """
    Sequential reader over one FASTA or FASTQ input.

    Args:
        handle: Open text handle to read from
        path: Name reported in errors and log messages
        owns_handle: Close the handle on close(); False for stdin
    """

    def __init__(self, handle: TextIO, path: str = STDIN, owns_handle: bool = True):
        self.path = path
        self.format: Optional[str] = None
        self._handle = handle
        self._owns_handle = owns_handle
        self._records: Optional[Iterator[SequenceRecord]] = None
        self._next = _PENDING
        self._closed = False

    @classmethod
    def open(cls, path: Union[str, Path] = STDIN) -> "RecordStream":
        """
        Open a path, or stdin when path is '-'.

        Raises:
            FileOpenError: If the file cannot be opened
        """
        path = str(path)
        if path == STDIN:
            return cls(sys.stdin, STDIN, owns_handle=False)
        try:
            handle = _open_file(path, "rt")
        except OSError as exc:
            raise FileOpenError(f"could not open: {exc.strerror or exc}", path=path) from exc
        return cls(handle, path)

    @property
    def closed(self) -> bool:
        return self._closed

    def _detect(self) -> Iterator[SequenceRecord]:
        lines = iter(self._handle)
        for first in lines:
            if first.strip() and not first.lstrip().startswith(";"):
                break
        else:
            return iter(())

        lines = itertools.chain([first], lines)
        marker = first.lstrip()[0]
        if marker == ">":
            self.format = "fasta"
            return iter_fasta(lines, path=self.path)
        if marker == "@":
            self.format = "fastq"
            return iter_fastq(lines, path=self.path)
        raise RecordReadError(
            f"unrecognised sequence format (first line {first.strip()[:40]!r})",
            path=self.path,
        )

    def _fill(self) -> None:
        if self._closed:
            raise ValueError(f"I/O operation on closed stream {self.path}")
        if self._next is not _PENDING:
            return
        try:
            if self._records is None:
                self._records = self._detect()
            self._next = next(self._records, _END)
        except (OSError, EOFError, UnicodeDecodeError, zlib.error) as exc:
            raise RecordReadError(f"read failed: {exc}", path=self.path) from exc

    def at_end(self) -> bool:
        """Return True once every record has been read."""
        self._fill()
        return self._next is _END

    def read_record(self) -> SequenceRecord:
        """
        Return the next record.

        Raises:
            RecordReadError: On malformed input, or when called at the end
        """
        self._fill()
        if self._next is _END:
            raise RecordReadError("no more records", path=self.path)
        record = self._next
        self._next = _PENDING
        return record

    def close(self) -> None:
        """
        Release the input. Stdin is left open for the process.

        Raises:
            FileCloseError: If closing the underlying file fails
        """
        if self._closed:
            return
        self._closed = True
        self._records = None
        if self._owns_handle:
            try:
                self._handle.close()
            except OSError as exc:
                raise FileCloseError(f"problem closing: {exc}", path=self.path) from exc

    def __iter__(self) -> Iterator[SequenceRecord]:
        while not self.at_end():
            yield self.read_record()

    def __enter__(self) -> "RecordStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
            return
        # Already failing: release the handle but keep the original error.
        try:
            self.close()
        except FileCloseError as close_exc:
            logger.debug("while aborting: %s", close_exc)


def read_string(text: str, path: str = "<string>") -> RecordStream:
    """Open a RecordStream over in-memory FASTA/FASTQ text."""
    return RecordStream(io.StringIO(text), path)


def open_each(
    paths: Optional[Iterable[Union[str, Path]]] = None,
    opener: Callable[[str], RecordStream] = RecordStream.open,
) -> Iterator[Tuple[str, RecordStream]]:
    """
    Open inputs one at a time, in order.

    Each stream is closed before the next file is opened, and also when the
    caller stops iterating early or an error escapes the loop body.

    Args:
        paths: Input paths; '-' or nothing reads stdin
        opener: Callable returning a RecordStream for a path

    Yields:
        (path, stream) pairs
    """
    paths = list(paths) if paths is not None else []
    for path in (paths or [STDIN]):
        with opener(str(path)) as stream:
            yield str(path), stream
