"""
Error types shared by the biolines tools.

Every fatal condition is a subclass of BiolinesError and carries an
ErrorKind tag, so callers can tell fatal aborts apart from the single
non-fatal notice (AlignmentLengthMismatch), which is logged and never raised.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Tags for the conditions a tool run can hit."""
    FILE_OPEN = "file_open"
    RECORD_READ = "record_read"
    DUPLICATE_KEY = "duplicate_key"
    ALIGNMENT_LENGTH_MISMATCH = "alignment_length_mismatch"
    FILE_CLOSE = "file_close"
    WRITE = "write"


class BiolinesError(Exception):
    """Base class for fatal errors. Any of these aborts the whole run."""
    kind: Optional[ErrorKind] = None
    fatal = True

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class FileOpenError(BiolinesError):
    kind = ErrorKind.FILE_OPEN


class RecordReadError(BiolinesError):
    kind = ErrorKind.RECORD_READ


class DuplicateKeyError(BiolinesError):
    """A join key occurred twice in one file and duplicates are not tolerated."""
    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: str, path: Optional[str] = None):
        super().__init__(f"{key!r} found more than once", path=path)
        self.key = key


class FileCloseError(BiolinesError):
    kind = ErrorKind.FILE_CLOSE


class WriteError(BiolinesError):
    kind = ErrorKind.WRITE


@dataclass(frozen=True)
class AlignmentLengthMismatch:
    """
    Notice that a record's length differs from the first record of its file.

    Attributes:
        key: Join key of the offending record
        expected: Length of the first record in the file
        observed: Length of the offending record
        path: Input file the record came from
    """
    key: str
    expected: int
    observed: int
    path: str = ""
    kind: ErrorKind = field(default=ErrorKind.ALIGNMENT_LENGTH_MISMATCH, init=False)
    fatal: bool = field(default=False, init=False)

    def __str__(self) -> str:
        where = f"{self.path}: " if self.path else ""
        return (
            f"{where}{self.key} is not the same size as other sequences "
            f"in the same file ({self.observed} != {self.expected})"
        )
