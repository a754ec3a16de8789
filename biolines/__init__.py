"""
biolines: Unix-style line tools for biological sequence files

This package treats FASTA/FASTQ records the way Unix tools treat lines:
- bljoin: join aligned files by record identifier, with gap padding
- blhead / bltail: first or last records of each file
- blgrep: regex search over identifiers or sequences
- blwc: record, base and GC counts
"""

__version__ = "0.1.0"
__author__ = "biolines Contributors"

from biolines.errors import (
    BiolinesError,
    ErrorKind,
    FileOpenError,
    RecordReadError,
    DuplicateKeyError,
    FileCloseError,
    WriteError,
    AlignmentLengthMismatch,
)

from biolines.io import (
    SequenceRecord,
    RecordStream,
    RecordWriter,
)

from biolines.join import (
    AlignmentAccumulator,
    DuplicatePolicy,
    JoinOptions,
    KeyOptions,
    KeyExtractor,
    SKIP,
    run_join,
)

__all__ = [
    # Errors
    "BiolinesError",
    "ErrorKind",
    "FileOpenError",
    "RecordReadError",
    "DuplicateKeyError",
    "FileCloseError",
    "WriteError",
    "AlignmentLengthMismatch",
    # I/O
    "SequenceRecord",
    "RecordStream",
    "RecordWriter",
    # Join
    "AlignmentAccumulator",
    "DuplicatePolicy",
    "JoinOptions",
    "KeyOptions",
    "KeyExtractor",
    "SKIP",
    "run_join",
]
