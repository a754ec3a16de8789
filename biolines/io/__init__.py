"""
Sequence file I/O.

This module provides the record stream and writer used by every tool:
- FASTA and FASTQ parsing, with gzip and stdin support
- FASTA and FASTQ output
"""

from biolines.io.records import SequenceRecord

from biolines.io.fasta import (
    iter_fasta,
    format_fasta,
)

from biolines.io.fastq import (
    iter_fastq,
    format_fastq,
    DEFAULT_QUALITY_CHAR,
)

from biolines.io.stream import (
    RecordStream,
    read_string,
    open_each,
    STDIN,
)

from biolines.io.writer import (
    RecordWriter,
    FORMATS,
)

__all__ = [
    "SequenceRecord",
    "iter_fasta",
    "format_fasta",
    "iter_fastq",
    "format_fastq",
    "DEFAULT_QUALITY_CHAR",
    "RecordStream",
    "read_string",
    "open_each",
    "STDIN",
    "RecordWriter",
    "FORMATS",
]
