"""
Record output for the command-line tools.
"""

import sys
from typing import Optional, TextIO

from biolines.errors import WriteError
from biolines.io.fasta import format_fasta
from biolines.io.fastq import format_fastq
from biolines.io.records import SequenceRecord

FORMATS = ("fasta", "fastq")


class RecordWriter:
    """
    Writes records as FASTA or FASTQ to a text handle.

    Args:
        handle: Destination; defaults to sys.stdout at construction time
        fmt: "fasta" or "fastq"
        line_width: FASTA line wrapping width, 0 for none

    Example:
        >>> writer = RecordWriter(fmt="fasta")
        >>> writer.write_record("seq1", "ACGT")
        >seq1
        ACGT
    """

    def __init__(self, handle: Optional[TextIO] = None, fmt: str = "fasta", line_width: int = 0):
        if fmt not in FORMATS:
            raise ValueError(f"Unrecognized output format: {fmt!r}")
        self.fmt = fmt
        self.line_width = line_width
        self.records_written = 0
        self._handle = handle if handle is not None else sys.stdout

    def write_record(self, id: str, sequence: str, quality: Optional[str] = None) -> None:
        """
        Write one record.

        Raises:
            WriteError: If the destination rejects the write
        """
        if self.fmt == "fastq":
            text = format_fastq(id, sequence, quality)
        else:
            text = format_fasta(id, sequence, self.line_width)
        try:
            self._handle.write(text)
        except OSError as exc:
            raise WriteError(f"error writing output: {exc}") from exc
        self.records_written += 1

    def write(self, record: SequenceRecord) -> None:
        self.write_record(record.id, record.sequence, record.quality)

    def flush(self) -> None:
        try:
            self._handle.flush()
        except OSError as exc:
            raise WriteError(f"error flushing output: {exc}") from exc
