"""
FASTQ reading and formatting.

FASTQ is a text-based format for storing nucleotide sequences
along with quality scores. Each record consists of:
1. Header line starting with '@' followed by sequence ID
2. Sequence line(s)
3. '+' line (optionally followed by the ID again)
4. Quality line(s) (ASCII-encoded Phred scores), as long as the sequence
"""

from typing import Iterable, Iterator, List, Optional

from biolines.errors import RecordReadError
from biolines.io.records import SequenceRecord

# Phred 40 in Phred+33 encoding, used when a record has no quality string
DEFAULT_QUALITY_CHAR = "I"


def iter_fastq(lines: Iterable[str], path: Optional[str] = None) -> Iterator[SequenceRecord]:
    """
    Parse FASTQ records from an iterable of lines.

    Quality lines are consumed until they cover the whole sequence, so a
    quality line starting with '@' is not mistaken for a header.

    Args:
        lines: Lines of FASTQ text
        path: Source name used in error messages

    Yields:
        SequenceRecord objects with quality set

    Raises:
        RecordReadError: On a bad header, a truncated record, or a quality
            string whose length differs from the sequence
    """
    lines = iter(lines)
    for header in lines:
        header = header.strip()
        if not header:
            continue
        if not header.startswith("@"):
            raise RecordReadError(f"invalid FASTQ header: {header[:40]!r}", path=path)

        sequence_parts: List[str] = []
        for line in lines:
            line = line.strip()
            if line.startswith("+"):
                break
            sequence_parts.append(line)
        else:
            raise RecordReadError(f"truncated record {header[1:]!r}: missing '+' line", path=path)
        sequence = "".join(sequence_parts)

        quality_parts: List[str] = []
        quality_length = 0
        while quality_length < len(sequence):
            line = next(lines, None)
            if line is None:
                break
            line = line.strip()
            quality_parts.append(line)
            quality_length += len(line)
        quality = "".join(quality_parts)

        if len(quality) != len(sequence):
            raise RecordReadError(
                f"record {header[1:]!r}: quality length {len(quality)} "
                f"does not match sequence length {len(sequence)}",
                path=path,
            )

        yield SequenceRecord(header[1:].strip(), sequence, quality)


def format_fastq(id: str, sequence: str, quality: Optional[str] = None) -> str:
    """
    Format one record as FASTQ text.

    A missing quality string is filled with DEFAULT_QUALITY_CHAR.

    Example:
        >>> format_fastq("read1", "ACGT")
        '@read1\\nACGT\\n+\\nIIII\\n'
    """
    if quality is None:
        quality = DEFAULT_QUALITY_CHAR * len(sequence)
    return f"@{id}\n{sequence}\n+\n{quality}\n"
