"""
FASTA reading and formatting.

Sequences may be wrapped over any number of lines. Blank lines and ';'
comment lines are ignored.
"""

from typing import Iterable, Iterator, List, Optional

from biolines.errors import RecordReadError
from biolines.io.records import SequenceRecord


def iter_fasta(lines: Iterable[str], path: Optional[str] = None) -> Iterator[SequenceRecord]:
    """
    Parse FASTA records from an iterable of lines.

    Args:
        lines: Lines of FASTA text, with or without trailing newlines
        path: Source name used in error messages

    Yields:
        SequenceRecord objects (quality is always None)

    Raises:
        RecordReadError: If sequence data appears before the first header
    """
    current_header = None
    current_sequence: List[str] = []

    for line in lines:
        line = line.strip()
        if not line or line.startswith(";"):
            continue

        if line.startswith(">"):
            if current_header is not None:
                yield SequenceRecord(current_header, "".join(current_sequence))
            current_header = line[1:].strip()
            current_sequence = []
        elif current_header is None:
            raise RecordReadError(
                f"sequence data before the first header: {line[:20]!r}", path=path
            )
        else:
            current_sequence.append(line)

    if current_header is not None:
        yield SequenceRecord(current_header, "".join(current_sequence))


def format_fasta(id: str, sequence: str, line_width: int = 0) -> str:
    """
    Format one record as FASTA text.

    Args:
        id: Header text (written after '>')
        sequence: Sequence text
        line_width: Characters per sequence line; 0 writes the sequence on
            a single line

    Returns:
        The record, newline-terminated

    Example:
        >>> format_fasta("seq1", "ACGTAC", line_width=4)
        '>seq1\\nACGT\\nAC\\n'
    """
    lines = [f">{id}"]
    if line_width and line_width > 0:
        for i in range(0, len(sequence), line_width):
            lines.append(sequence[i:i + line_width])
        if not sequence:
            lines.append("")
    else:
        lines.append(sequence)
    return "\n".join(lines) + "\n"
