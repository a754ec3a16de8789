from dataclasses import dataclass
from typing import Optional


@dataclass
class SequenceRecord:
    """
    Represents a single FASTA or FASTQ record.

    Attributes:
        id: Full header line (everything after '>' or '@')
        sequence: The nucleotide/protein sequence
        quality: Quality string (ASCII-encoded), None for FASTA input
    """
    id: str
    sequence: str
    quality: Optional[str] = None

    def __len__(self) -> int:
        return len(self.sequence)
