"""
Core sequence manipulation utilities.

Strand transformations used when searching sequences on both strands.
"""

# DNA complement mapping
DNA_COMPLEMENT = {
    "A": "T", "T": "A", "G": "C", "C": "G",
    "a": "t", "t": "a", "g": "c", "c": "g",
    "N": "N", "n": "n",
    # IUPAC ambiguity codes
    "R": "Y", "Y": "R", "S": "S", "W": "W",
    "K": "M", "M": "K", "B": "V", "V": "B",
    "D": "H", "H": "D",
    "r": "y", "y": "r", "s": "s", "w": "w",
    "k": "m", "m": "k", "b": "v", "v": "b",
    "d": "h", "h": "d",
}

_DNA_TABLE = str.maketrans(DNA_COMPLEMENT)


def complement(sequence: str) -> str:
    """
    Complement a DNA sequence without reversing it.

    Characters with no complement (gaps, unknown symbols) are kept as is.

    Example:
        >>> complement("AAC-G")
        'TTG-C'
    """
    return sequence.translate(_DNA_TABLE)


def reverse(sequence: str) -> str:
    return sequence[::-1]


def reverse_complement(sequence: str) -> str:
    """
    Get the reverse complement of a DNA sequence.

    Args:
        sequence: DNA sequence string

    Returns:
        Reverse complement sequence

    Example:
        >>> reverse_complement("ACGT")
        'ACGT'
        >>> reverse_complement("AACG")
        'CGTT'
    """
    return complement(sequence)[::-1]
