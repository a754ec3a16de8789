"""
Sequence manipulation utilities for genomic data.
"""

from biolines.utils.sequences import (
    complement,
    reverse,
    reverse_complement,
    DNA_COMPLEMENT,
)

__all__ = [
    "complement",
    "reverse",
    "reverse_complement",
    "DNA_COMPLEMENT",
]
