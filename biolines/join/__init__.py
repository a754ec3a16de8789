"""
Joining aligned sequence files by record identifier.

This module provides:
- Join key extraction from identifiers
- The alignment accumulator that concatenates and gap-pads sequences
- The file loop that drives both over a list of inputs
"""

from biolines.join.options import (
    DuplicatePolicy,
    JoinOptions,
    KeyOptions,
)

from biolines.join.keys import (
    KeyExtractor,
    SKIP,
    extract_key,
    split_fields,
)

from biolines.join.accumulator import (
    AlignmentAccumulator,
    SequenceBuffer,
)

from biolines.join.runner import (
    JoinResult,
    run_join,
    write_join,
)

__all__ = [
    "DuplicatePolicy",
    "JoinOptions",
    "KeyOptions",
    "KeyExtractor",
    "SKIP",
    "extract_key",
    "split_fields",
    "AlignmentAccumulator",
    "SequenceBuffer",
    "JoinResult",
    "run_join",
    "write_join",
]
