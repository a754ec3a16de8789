"""
The simple record tools: head, tail, grep and wc.
"""

from biolines.tools.window import (
    head,
    tail,
    parse_tail_count,
)

from biolines.tools.grep import (
    RecordMatcher,
    grep,
    normalize_match_type,
    MATCH_TYPES,
)

from biolines.tools.wc import (
    CountOptions,
    base_counts,
    count_lines,
    gc_fraction,
)

__all__ = [
    "head",
    "tail",
    "parse_tail_count",
    "RecordMatcher",
    "grep",
    "normalize_match_type",
    "MATCH_TYPES",
    "CountOptions",
    "base_counts",
    "count_lines",
    "gc_fraction",
]
