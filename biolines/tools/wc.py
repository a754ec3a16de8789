"""
Record, base and GC counting for sequence files.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Tuple

import numpy as np

from biolines.io.stream import RecordStream, open_each

GAP = ord("-")
_GC_CODES = np.frombuffer(b"GCgc", dtype=np.uint8)


@dataclass
class CountOptions:
    """
    What blwc reports.

    Attributes:
        per_record: One line per record instead of per file
        gc: Report GC proportion
        include_gaps: Count '-' as a base
        total_bases: Total bases per file
        grand_total: Total bases across all files
    """
    per_record: bool = False
    gc: bool = False
    include_gaps: bool = False
    total_bases: bool = False
    grand_total: bool = False

    def __post_init__(self):
        if (self.total_bases or self.grand_total) and (self.per_record or self.gc):
            raise ValueError("Cannot count total bases and get length per record or GC")


def base_counts(sequence: str, include_gaps: bool = False) -> Tuple[int, int]:
    """
    Count bases and G/C bases in a sequence.

    Args:
        sequence: Sequence text
        include_gaps: Count '-' characters as bases

    Returns:
        (bases, gc_bases)

    Example:
        >>> base_counts("AC-GT")
        (4, 2)
    """
    codes = np.frombuffer(sequence.encode("latin-1", "replace"), dtype=np.uint8)
    if not include_gaps:
        codes = codes[codes != GAP]
    return int(codes.size), int(np.isin(codes, _GC_CODES).sum())


def gc_fraction(gc: int, bases: int) -> float:
    if bases == 0:
        return 0.0
    return gc / bases


def _fmt(value: float) -> str:
    return f"{value:g}"


def count_lines(
    paths: Optional[Iterable[str]] = None,
    options: Optional[CountOptions] = None,
    opener: Callable[[str], RecordStream] = RecordStream.open,
) -> Iterator[str]:
    """
    Produce blwc's tab-separated report lines.

    Lines are yielded as each file is read. Formats:
        FILE<TAB>RECORDS              default
        FILE<TAB>ID<TAB>LENGTH        per_record
        FILE<TAB>ID<TAB>GC            per_record with gc
        FILE<TAB>GC                   gc
        FILE<TAB>BASES                total_bases
        GRAND_TOTAL_BASES<TAB>BASES   grand_total, after all files
    """
    options = options if options is not None else CountOptions()
    need_bases = options.gc or options.per_record or options.total_bases or options.grand_total
    grand_total = 0

    for path, stream in open_each(paths, opener):
        n_records = file_bases = file_gc = 0
        for record in stream:
            n_records += 1
            if not need_bases:
                continue
            bases, gc = base_counts(record.sequence, options.include_gaps)
            file_bases += bases
            file_gc += gc
            grand_total += bases
            if options.per_record:
                value = _fmt(gc_fraction(gc, bases)) if options.gc else str(bases)
                yield f"{path}\t{record.id}\t{value}"

        if options.per_record:
            continue
        if options.total_bases:
            yield f"{path}\t{file_bases}"
        elif options.gc:
            yield f"{path}\t{_fmt(gc_fraction(file_gc, file_bases))}"
        else:
            yield f"{path}\t{n_records}"

    if options.grand_total:
        yield f"GRAND_TOTAL_BASES\t{grand_total}"
