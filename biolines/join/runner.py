"""
File loop for bljoin.

Files are read one at a time in the order given. Nothing is written until
every file has been merged, so a fatal error in any file leaves the output
empty.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Mapping, Optional

from biolines.errors import AlignmentLengthMismatch
from biolines.io.stream import STDIN, RecordStream
from biolines.io.writer import RecordWriter
from biolines.join.accumulator import AlignmentAccumulator
from biolines.join.keys import SKIP, KeyExtractor
from biolines.join.options import JoinOptions

logger = logging.getLogger(__name__)


@dataclass
class JoinResult:
    """
    Outcome of a join run.

    Attributes:
        sequences: Joined sequence per key, sorted by key
        file_lengths: Width of each contributing file
        mismatches: Length mismatch notices
        files: Number of files processed
        records: Number of records joined
        skipped: Number of records without a join key
    """
    sequences: Mapping[str, str]
    file_lengths: List[int] = field(default_factory=list)
    mismatches: List[AlignmentLengthMismatch] = field(default_factory=list)
    files: int = 0
    records: int = 0
    skipped: int = 0

    def __len__(self) -> int:
        return len(self.sequences)

    def items(self):
        return self.sequences.items()


def run_join(
    paths: Optional[Iterable[str]] = None,
    options: Optional[JoinOptions] = None,
    opener: Callable[[str], RecordStream] = RecordStream.open,
) -> JoinResult:
    """
    Join records with matching keys across files.

    Args:
        paths: Input files in join order; '-' or nothing reads stdin
        options: Join settings
        opener: Callable returning a RecordStream for a path

    Returns:
        JoinResult with the finalized sequences

    Raises:
        FileOpenError, RecordReadError, DuplicateKeyError, FileCloseError:
            Any of these aborts the whole run
    """
    options = options if options is not None else JoinOptions()
    paths = list(paths) if paths is not None else []
    paths = paths or [STDIN]
    extract = KeyExtractor(options.keys)
    accumulator = AlignmentAccumulator(options)
    records = skipped = 0

    for path in paths:
        # Closed before end_file(); released without masking the error on abort.
        with opener(path) as stream:
            accumulator.begin_file(str(path))
            while not stream.at_end():
                record = stream.read_record()
                key = extract(record.id)
                if key is SKIP:
                    skipped += 1
                    logger.debug("%s: no join field in %r, skipped", path, record.id)
                    continue
                accumulator.ingest(key, record.sequence)
                records += 1
        accumulator.end_file()

    sequences = accumulator.finalize()
    logger.info(
        "joined %d records from %d files into %d sequences",
        records, accumulator.files_processed, len(sequences),
    )
    return JoinResult(
        sequences=sequences,
        file_lengths=list(accumulator.file_lengths),
        mismatches=list(accumulator.mismatches),
        files=accumulator.files_processed,
        records=records,
        skipped=skipped,
    )


def write_join(result: JoinResult, writer: Optional[RecordWriter] = None) -> int:
    """
    Write joined sequences as one FASTA record per key.

    Returns:
        Number of records written
    """
    writer = writer if writer is not None else RecordWriter(fmt="fasta")
    for key, sequence in result.items():
        writer.write_record(key, sequence)
    return len(result)
