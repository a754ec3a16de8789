"""
Command-line entry points: bljoin, blhead, bltail, blgrep and blwc.

Each main function takes an optional argv list and returns the exit code:
0 on success, 1 on a fatal error (or, for blgrep, when nothing matched),
2 on a usage error.
"""

import argparse
import logging
import sys
from typing import List, Optional

from biolines import __version__
from biolines.errors import BiolinesError
from biolines.io.stream import open_each
from biolines.io.writer import FORMATS, RecordWriter
from biolines.join import DuplicatePolicy, JoinOptions, KeyOptions, run_join, write_join
from biolines.logger import setup_logger
from biolines.tools import (
    CountOptions,
    RecordMatcher,
    count_lines,
    grep,
    head,
    parse_tail_count,
    tail,
)

logger = logging.getLogger("biolines.cli")

EXIT_OK = 0
EXIT_FAILURE = 1


def _parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Log progress details to stderr")
    verbosity.add_argument("--quiet", action="store_true", help="Only log errors")
    return parser


def _add_files(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "files", nargs="*", metavar="FILE",
        help="Input file(s); use '-' for stdin or leave blank",
    )


def _start(parser: argparse.ArgumentParser, argv: Optional[List[str]]) -> argparse.Namespace:
    args = parser.parse_args(argv)
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    setup_logger(level)
    return args


def join_main(argv: Optional[List[str]] = None) -> int:
    """Equivalent of `join' for sequence files."""
    parser = _parser("bljoin", "Equivalent of `join' for sequence files")
    parser.add_argument("-n", "--no-pad", action="store_true",
                        help="Do not attempt to pad sequences to the same length")
    parser.add_argument("-D", "--allow-duplicates", action="store_true",
                        help="Allow duplicate names within a file")
    parser.add_argument("--on-duplicate", choices=["drop", "append"], default=None,
                        help="With -D, keep the first duplicate (drop) or concatenate it "
                             "(append) [default: drop]")
    parser.add_argument("-i", "--ignore-case", action="store_true",
                        help="Ignore case when matching")
    parser.add_argument("-f", "--field", type=int, default=None, metavar="N",
                        help="Field (1-based) of ID to join on, after splitting; records "
                             "without that field are ignored [default: whole ID]")
    parser.add_argument("-p", "--pad-char", default="-", metavar="C",
                        help="Character to use for padding [default: %(default)s]")
    parser.add_argument("-d", "--delim", default=" ", metavar="S",
                        help="Field separator characters [default: space]")
    parser.add_argument("-s", "--separator", default="", metavar="S",
                        help="Separator between joined sequences [default: none]")
    _add_files(parser)
    args = _start(parser, argv)

    if args.field is not None and args.field < 1:
        parser.error("--field must be a positive integer")
    if len(args.pad_char) != 1:
        parser.error("--pad-char must be a single character")
    if args.on_duplicate is not None and not args.allow_duplicates:
        parser.error("--on-duplicate requires -D/--allow-duplicates")

    duplicates = DuplicatePolicy.ERROR
    if args.allow_duplicates:
        duplicates = DuplicatePolicy(args.on_duplicate or "drop")

    options = JoinOptions(
        pad=not args.no_pad,
        pad_char=args.pad_char,
        separator=args.separator,
        duplicates=duplicates,
        keys=KeyOptions(case_fold=args.ignore_case, delimiter=args.delim, field_index=args.field),
    )

    try:
        result = run_join(args.files, options)
        writer = RecordWriter(fmt="fasta")
        write_join(result, writer)
        writer.flush()
    except BiolinesError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE
    return EXIT_OK


def head_main(argv: Optional[List[str]] = None) -> int:
    """Equivalent of `head' for sequence files."""
    parser = _parser("blhead", "Equivalent of `head' for sequence files")
    parser.add_argument("-f", "--format", choices=FORMATS, default="fasta",
                        help="Output format [default: %(default)s]")
    parser.add_argument("-n", "--lines", type=int, default=10, metavar="N",
                        help="Print the first N records of each file; with -N, all "
                             "but the last N [default: %(default)s]")
    _add_files(parser)
    args = _start(parser, argv)

    writer = RecordWriter(fmt=args.format)
    try:
        for _, stream in open_each(args.files):
            for record in head(stream, args.lines):
                writer.write(record)
        writer.flush()
    except BiolinesError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE
    return EXIT_OK


def tail_main(argv: Optional[List[str]] = None) -> int:
    """Equivalent of `tail' for sequence files."""
    parser = _parser("bltail", "Equivalent of `tail' for sequence files")
    parser.add_argument("-o", "--output-format", choices=FORMATS, default="fasta",
                        help="Output format [default: %(default)s]")
    parser.add_argument("-n", "--lines", default="10", metavar="[+]N",
                        help="Print the last N records of each file, or every record "
                             "from the N-th with +N [default: %(default)s]")
    _add_files(parser)
    args = _start(parser, argv)

    try:
        count, from_start = parse_tail_count(args.lines)
    except ValueError as exc:
        parser.error(str(exc))

    writer = RecordWriter(fmt=args.output_format)
    try:
        for _, stream in open_each(args.files):
            for record in tail(stream, count, from_start=from_start):
                writer.write(record)
        writer.flush()
    except BiolinesError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE
    return EXIT_OK


def grep_main(argv: Optional[List[str]] = None) -> int:
    """Regex search of sequence files."""
    parser = _parser("blgrep", "Regex search of sequence files")
    parser.add_argument("-S", "--sequence-regex", action="store_true",
                        help="Match sequences instead of names; implies -i")
    parser.add_argument("-v", "--invert-match", action="store_true",
                        help="Invert matching, like grep -v")
    parser.add_argument("-i", "--ignore-case", action="store_true",
                        help="Ignore case in pattern and input")
    parser.add_argument("-I", "--case-sensitive", action="store_true",
                        help="Do not ignore case; only for -S")
    parser.add_argument("-M", "--match-type", default="f",
                        help="Match type: f=fwd, r=rev, c=compl., R=revcomp, a=all; "
                             "ignored for names [default: %(default)s]")
    parser.add_argument("pattern", metavar="PATTERN", help="Regex pattern")
    _add_files(parser)
    args = _start(parser, argv)

    ignore_case = args.ignore_case or (args.sequence_regex and not args.case_sensitive)
    try:
        matcher = RecordMatcher(
            args.pattern,
            sequence_regex=args.sequence_regex,
            ignore_case=ignore_case,
            match_type=args.match_type,
        )
    except ValueError as exc:
        # re.error is a ValueError subclass
        parser.error(str(exc))

    writer = RecordWriter(fmt="fasta")
    try:
        for _, stream in open_each(args.files):
            for record in grep(stream, matcher, invert=args.invert_match):
                writer.write_record(record.id, record.sequence)
        writer.flush()
    except BiolinesError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    return EXIT_OK if writer.records_written else EXIT_FAILURE


def wc_main(argv: Optional[List[str]] = None) -> int:
    """Equivalent of `wc' for sequence files."""
    parser = _parser("blwc", "Equivalent of `wc' for sequence files")
    parser.add_argument("-m", "--length", action="store_true",
                        help="Give the length of each record")
    parser.add_argument("-g", "--gc", action="store_true",
                        help="Give the GC proportion (of file or of each record with -m)")
    parser.add_argument("-i", "--include-gap", action="store_true",
                        help="Include gaps ('-') in the base count")
    parser.add_argument("-b", "--total-bases", action="store_true",
                        help="Total bases per file (not compatible with -g or -m)")
    parser.add_argument("-B", "--grand-total-bases", action="store_true",
                        help="Total bases across all files (not compatible with -g or -m)")
    _add_files(parser)
    args = _start(parser, argv)

    try:
        options = CountOptions(
            per_record=args.length,
            gc=args.gc,
            include_gaps=args.include_gap,
            total_bases=args.total_bases,
            grand_total=args.grand_total_bases,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        for line in count_lines(args.files, options):
            sys.stdout.write(line + "\n")
        sys.stdout.flush()
    except BiolinesError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE
    return EXIT_OK
