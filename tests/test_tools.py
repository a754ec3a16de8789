import pytest

from biolines.io import SequenceRecord
from biolines.tools import (
    CountOptions,
    RecordMatcher,
    base_counts,
    count_lines,
    gc_fraction,
    grep,
    head,
    normalize_match_type,
    parse_tail_count,
    tail,
)
from biolines.utils import complement, reverse_complement


def records(n):
    return [SequenceRecord(f"r{i}", "A" * i) for i in range(1, n + 1)]


def ids(recs):
    return [r.id for r in recs]


@pytest.mark.parametrize("n, expected", [
    (2, ["r1", "r2"]),
    (0, []),
    (10, ["r1", "r2", "r3", "r4"]),
    (-1, ["r1", "r2", "r3"]),
    (-4, []),
])
def test_head(n, expected):
    assert ids(head(iter(records(4)), n)) == expected


@pytest.mark.parametrize("n, from_start, expected", [
    (2, False, ["r3", "r4"]),
    (0, False, []),
    (10, False, ["r1", "r2", "r3", "r4"]),
    (3, True, ["r3", "r4"]),
    (1, True, ["r1", "r2", "r3", "r4"]),
    (0, True, ["r1", "r2", "r3", "r4"]),
])
def test_tail(n, from_start, expected):
    assert ids(tail(iter(records(4)), n, from_start=from_start)) == expected


def test_parse_tail_count():
    assert parse_tail_count("10") == (10, False)
    assert parse_tail_count("+3") == (3, True)
    with pytest.raises(ValueError):
        parse_tail_count("-2")
    with pytest.raises(ValueError):
        parse_tail_count("ten")


def test_strand_helpers():
    assert complement("ACGTn-") == "TGCAn-"
    assert reverse_complement("AACG") == "CGTT"


def test_grep_names():
    recs = [SequenceRecord("geneA human", "ACGT"), SequenceRecord("geneB mouse", "TTTT")]
    matcher = RecordMatcher("human")
    assert ids(grep(recs, matcher)) == ["geneA human"]
    assert ids(grep(recs, matcher, invert=True)) == ["geneB mouse"]


def test_grep_sequence_strands():
    record = SequenceRecord("x", "AACCT")
    assert not RecordMatcher("AGG", sequence_regex=True)(record)
    assert RecordMatcher("AGG", sequence_regex=True, match_type="R")(record)
    assert RecordMatcher("TCCAA", sequence_regex=True, match_type="r")(record)
    assert RecordMatcher("TTGGA", sequence_regex=True, match_type="c")(record)
    assert RecordMatcher("AGG", sequence_regex=True, match_type="a")(record)


def test_grep_ignores_empty_matches():
    record = SequenceRecord("x", "CCC")
    assert not RecordMatcher("A*", sequence_regex=True)(record)


def test_grep_case():
    record = SequenceRecord("x", "acgt")
    assert not RecordMatcher("ACG", sequence_regex=True)(record)
    assert RecordMatcher("ACG", sequence_regex=True, ignore_case=True)(record)


def test_normalize_match_type():
    assert normalize_match_type("fR") == "fR"
    assert normalize_match_type("a") == "frcR"
    with pytest.raises(ValueError):
        normalize_match_type("x")


def test_base_counts():
    assert base_counts("AC-GT") == (4, 2)
    assert base_counts("AC-GT", include_gaps=True) == (5, 2)
    assert base_counts("gcgcAT") == (6, 4)
    assert base_counts("") == (0, 0)
    assert gc_fraction(0, 0) == 0.0


def test_count_lines_default(write_fasta):
    a = write_fasta([("a", "AC"), ("b", "GG")])
    b = write_fasta([("c", "T")])
    assert list(count_lines([a, b])) == [f"{a}\t2", f"{b}\t1"]


def test_count_lines_per_record_and_gc(write_fasta):
    a = write_fasta([("a", "AC--"), ("b", "GGGC")])
    assert list(count_lines([a], CountOptions(per_record=True))) == [f"{a}\ta\t2", f"{a}\tb\t4"]
    assert list(count_lines([a], CountOptions(per_record=True, gc=True))) == [
        f"{a}\ta\t0.5", f"{a}\tb\t1",
    ]
    assert list(count_lines([a], CountOptions(gc=True))) == [f"{a}\t0.833333"]


def test_count_lines_totals(write_fasta):
    a = write_fasta([("a", "AC-"), ("b", "GG")])
    b = write_fasta([("c", "TTT")])
    assert list(count_lines([a, b], CountOptions(total_bases=True, include_gaps=True))) == [
        f"{a}\t5", f"{b}\t3",
    ]
    assert list(count_lines([a, b], CountOptions(grand_total=True))) == [
        f"{a}\t2", f"{b}\t1", "GRAND_TOTAL_BASES\t7",
    ]


def test_count_options_conflict():
    with pytest.raises(ValueError):
        CountOptions(total_bases=True, gc=True)
