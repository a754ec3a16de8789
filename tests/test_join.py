import pytest

from biolines.errors import DuplicateKeyError, FileOpenError, RecordReadError
from biolines.io import RecordStream, RecordWriter
from biolines.join import DuplicatePolicy, JoinOptions, KeyOptions, run_join, write_join


class RecordingWriter(RecordWriter):
    def __init__(self):
        self.records = []

    def write_record(self, id, sequence, quality=None):
        self.records.append((id, sequence))


def test_join_two_files(write_fasta):
    a = write_fasta([("X", "ACGT"), ("Y", "TTTT")])
    b = write_fasta([("X", "GGGG")])
    result = run_join([a, b])
    assert dict(result.sequences) == {"X": "ACGTGGGG", "Y": "TTTT----"}
    assert result.files == 2
    assert result.records == 3
    assert result.file_lengths == [4, 4]


def test_join_on_field_with_case_folding(write_fasta):
    a = write_fasta([("gene1|Human", "AC"), ("gene1|mouse", "GG")])
    b = write_fasta([("gene2|HUMAN", "TTT"), ("nofield", "CCC")])
    options = JoinOptions(keys=KeyOptions(case_fold=True, delimiter="|", field_index=2))
    result = run_join([a, b], options)
    assert dict(result.sequences) == {"HUMAN": "ACTTT", "MOUSE": "GG---"}
    assert result.skipped == 1


def test_skipped_records_do_not_set_width(write_fasta):
    a = write_fasta([("nofield", "AAAAAAAA"), ("g x", "AC")])
    options = JoinOptions(keys=KeyOptions(field_index=2))
    result = run_join([a], options)
    assert result.file_lengths == [2]
    assert result.mismatches == []


def test_duplicate_aborts_before_output(write_fasta):
    a = write_fasta([("X", "AAAA")])
    b = write_fasta([("X", "CCCC")])
    c = write_fasta([("Y", "GGGG"), ("Y", "TTTT")])
    writer = RecordingWriter()
    with pytest.raises(DuplicateKeyError):
        write_join(run_join([a, b, c]), writer)
    assert writer.records == []


def test_duplicates_tolerated(write_fasta):
    a = write_fasta([("X", "AA"), ("X", "CC")])
    dropped = run_join([a], JoinOptions(duplicates=DuplicatePolicy.DROP))
    appended = run_join([a], JoinOptions(duplicates=DuplicatePolicy.APPEND))
    assert dropped.sequences["X"] == "AA"
    assert appended.sequences["X"] == "AACC"


def test_missing_file_is_fatal(write_fasta, tmp_path):
    a = write_fasta([("X", "AA")])
    with pytest.raises(FileOpenError):
        run_join([a, str(tmp_path / "nope.fasta")])


def test_stream_closed_when_read_fails(write_fasta):
    bad = write_fasta("@X\nACGT\n+\nII\n", name="bad.fastq")
    opened = []

    def opener(path):
        stream = RecordStream.open(path)
        opened.append(stream)
        return stream

    good = write_fasta([("X", "AC")])
    with pytest.raises(RecordReadError):
        run_join([good, bad], opener=opener)
    assert [s.closed for s in opened] == [True, True]


def test_stream_closed_on_duplicate(write_fasta):
    opened = []

    def opener(path):
        stream = RecordStream.open(path)
        opened.append(stream)
        return stream

    dups = write_fasta([("X", "A"), ("X", "C")])
    with pytest.raises(DuplicateKeyError):
        run_join([dups], opener=opener)
    assert opened[0].closed


def test_write_join_emits_fasta(write_fasta):
    a = write_fasta([("b", "AC"), ("a", "GT")])
    writer = RecordingWriter()
    count = write_join(run_join([a]), writer)
    assert count == 2
    assert writer.records == [("a", "GT"), ("b", "AC")]


def test_reads_stdin_without_paths(monkeypatch):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO(">X\nAC\n"))
    result = run_join([])
    assert dict(result.sequences) == {"X": "AC"}


def test_corrupt_gzip_aborts_join(tmp_path):
    import gzip

    path = tmp_path / "corrupt.fasta.gz"
    with gzip.open(path, "wt") as f:
        f.write("".join(f">seq{i}\n{'ACGT' * 50}\n" for i in range(50)))
    data = bytearray(path.read_bytes())
    for i in range(10, 40):
        data[i] ^= 0xFF
    path.write_bytes(bytes(data))
    with pytest.raises(RecordReadError):
        run_join([str(path)])


def test_empty_path_iterator_reads_stdin(monkeypatch):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO(">X\nAC\n"))
    result = run_join(iter([]))
    assert dict(result.sequences) == {"X": "AC"}
