import pytest

from biolines.join import SKIP, KeyExtractor, KeyOptions, extract_key, split_fields


def test_whole_identifier_by_default():
    assert extract_key("gene_1_human") == "gene_1_human"


def test_field_extraction():
    options = KeyOptions(delimiter="_", field_index=2)
    assert extract_key("gene_1_human", options) == "1"


def test_case_folding_merges_identifiers():
    extract = KeyExtractor(KeyOptions(case_fold=True))
    assert extract("geneA") == extract("GENEA") == "GENEA"


def test_case_folding_after_field_selection():
    extract = KeyExtractor(KeyOptions(case_fold=True, delimiter="|", field_index=1))
    assert extract("abc|def") == "ABC"


def test_missing_field_is_skipped():
    extract = KeyExtractor(KeyOptions(delimiter="_", field_index=4))
    assert extract("gene_1_human") is SKIP


def test_empty_identifier_is_a_key():
    assert extract_key("") == ""
    assert extract_key("", KeyOptions(case_fold=True)) == ""


def test_empty_identifier_has_no_fields():
    assert extract_key("", KeyOptions(field_index=1)) is SKIP


@pytest.mark.parametrize("identifier, delimiter, expected", [
    ("a b c", " ", ["a", "b", "c"]),
    ("a   b", " ", ["a", "b"]),
    ("  a b  ", " ", ["a", "b"]),
    ("a_b|c", "_|", ["a", "b", "c"]),
    ("a_|_b", "_|", ["a", "b"]),
    ("a.b", ".", ["a", "b"]),
    ("a b", "", ["a b"]),
    ("", " ", []),
])
def test_split_fields(identifier, delimiter, expected):
    assert split_fields(identifier, delimiter) == expected


def test_empty_delimiter_keeps_identifier_whole():
    extract = KeyExtractor(KeyOptions(delimiter="", field_index=1))
    assert extract("gene 1") == "gene 1"
    assert KeyExtractor(KeyOptions(delimiter="", field_index=2))("gene 1") is SKIP


def test_consecutive_delimiters_count_once():
    options = KeyOptions(delimiter="_", field_index=2)
    assert extract_key("gene__1___human", options) == "1"
    assert extract_key("_gene_1", options) == "1"


@pytest.mark.parametrize("field_index", [0, -1])
def test_field_index_must_be_positive(field_index):
    with pytest.raises(ValueError):
        KeyOptions(field_index=field_index)


def test_skip_is_distinct_from_strings():
    assert SKIP != ""
    assert repr(SKIP) == "SKIP"
