"""
Join key extraction.

A join key is the part of a record identifier that decides which records
are merged across files: the whole identifier, or one field of it, with
optional case folding.
"""

import re
from typing import Pattern, Union

from biolines.join.options import KeyOptions


class _Skip:
    """Marker for records that have no key and must be discarded."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"


SKIP = _Skip()


def split_fields(identifier: str, delimiter: str) -> list:
    """
    Split an identifier at runs of delimiter characters.

    Every character of ``delimiter`` is a boundary, consecutive delimiters
    count once, and leading or trailing delimiters give no empty fields.
    An empty delimiter leaves the identifier whole.

    Example:
        >>> split_fields("__gene__1_human_", "_")
        ['gene', '1', 'human']
    """
    if not delimiter:
        return [identifier]
    return [token for token in _delimiter_pattern(delimiter).split(identifier) if token]


_PATTERNS = {}


def _delimiter_pattern(delimiter: str) -> Pattern:
    pattern = _PATTERNS.get(delimiter)
    if pattern is None:
        pattern = re.compile("[" + "".join(re.escape(c) for c in delimiter) + "]+")
        _PATTERNS[delimiter] = pattern
    return pattern


class KeyExtractor:
    """
    Derives join keys from raw identifiers.

    Args:
        options: Key extraction settings

    Example:
        >>> extract = KeyExtractor(KeyOptions(delimiter="_", field_index=2))
        >>> extract("gene_1_human")
        '1'
        >>> extract("gene")
        SKIP
    """

    def __init__(self, options: KeyOptions = None):
        self.options = options if options is not None else KeyOptions()

    def __call__(self, identifier: str) -> Union[str, _Skip]:
        options = self.options
        key = identifier

        if options.field_index is not None:
            fields = split_fields(identifier, options.delimiter)
            if len(fields) < options.field_index:
                return SKIP
            key = fields[options.field_index - 1]

        if options.case_fold:
            key = key.upper()

        return key


def extract_key(identifier: str, options: KeyOptions = None) -> Union[str, _Skip]:
    """Extract a single join key; see KeyExtractor."""
    return KeyExtractor(options)(identifier)
