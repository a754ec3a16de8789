import logging

import pytest

from biolines.logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logger():
    """Undo any CLI logging setup between tests."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.NOTSET)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def write_fasta(tmp_path):
    """Write {id: sequence} pairs (or raw text) to a FASTA file, return its path."""
    counter = {"n": 0}

    def _write(records, name=None):
        counter["n"] += 1
        path = tmp_path / (name or f"input{counter['n']}.fasta")
        if isinstance(records, str):
            text = records
        else:
            text = "".join(f">{rid}\n{seq}\n" for rid, seq in records)
        path.write_text(text)
        return str(path)

    return _write
