"""
Run configuration for bljoin.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class DuplicatePolicy(Enum):
    """
    What to do when a join key occurs twice in the same file.

    ERROR:  abort the run with DuplicateKeyError (default)
    DROP:   keep the first record, ignore later ones
    APPEND: concatenate the later record onto the key's buffer
            (separator first), which lengthens that buffer
    """
    ERROR = "error"
    DROP = "drop"
    APPEND = "append"


@dataclass
class KeyOptions:
    """
    How join keys are derived from record identifiers.

    Attributes:
        case_fold: Upper-case keys so matching ignores case
        delimiter: Characters that separate fields in an identifier
        field_index: 1-based field to join on; None uses the whole identifier
    """
    case_fold: bool = False
    delimiter: str = " "
    field_index: Optional[int] = None

    def __post_init__(self):
        if self.field_index is not None and self.field_index < 1:
            raise ValueError(f"field_index must be a positive integer, got {self.field_index}")


@dataclass
class JoinOptions:
    """
    Settings for one join run.

    Attributes:
        pad: Pad keys missing from a file with a gap block
        pad_char: Single gap character
        separator: String inserted between per-file blocks
        duplicates: Policy for keys repeated within a file
        keys: Join key extraction settings
    """
    pad: bool = True
    pad_char: str = "-"
    separator: str = ""
    duplicates: DuplicatePolicy = DuplicatePolicy.ERROR
    keys: KeyOptions = field(default_factory=KeyOptions)

    def __post_init__(self):
        if len(self.pad_char) != 1:
            raise ValueError(f"pad_char must be a single character, got {self.pad_char!r}")
