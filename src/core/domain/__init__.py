"""
Domain models and value objects.

Contains the digit chain container, the NumberList number built on it,
its snapshot model and the error hierarchy.
"""

from src.core.domain.digit_chain import DigitChain, DigitCursor, Radix
from src.core.domain.errors import (
    ChainIndexError,
    CursorStateError,
    DigitChainError,
    DigitRangeError,
    ParseError,
    PersistenceError,
    UnsupportedOperationError,
)
from src.core.domain.number_file import read_decimal_source, write_decimal
from src.core.domain.number_list import DEFAULT_CONFIG, NumberList, NumberSystemConfig
from src.core.domain.snapshot import SNAPSHOT_SCHEMA_VERSION, NumberSnapshot

__all__ = [
    # Digit chain
    "DigitChain",
    "DigitCursor",
    "Radix",
    # Errors
    "DigitChainError",
    "DigitRangeError",
    "ChainIndexError",
    "CursorStateError",
    "UnsupportedOperationError",
    "ParseError",
    "PersistenceError",
    # Number file
    "read_decimal_source",
    "write_decimal",
    # Number list
    "NumberList",
    "NumberSystemConfig",
    "DEFAULT_CONFIG",
    # Snapshot model
    "NumberSnapshot",
    "SNAPSHOT_SCHEMA_VERSION",
]
