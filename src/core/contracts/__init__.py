"""
Contract Validation Module

Модуль для валидации JSON контрактов (снапшотов чисел).
"""

from .validators import (
    ContractValidator,
    NumberSnapshotValidator,
    SchemaLoader,
    validate_number_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumberSnapshotValidator",
    # Functions
    "validate_number_snapshot",
]
