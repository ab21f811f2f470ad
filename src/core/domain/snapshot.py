"""
NumberSnapshot — Модель снапшота числа

Immutable Pydantic модель, описывающая число в одной системе счисления:
значения цифр, запись в основании radix и десятичная запись.
Полная совместимость с JSON Schema (schema/number_snapshot.json).
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.base_conversion import digit_to_symbol, digits_to_decimal

from .digit_chain import Radix

SNAPSHOT_SCHEMA_VERSION: Final[str] = "1"


class NumberSnapshot(BaseModel):
    """
    Снапшот числа.

    Immutable модель (frozen=True). Все поля согласованы между собой:
    native — это digits в основании radix, decimal — то же значение
    в десятичной системе.
    """

    schema_version: str = Field(default=SNAPSHOT_SCHEMA_VERSION, description="Версия контракта снапшота")
    radix: Radix = Field(..., description="Основание системы счисления (2 или 16)")
    digits: list[int] = Field(default_factory=list, description="Цифры, старший разряд первым")
    native: str = Field(..., min_length=1, description="Запись в основании radix (0-9A-F)")
    decimal: str = Field(..., min_length=1, pattern=r"^(0|[1-9][0-9]*)$", description="Десятичная запись")

    model_config = {"frozen": True}  # Immutable

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v != SNAPSHOT_SCHEMA_VERSION:
            raise ValueError(f"unsupported snapshot schema_version {v!r}, expected {SNAPSHOT_SCHEMA_VERSION!r}")
        return v

    @model_validator(mode="after")
    def validate_consistency(self) -> "NumberSnapshot":
        """
        Проверка согласованности digits ↔ native ↔ decimal.

        Пустой список цифр представляет ноль и записывается как "0".
        """
        for digit in self.digits:
            if not 0 <= digit < self.radix:
                raise ValueError(f"digit {digit} out of range for radix {int(self.radix)}")

        expected_native = "".join(digit_to_symbol(d, self.radix) for d in self.digits) or "0"
        if self.native != expected_native:
            raise ValueError(f"native {self.native!r} does not match digits (expected {expected_native!r})")

        expected_decimal = digits_to_decimal(self.digits, self.radix)
        if self.decimal != expected_decimal:
            raise ValueError(f"decimal {self.decimal!r} does not match digits (expected {expected_decimal!r})")

        return self
