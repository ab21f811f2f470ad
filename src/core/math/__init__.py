"""
Core math modules

Арифметика произвольной точности над десятичными строками и перевод
между системами счисления без встроенных big-integer.
"""

# Decimal Arithmetic
from src.core.math.decimal_arithmetic import (
    DECIMAL_BASE,
    InvalidDecimalError,
    add_decimal,
    is_decimal_string,
    is_zero_decimal,
    multiply_decimal,
    multiply_decimal_small,
    normalize_decimal,
    strip_leading_zeros,
    validate_decimal,
)

# Base Conversion
from src.core.math.base_conversion import (
    BASE_BINARY,
    BASE_HEX,
    DIGIT_SYMBOLS,
    SUPPORTED_BASES,
    InvalidDigitSymbolError,
    UnsupportedBaseError,
    base_to_decimal,
    binary_to_decimal,
    decimal_to_base,
    decimal_to_binary,
    decimal_to_hex,
    digit_to_symbol,
    digits_to_decimal,
    divide_small,
    hex_to_decimal,
    symbol_to_digit,
    validate_base,
)

__all__ = [
    # Decimal Arithmetic: Constants
    "DECIMAL_BASE",
    # Decimal Arithmetic: Exceptions
    "InvalidDecimalError",
    # Decimal Arithmetic: Functions
    "add_decimal",
    "is_decimal_string",
    "is_zero_decimal",
    "multiply_decimal",
    "multiply_decimal_small",
    "normalize_decimal",
    "strip_leading_zeros",
    "validate_decimal",
    # Base Conversion: Constants
    "BASE_BINARY",
    "BASE_HEX",
    "DIGIT_SYMBOLS",
    "SUPPORTED_BASES",
    # Base Conversion: Exceptions
    "InvalidDigitSymbolError",
    "UnsupportedBaseError",
    # Base Conversion: Functions
    "base_to_decimal",
    "binary_to_decimal",
    "decimal_to_base",
    "decimal_to_binary",
    "decimal_to_hex",
    "digit_to_symbol",
    "digits_to_decimal",
    "divide_small",
    "hex_to_decimal",
    "symbol_to_digit",
    "validate_base",
]
