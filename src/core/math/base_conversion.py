"""
Base Conversion — Decimal ↔ Hexadecimal / Binary on Digit Strings

Модуль переводит числа произвольной точности между десятичной системой и
системами с основанием 2 и 16:
- decimal → base: многократное деление в столбик (long division) на основание,
  остатки собираются от младшего разряда к старшему
- base → decimal: позиционное суммирование digit * base^k через
  add_decimal / multiply_decimal

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Полное значение никогда не хранится в int — только остаток 0..base-1
   и промежуточное значение одного шага деления
2. Рабочее частное очищается от ведущих нулей после каждого прохода
3. Шестнадцатеричные цифры всегда в верхнем регистре (0-9A-F)
4. "0" → "0" в обе стороны
"""

from typing import Final

from src.core.math.decimal_arithmetic import (
    DECIMAL_BASE,
    ONE,
    ZERO,
    add_decimal,
    multiply_decimal,
    multiply_decimal_small,
    normalize_decimal,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

BASE_BINARY: Final[int] = 2
BASE_HEX: Final[int] = 16

SUPPORTED_BASES: Final[frozenset[int]] = frozenset({BASE_BINARY, BASE_HEX})

# Символы цифр в порядке значений; для основания b используются первые b
DIGIT_SYMBOLS: Final[str] = "0123456789ABCDEF"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedBaseError(ValueError):
    """Основание не входит в SUPPORTED_BASES."""


class InvalidDigitSymbolError(ValueError):
    """Символ не является цифрой в заданном основании."""


# =============================================================================
# ЦИФРЫ И СИМВОЛЫ
# =============================================================================


def validate_base(base: int) -> int:
    """
    Валидация основания системы счисления.

    Raises:
        UnsupportedBaseError: Если base не 2 и не 16
    """
    if isinstance(base, bool) or base not in SUPPORTED_BASES:
        raise UnsupportedBaseError(f"base must be one of {sorted(SUPPORTED_BASES)}, got {base!r}")
    return int(base)


def digit_to_symbol(digit: int, base: int = BASE_HEX) -> str:
    """
    Конверсия значения цифры в символ.

    Examples:
        >>> digit_to_symbol(10)
        'A'
        >>> digit_to_symbol(1, 2)
        '1'

    Raises:
        InvalidDigitSymbolError: Если digit вне 0..base-1
    """
    base = validate_base(base)
    if not 0 <= digit < base:
        raise InvalidDigitSymbolError(f"digit must be in 0..{base - 1}, got {digit}")
    return DIGIT_SYMBOLS[digit]


def symbol_to_digit(symbol: str, base: int = BASE_HEX) -> int:
    """
    Конверсия символа в значение цифры (регистр не важен).

    Examples:
        >>> symbol_to_digit("f")
        15
        >>> symbol_to_digit("1", 2)
        1

    Raises:
        InvalidDigitSymbolError: Если символ не является цифрой основания base
    """
    base = validate_base(base)
    value = DIGIT_SYMBOLS.find(symbol.upper()) if len(symbol) == 1 else -1
    if value < 0 or value >= base:
        raise InvalidDigitSymbolError(f"{symbol!r} is not a digit in base {base}")
    return value


# =============================================================================
# ДЕЛЕНИЕ В СТОЛБИК
# =============================================================================


def divide_small(digits: list[int], divisor: int) -> int:
    """
    Один проход деления в столбик десятичного числа на малый делитель.

    Список digits (старший разряд первым) заменяется частным на месте,
    ведущие нули частного удаляются (остаётся минимум одна цифра).

    Args:
        digits: Десятичные цифры делимого (мутируется)
        divisor: Делитель (2..16)

    Returns:
        Остаток от деления, 0..divisor-1
    """
    remainder = 0
    for i, digit in enumerate(digits):
        current = remainder * DECIMAL_BASE + digit
        digits[i] = current // divisor
        remainder = current % divisor

    # Стоимость следующего прохода пропорциональна текущей величине
    first_nonzero = 0
    while first_nonzero < len(digits) - 1 and digits[first_nonzero] == 0:
        first_nonzero += 1
    del digits[:first_nonzero]

    return remainder


def _is_zero_digits(digits: list[int]) -> bool:
    return all(d == 0 for d in digits)


# =============================================================================
# DECIMAL → BASE
# =============================================================================


def decimal_to_base(decimal: str, base: int) -> str:
    """
    Перевод десятичной строки в систему с основанием base.

    Многократно делит десятичное число на base, собирая остатки от младшего
    разряда к старшему, пока частное не станет нулём.

    Args:
        decimal: Десятичная строка (ведущие нули допускаются)
        base: Целевое основание (2 или 16)

    Returns:
        Строка цифр в основании base, старший разряд первым

    Raises:
        InvalidDecimalError: Если decimal не является десятичной строкой
        UnsupportedBaseError: Если base не поддерживается

    Examples:
        >>> decimal_to_base("255", 16)
        'FF'
        >>> decimal_to_base("255", 2)
        '11111111'
        >>> decimal_to_base("0", 16)
        '0'
    """
    base = validate_base(base)
    decimal = normalize_decimal(decimal)

    if decimal == ZERO:
        return ZERO

    working = [ord(ch) - ord(ZERO) for ch in decimal]
    remainders: list[str] = []

    while not _is_zero_digits(working):
        remainders.append(DIGIT_SYMBOLS[divide_small(working, base)])

    return "".join(reversed(remainders))


def decimal_to_hex(decimal: str) -> str:
    """Перевод десятичной строки в шестнадцатеричную (0-9A-F)."""
    return decimal_to_base(decimal, BASE_HEX)


def decimal_to_binary(decimal: str) -> str:
    """Перевод десятичной строки в двоичную."""
    return decimal_to_base(decimal, BASE_BINARY)


# =============================================================================
# BASE → DECIMAL
# =============================================================================


def base_to_decimal(text: str, base: int) -> str:
    """
    Перевод строки цифр в основании base в десятичную строку.

    Для каждой цифры, начиная с младшей, к результату прибавляется
    digit * power, затем power умножается на base. Нулевые цифры
    не дают вклада и пропускаются.

    Args:
        text: Строка цифр в основании base (регистр не важен)
        base: Исходное основание (2 или 16)

    Returns:
        Десятичная строка без ведущих нулей

    Raises:
        UnsupportedBaseError: Если base не поддерживается
        InvalidDigitSymbolError: Если text пустая или содержит недопустимый символ

    Examples:
        >>> base_to_decimal("FF", 16)
        '255'
        >>> base_to_decimal("1010", 2)
        '10'
    """
    base = validate_base(base)
    if not text:
        raise InvalidDigitSymbolError(f"empty digit string for base {base}")

    digits = [symbol_to_digit(ch, base) for ch in text]
    if all(d == 0 for d in digits):
        return ZERO

    result = ZERO
    power = ONE
    base_decimal = str(base)

    for position, digit in enumerate(reversed(digits)):
        if digit:
            result = add_decimal(result, multiply_decimal_small(power, digit))
        # Последняя степень не нужна
        if position < len(digits) - 1:
            power = multiply_decimal(power, base_decimal)

    return result


def hex_to_decimal(text: str) -> str:
    """Перевод шестнадцатеричной строки в десятичную."""
    return base_to_decimal(text, BASE_HEX)


def binary_to_decimal(text: str) -> str:
    """Перевод двоичной строки в десятичную."""
    return base_to_decimal(text, BASE_BINARY)


def digits_to_decimal(digits: list[int], base: int) -> str:
    """
    Перевод последовательности значений цифр (старший разряд первым) в десятичную строку.

    Пустая последовательность представляет ноль.
    """
    if not digits:
        return ZERO
    return base_to_decimal("".join(digit_to_symbol(d, base) for d in digits), base)
