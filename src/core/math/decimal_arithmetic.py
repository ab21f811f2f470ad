"""
Decimal Arithmetic — Schoolbook Operations on Decimal Digit Strings

Модуль реализует арифметику произвольной точности над десятичными строками
(most-significant digit first) без использования встроенных big-integer:
- Валидация десятичных строк
- Нормализация (удаление ведущих нулей)
- Сложение с переносом (carry)
- Умножение в столбик с буфером длины len(a) + len(b)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Полное значение никогда не переводится в int — только отдельные цифры
2. Результат всегда без ведущих нулей (кроме литерала "0")
3. Все операции детерминированы и тотальны на валидных входах
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DECIMAL_BASE: Final[int] = 10

# Только ASCII-цифры: str.isdigit() пропускает, например, "²" и арабские цифры
DECIMAL_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

ZERO: Final[str] = "0"
ONE: Final[str] = "1"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDecimalError(ValueError):
    """Строка не является десятичной строкой цифр."""


# =============================================================================
# ВАЛИДАЦИЯ И НОРМАЛИЗАЦИЯ
# =============================================================================


def is_decimal_string(value: object) -> bool:
    """
    Проверка, что значение — непустая строка только из ASCII-цифр 0-9.

    Знаки, пробелы, буквы и пустая строка считаются невалидными.

    Examples:
        >>> is_decimal_string("255")
        True
        >>> is_decimal_string("12a")
        False
        >>> is_decimal_string("")
        False
        >>> is_decimal_string(" 1")
        False
    """
    if not isinstance(value, str) or not value:
        return False
    return all(ch in DECIMAL_DIGITS for ch in value)


def validate_decimal(value: object, name: str = "value") -> str:
    """
    Валидация десятичной строки.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        InvalidDecimalError: Если value не является десятичной строкой
    """
    if not is_decimal_string(value):
        raise InvalidDecimalError(f"{name} must be a non-empty string of decimal digits, got {value!r}")
    return value  # type: ignore[return-value]


def strip_leading_zeros(digits: str) -> str:
    """
    Удаление ведущих нулей; пустой результат превращается в "0".

    Examples:
        >>> strip_leading_zeros("000120")
        '120'
        >>> strip_leading_zeros("0000")
        '0'
    """
    stripped = digits.lstrip(ZERO)
    return stripped if stripped else ZERO


def normalize_decimal(value: str) -> str:
    """Валидация + удаление ведущих нулей."""
    return strip_leading_zeros(validate_decimal(value))


def is_zero_decimal(value: str) -> bool:
    """True если десятичная строка представляет ноль (включая "000")."""
    return all(ch == ZERO for ch in value)


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_decimal(a: str, b: str) -> str:
    """
    Сложение двух десятичных строк в столбик с переносом.

    Операнды выравниваются по правому краю и могут иметь разную длину.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Сумма как десятичная строка без ведущих нулей

    Raises:
        InvalidDecimalError: Если операнд не является десятичной строкой

    Examples:
        >>> add_decimal("999", "1")
        '1000'
        >>> add_decimal("0", "0")
        '0'
    """
    validate_decimal(a, "a")
    validate_decimal(b, "b")

    result: list[str] = []
    carry = 0
    i = len(a) - 1
    j = len(b) - 1

    while i >= 0 or j >= 0 or carry > 0:
        column = carry
        if i >= 0:
            column += ord(a[i]) - ord(ZERO)
            i -= 1
        if j >= 0:
            column += ord(b[j]) - ord(ZERO)
            j -= 1

        result.append(chr(ord(ZERO) + column % DECIMAL_BASE))
        carry = column // DECIMAL_BASE

    # Цифры собраны от младшей к старшей
    return strip_leading_zeros("".join(reversed(result)))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_decimal(a: str, b: str) -> str:
    """
    Умножение двух десятичных строк в столбик.

    Частичные произведения накапливаются в буфере длины len(a) + len(b):
    произведение цифр a[i] и b[j] попадает в позицию i + j + 1, перенос —
    в более старшую позицию i + j.

    Args:
        a: Первый множитель
        b: Второй множитель

    Returns:
        Произведение как десятичная строка без ведущих нулей

    Raises:
        InvalidDecimalError: Если операнд не является десятичной строкой

    Examples:
        >>> multiply_decimal("99", "99")
        '9801'
        >>> multiply_decimal("12345", "0")
        '0'
    """
    validate_decimal(a, "a")
    validate_decimal(b, "b")

    if is_zero_decimal(a) or is_zero_decimal(b):
        return ZERO

    buffer = [0] * (len(a) + len(b))

    for i in range(len(a) - 1, -1, -1):
        digit_a = ord(a[i]) - ord(ZERO)
        for j in range(len(b) - 1, -1, -1):
            digit_b = ord(b[j]) - ord(ZERO)
            low = i + j + 1
            high = i + j

            column = digit_a * digit_b + buffer[low]
            buffer[low] = column % DECIMAL_BASE
            buffer[high] += column // DECIMAL_BASE

    return strip_leading_zeros("".join(chr(ord(ZERO) + d) for d in buffer))


def multiply_decimal_small(a: str, factor: int) -> str:
    """
    Умножение десятичной строки на малое неотрицательное число (цифру или основание).

    Raises:
        ValueError: Если factor отрицательный
    """
    if factor < 0:
        raise ValueError(f"factor must be non-negative, got {factor}")
    return multiply_decimal(a, str(factor))
