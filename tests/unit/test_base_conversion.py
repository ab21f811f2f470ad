"""
Тесты для модуля Base Conversion

Проверяет:
1. Деление в столбик на малый делитель (частное, остаток, обрезка нулей)
2. decimal → hex / binary
3. hex / binary → decimal
4. Обратимость перевода для больших чисел
5. Отображение цифр ↔ символов и валидацию основания
"""

import pytest

from src.core.math.base_conversion import (
    BASE_BINARY,
    BASE_HEX,
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
from src.core.math.decimal_arithmetic import InvalidDecimalError


# =============================================================================
# ДЕЛЕНИЕ В СТОЛБИК
# =============================================================================


class TestDivideSmall:
    """Тесты для divide_small"""

    def test_quotient_and_remainder(self) -> None:
        """255 / 16 = 15, остаток 15"""
        digits = [2, 5, 5]
        remainder = divide_small(digits, 16)
        assert remainder == 15
        assert digits == [1, 5]

    def test_leading_zeros_stripped(self) -> None:
        """Ведущие нули частного удаляются после прохода"""
        digits = [1, 0, 0]
        remainder = divide_small(digits, 16)
        assert remainder == 4
        assert digits == [6]

    def test_zero_quotient_keeps_one_digit(self) -> None:
        """Нулевое частное сохраняется как одна цифра 0"""
        digits = [7]
        remainder = divide_small(digits, 16)
        assert remainder == 7
        assert digits == [0]

    def test_binary_division(self) -> None:
        """13 / 2 = 6, остаток 1"""
        digits = [1, 3]
        assert divide_small(digits, 2) == 1
        assert digits == [6]


# =============================================================================
# DECIMAL → BASE
# =============================================================================


class TestDecimalToBase:
    """Тесты для decimal_to_base"""

    @pytest.mark.parametrize(
        "decimal, expected",
        [
            ("0", "0"),
            ("1", "1"),
            ("10", "A"),
            ("15", "F"),
            ("16", "10"),
            ("255", "FF"),
            ("256", "100"),
            ("4096", "1000"),
            ("48879", "BEEF"),
            ("18446744073709551615", "FFFFFFFFFFFFFFFF"),
            ("18446744073709551616", "10000000000000000"),
        ],
    )
    def test_hex(self, decimal: str, expected: str) -> None:
        """Перевод в шестнадцатеричную систему (верхний регистр)"""
        assert decimal_to_base(decimal, BASE_HEX) == expected
        assert decimal_to_hex(decimal) == expected

    @pytest.mark.parametrize(
        "decimal, expected",
        [
            ("0", "0"),
            ("1", "1"),
            ("2", "10"),
            ("10", "1010"),
            ("255", "11111111"),
            ("256", "100000000"),
        ],
    )
    def test_binary(self, decimal: str, expected: str) -> None:
        """Перевод в двоичную систему"""
        assert decimal_to_base(decimal, BASE_BINARY) == expected
        assert decimal_to_binary(decimal) == expected

    def test_leading_zeros_ignored(self) -> None:
        """Ведущие нули входа не влияют на результат"""
        assert decimal_to_hex("000255") == "FF"
        assert decimal_to_hex("000") == "0"

    def test_invalid_decimal_raises(self) -> None:
        """Невалидная десятичная строка → InvalidDecimalError"""
        with pytest.raises(InvalidDecimalError):
            decimal_to_hex("12a")

    def test_unsupported_base_raises(self) -> None:
        """Основание не 2/16 → UnsupportedBaseError"""
        with pytest.raises(UnsupportedBaseError, match="base must be one of"):
            decimal_to_base("255", 8)


# =============================================================================
# BASE → DECIMAL
# =============================================================================


class TestBaseToDecimal:
    """Тесты для base_to_decimal"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", "0"),
            ("000", "0"),
            ("F", "15"),
            ("FF", "255"),
            ("ff", "255"),
            ("100", "256"),
            ("BEEF", "48879"),
            ("00FF", "255"),
            ("10000000000000000", "18446744073709551616"),
        ],
    )
    def test_hex(self, text: str, expected: str) -> None:
        """Перевод из шестнадцатеричной системы (регистр не важен)"""
        assert base_to_decimal(text, BASE_HEX) == expected
        assert hex_to_decimal(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", "0"),
            ("1", "1"),
            ("1010", "10"),
            ("11111111", "255"),
            ("100000000", "256"),
        ],
    )
    def test_binary(self, text: str, expected: str) -> None:
        """Перевод из двоичной системы"""
        assert base_to_decimal(text, BASE_BINARY) == expected
        assert binary_to_decimal(text) == expected

    def test_digit_outside_base_raises(self) -> None:
        """Символ вне основания → InvalidDigitSymbolError"""
        with pytest.raises(InvalidDigitSymbolError, match="not a digit in base 2"):
            binary_to_decimal("102")
        with pytest.raises(InvalidDigitSymbolError):
            hex_to_decimal("FG")

    def test_empty_string_raises(self) -> None:
        """Пустая строка → InvalidDigitSymbolError"""
        with pytest.raises(InvalidDigitSymbolError):
            hex_to_decimal("")


class TestRoundTrip:
    """Обратимость decimal → base → decimal"""

    @pytest.mark.parametrize(
        "decimal",
        [
            "1",
            "9",
            "65535",
            "340282366920938463463374607431768211456",  # 2^128
            "12345678901234567890123456789012345678901234567890",
            "99999999999999999999999999999999999999999999999999",
        ],
    )
    @pytest.mark.parametrize("base", [BASE_BINARY, BASE_HEX])
    def test_round_trip(self, decimal: str, base: int) -> None:
        """base_to_decimal(decimal_to_base(D)) == D"""
        assert base_to_decimal(decimal_to_base(decimal, base), base) == decimal

    def test_power_of_two_is_single_one_bit(self) -> None:
        """2^128 в двоичной системе — единица и 128 нулей"""
        binary = decimal_to_binary("340282366920938463463374607431768211456")
        assert binary == "1" + "0" * 128


# =============================================================================
# ЦИФРЫ И СИМВОЛЫ
# =============================================================================


class TestDigitSymbols:
    """Тесты для digit_to_symbol / symbol_to_digit / validate_base"""

    def test_digit_to_symbol(self) -> None:
        """Значения 10..15 → A..F"""
        assert digit_to_symbol(0) == "0"
        assert digit_to_symbol(10) == "A"
        assert digit_to_symbol(15) == "F"
        assert digit_to_symbol(1, BASE_BINARY) == "1"

    def test_digit_to_symbol_out_of_range(self) -> None:
        """Цифра вне основания → InvalidDigitSymbolError"""
        with pytest.raises(InvalidDigitSymbolError):
            digit_to_symbol(16)
        with pytest.raises(InvalidDigitSymbolError):
            digit_to_symbol(2, BASE_BINARY)
        with pytest.raises(InvalidDigitSymbolError):
            digit_to_symbol(-1)

    def test_symbol_to_digit(self) -> None:
        """Символы в любом регистре"""
        assert symbol_to_digit("a") == 10
        assert symbol_to_digit("F") == 15
        assert symbol_to_digit("1", BASE_BINARY) == 1

    def test_symbol_to_digit_rejects_multichar(self) -> None:
        """Только один символ"""
        with pytest.raises(InvalidDigitSymbolError):
            symbol_to_digit("10")

    def test_validate_base(self) -> None:
        """Поддерживаются только 2 и 16"""
        assert validate_base(2) == 2
        assert validate_base(16) == 16
        for base in (0, 1, 8, 10, True):
            with pytest.raises(UnsupportedBaseError):
                validate_base(base)

    def test_digits_to_decimal(self) -> None:
        """Список значений цифр → десятичная строка; пустой список — ноль"""
        assert digits_to_decimal([15, 15], BASE_HEX) == "255"
        assert digits_to_decimal([1, 0, 1, 0], BASE_BINARY) == "10"
        assert digits_to_decimal([], BASE_HEX) == "0"
