"""
Errors — иерархия исключений цепочки цифр

Каждое исключение наследует и общий DigitChainError, и соответствующий
встроенный тип, чтобы вызывающий код мог ловить как `IndexError`,
так и специфичный класс.
"""


class DigitChainError(Exception):
    """Базовое исключение для цепочки цифр и чисел на её основе."""


class DigitRangeError(DigitChainError, ValueError):
    """Значение цифры вне диапазона 0..radix-1."""

    def __init__(self, value: object, radix: int):
        self.value = value
        self.radix = int(radix)
        super().__init__(f"digit must be in 0..{self.radix - 1} for radix {self.radix}, got {value!r}")


class ChainIndexError(DigitChainError, IndexError):
    """Индекс вне границ цепочки."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"index {index} out of range for chain of size {size}")


class UnsupportedOperationError(DigitChainError, NotImplementedError):
    """Операция не поддерживается (например, удаление через курсор)."""


class ParseError(DigitChainError, ValueError):
    """Строгий разбор: источник не является десятичной строкой цифр."""

    def __init__(self, source: object):
        self.source = source
        super().__init__(f"not a non-negative decimal digit string: {source!r}")


class PersistenceError(DigitChainError, OSError):
    """Ошибка записи числа в файл. Исходная ошибка доступна в __cause__."""


class CursorStateError(DigitChainError, RuntimeError):
    """Курсор не указывает на последний возвращённый элемент (set без next/previous)."""
