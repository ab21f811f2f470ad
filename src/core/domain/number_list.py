"""
NumberList — неотрицательное целое произвольной точности на цепочке цифр

Число хранится в DigitChain в основном основании (по умолчанию 16).
Все преобразования проходят через десятичную строку:
- decimal → radix: многократное деление в столбик
- radix → decimal: позиционное суммирование
- смена системы (change_scale) и произведение (multiply): render в decimal,
  вычисление, повторная загрузка в новый экземпляр

Конструирование:
- снисходительное (NumberList(...), from_decimal, from_file): невалидный
  источник даёт пустое число (ноль), без исключения
- строгое (parse): невалидный источник → ParseError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Число, загруженное из десятичной строки, пустое (ноль) или без ведущих нулей
2. Производные экземпляры независимы от исходных (нет общих узлов)
3. Пустое число рендерится как "0" в любой системе
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from src.core.math.base_conversion import (
    decimal_to_base,
    digit_to_symbol,
    digits_to_decimal,
    symbol_to_digit,
)
from src.core.math.decimal_arithmetic import (
    ZERO,
    is_decimal_string,
    multiply_decimal,
    strip_leading_zeros,
)

from .digit_chain import DigitChain, Radix
from .errors import ParseError
from .number_file import PathLike, read_decimal_source, write_decimal
from .snapshot import NumberSnapshot

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class NumberSystemConfig:
    """Конфигурация систем счисления и файлового хранения.

    - primary_radix: основание хранения чисел по умолчанию и результата multiply
    - secondary_radix: основание, в которое переводит change_scale
    - file_encoding: кодировка файлов для from_file/save
    """
    primary_radix: Radix = Radix.HEX
    secondary_radix: Radix = Radix.BINARY
    file_encoding: str = "utf-8"


DEFAULT_CONFIG = NumberSystemConfig()


# =============================================================================
# NUMBER LIST
# =============================================================================


class NumberList(DigitChain):
    """
    Число произвольной точности, хранимое цифрами в основании radix.

    Наследует всю семантику списка DigitChain. Равенство сравнивает
    основание и цифры позиционно; для сравнения значений в разных
    системах используйте same_value().
    """

    def __init__(
        self,
        value: Optional[str] = None,
        radix: Optional[int] = None,
        config: Optional[NumberSystemConfig] = None,
    ):
        """
        Args:
            value: Десятичная строка; невалидная строка даёт пустое число
            radix: Основание хранения (default: config.primary_radix)
            config: Конфигурация (default: DEFAULT_CONFIG)
        """
        self.config = config or DEFAULT_CONFIG
        super().__init__(self.config.primary_radix if radix is None else radix)

        if value is not None:
            if is_decimal_string(value):
                self._load_decimal(value)
            else:
                logger.debug("Rejected decimal source %r, number left empty", value)

    def _load_decimal(self, decimal: str) -> None:
        decimal = strip_leading_zeros(decimal)
        # Ноль представлен пустой цепочкой
        if decimal == ZERO:
            return
        native = decimal_to_base(decimal, self.radix)
        self.extend(symbol_to_digit(ch, self.radix) for ch in native)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_decimal(
        cls,
        value: Optional[str],
        radix: Optional[int] = None,
        config: Optional[NumberSystemConfig] = None,
    ) -> "NumberList":
        """Снисходительный конструктор: невалидная строка → пустое число."""
        return cls(value, radix=radix, config=config)

    @classmethod
    def parse(
        cls,
        value: str,
        radix: Optional[int] = None,
        config: Optional[NumberSystemConfig] = None,
    ) -> "NumberList":
        """
        Строгий конструктор.

        Raises:
            ParseError: Если value не является непустой строкой десятичных цифр
        """
        if not is_decimal_string(value):
            raise ParseError(value)
        return cls(value, radix=radix, config=config)

    @classmethod
    def from_file(
        cls,
        path: Optional[PathLike],
        radix: Optional[int] = None,
        config: Optional[NumberSystemConfig] = None,
    ) -> "NumberList":
        """
        Загрузка числа из файла с десятичной записью.

        Отсутствующий/нечитаемый файл или невалидное содержимое дают
        пустое число без исключения.
        """
        config = config or DEFAULT_CONFIG
        return cls(read_decimal_source(path, config.file_encoding), radix=radix, config=config)

    @classmethod
    def from_snapshot(
        cls,
        snapshot: Union[NumberSnapshot, Mapping[str, Any]],
        config: Optional[NumberSystemConfig] = None,
    ) -> "NumberList":
        """
        Восстановление числа из снапшота (модель или dict).

        Raises:
            pydantic.ValidationError: Если dict не проходит валидацию модели
        """
        if not isinstance(snapshot, NumberSnapshot):
            snapshot = NumberSnapshot.model_validate(snapshot)
        number = cls(radix=snapshot.radix, config=config)
        number.extend(snapshot.digits)
        return number

    # -------------------------------------------------------------------------
    # Рендеринг
    # -------------------------------------------------------------------------

    def to_decimal_string(self) -> str:
        """Десятичная запись числа; пустое число → "0"."""
        return digits_to_decimal(self.to_list(), self.radix)

    def to_native_string(self) -> str:
        """
        Запись в собственном основании: 0-9A-F для 16, 0/1 для 2.

        Один символ на цифру, без группировки; пустое число → "0".
        """
        if self.is_empty():
            return ZERO
        return "".join(digit_to_symbol(d, self.radix) for d in self)

    def __str__(self) -> str:
        return self.to_native_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_decimal_string()!r}, radix={self.radix.value})"

    # -------------------------------------------------------------------------
    # Производные числа
    # -------------------------------------------------------------------------

    def to_radix(self, radix: int) -> "NumberList":
        """Новое независимое число того же значения в основании radix."""
        return type(self)(self.to_decimal_string(), radix=radix, config=self.config)

    def change_scale(self) -> "NumberList":
        """
        То же число во вторичной системе счисления (по умолчанию двоичной).

        Исходное число не изменяется.
        """
        result = self.to_radix(self.config.secondary_radix)
        logger.debug("Changed scale %s -> %s (%d digits)", self.radix.name, result.radix.name, len(result))
        return result

    def multiply(self, other: "NumberList") -> "NumberList":
        """
        Произведение двух чисел как новое число в основном основании.

        Операнды не изменяются.
        """
        product = multiply_decimal(self.to_decimal_string(), other.to_decimal_string())
        return type(self)(product, radix=self.config.primary_radix, config=self.config)

    additional_operation = multiply

    def __mul__(self, other: object) -> "NumberList":
        if not isinstance(other, NumberList):
            return NotImplemented
        return self.multiply(other)

    def same_value(self, other: "NumberList") -> bool:
        """Сравнение представленных значений независимо от основания."""
        return self.to_decimal_string() == other.to_decimal_string()

    # -------------------------------------------------------------------------
    # Хранение
    # -------------------------------------------------------------------------

    def save(self, path: PathLike) -> None:
        """
        Запись десятичной записи числа как всего содержимого файла.

        Raises:
            PersistenceError: Если запись не удалась
        """
        write_decimal(path, self.to_decimal_string(), self.config.file_encoding)

    save_list = save

    def to_snapshot(self) -> NumberSnapshot:
        digits = self.to_list()
        return NumberSnapshot(
            radix=self.radix,
            digits=digits,
            native=self.to_native_string(),
            decimal=digits_to_decimal(digits, self.radix),
        )
