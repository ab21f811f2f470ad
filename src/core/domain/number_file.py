"""
Number File — текстовое хранение числа в десятичной записи

Файл содержит только десятичную строку числа. Чтение снисходительно:
отсутствующий или нечитаемый файл даёт None (вызывающий код получает
пустое число). Запись строгая: любая ошибка ввода-вывода поднимается
как PersistenceError.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .errors import PersistenceError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def read_decimal_source(path: Optional[PathLike], encoding: str = "utf-8") -> Optional[str]:
    """
    Чтение содержимого файла без окружающих пробельных символов.

    Args:
        path: Путь к файлу (None допускается)
        encoding: Кодировка файла

    Returns:
        Содержимое файла (strip) или None, если файл не удалось прочитать
    """
    if path is None:
        return None

    file_path = Path(path)
    try:
        return file_path.read_text(encoding=encoding).strip()
    except FileNotFoundError:
        logger.warning("Number source %s does not exist, using empty number", file_path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read number source %s (%s), using empty number", file_path, exc)
    return None


def write_decimal(path: PathLike, decimal: str, encoding: str = "utf-8") -> None:
    """
    Запись десятичной строки как всего содержимого файла.

    Raises:
        PersistenceError: Если запись не удалась (исходная ошибка в __cause__)
    """
    file_path = Path(path)
    try:
        file_path.write_text(decimal, encoding=encoding)
    except OSError as exc:
        raise PersistenceError(f"Error writing number to {file_path}: {exc}") from exc

    logger.debug("Saved %d decimal digits to %s", len(decimal), file_path)
