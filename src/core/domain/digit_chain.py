"""
DigitChain — двусвязная цепочка цифр фиксированного основания

Контейнер хранит упорядоченную последовательность цифр 0..radix-1 в виде
двусвязного списка узлов и предоставляет семантику списка:
- доступ по индексу (get/set), вставка, удаление по индексу и по значению
- поиск (index_of/last_index_of/contains)
- swap, сортировка пузырьком, циклический сдвиг значений
- ленивая итерация вперёд/назад и двунаправленный курсор

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая хранимая цифра в диапазоне 0..radix-1 (проверяется при записи)
2. size всегда равен количеству узлов
3. radix задаётся при создании и не изменяется
4. Индексные операции падают с ChainIndexError, swap — мягко (False)
5. Узлы принадлежат только цепочке и не выдаются наружу
"""

from enum import Enum
from typing import Callable, Iterable, Iterator, Optional

from src.core.domain.errors import (
    ChainIndexError,
    CursorStateError,
    DigitRangeError,
    UnsupportedOperationError,
)


# =============================================================================
# ENUMS
# =============================================================================


class Radix(int, Enum):
    """Основание системы счисления цепочки"""

    BINARY = 2
    HEX = 16


# =============================================================================
# NODE
# =============================================================================


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: int):
        self.value = value
        self.prev: Optional["_Node"] = None
        self.next: Optional["_Node"] = None


def _is_plain_int(value: object) -> bool:
    """int, но не bool."""
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# DIGIT CHAIN
# =============================================================================


class DigitChain:
    """
    Двусвязная цепочка цифр с фиксированным основанием.

    Не потокобезопасна: экземпляр предполагает единственного владельца.
    Структурные изменения (вставка/удаление) инвалидируют активные
    итераторы и курсоры.
    """

    def __init__(self, radix: int = Radix.HEX, digits: Optional[Iterable[int]] = None):
        """
        Args:
            radix: Основание (Radix.HEX или Radix.BINARY)
            digits: Начальные цифры, старший разряд первым
        """
        try:
            self._radix = Radix(radix)
        except ValueError:
            raise ValueError(f"radix must be one of {[r.value for r in Radix]}, got {radix!r}") from None

        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        # Счётчик структурных изменений для fail-fast итераторов
        self._mod_count = 0

        if digits is not None:
            self.extend(digits)

    # -------------------------------------------------------------------------
    # Валидация
    # -------------------------------------------------------------------------

    @property
    def radix(self) -> Radix:
        return self._radix

    def _validate_digit(self, value: int) -> int:
        if not _is_plain_int(value):
            raise TypeError(f"digit must be int, got {type(value).__name__}")
        if value < 0 or value >= self._radix:
            raise DigitRangeError(value, self._radix)
        return value

    def _check_index(self, index: int, upper: int) -> None:
        # upper включительно: size для вставки, size - 1 для доступа
        if not _is_plain_int(index):
            raise TypeError(f"index must be int, got {type(index).__name__}")
        if index < 0 or index > upper:
            raise ChainIndexError(index, self._size)

    def _node_at(self, index: int) -> _Node:
        # Обход с ближайшего конца
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    # -------------------------------------------------------------------------
    # Связывание узлов
    # -------------------------------------------------------------------------

    def _link_before(self, successor: Optional[_Node], value: int) -> _Node:
        """Вставка узла перед successor (None — в конец)."""
        node = _Node(value)
        if successor is None:
            node.prev = self._tail
            if self._tail is not None:
                self._tail.next = node
            else:
                self._head = node
            self._tail = node
        else:
            node.next = successor
            node.prev = successor.prev
            if successor.prev is not None:
                successor.prev.next = node
            else:
                self._head = node
            successor.prev = node

        self._size += 1
        self._mod_count += 1
        return node

    def _unlink(self, node: _Node) -> int:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next

        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev

        node.prev = node.next = None
        self._size -= 1
        self._mod_count += 1
        return node.value

    # -------------------------------------------------------------------------
    # Размер
    # -------------------------------------------------------------------------

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    # -------------------------------------------------------------------------
    # Доступ по индексу
    # -------------------------------------------------------------------------

    def get(self, index: int) -> int:
        """
        Цифра по индексу.

        Raises:
            ChainIndexError: Если index вне 0..size-1
        """
        self._check_index(index, self._size - 1)
        return self._node_at(index).value

    def set(self, index: int, value: int) -> int:
        """
        Замена цифры по индексу.

        Returns:
            Предыдущее значение

        Raises:
            ChainIndexError: Если index вне 0..size-1
            DigitRangeError: Если value вне 0..radix-1
        """
        self._check_index(index, self._size - 1)
        self._validate_digit(value)
        node = self._node_at(index)
        previous = node.value
        node.value = value
        return previous

    def __getitem__(self, index: int) -> int:
        return self.get(index)

    def __setitem__(self, index: int, value: int) -> None:
        self.set(index, value)

    def __delitem__(self, index: int) -> None:
        self.remove_at(index)

    # -------------------------------------------------------------------------
    # Вставка
    # -------------------------------------------------------------------------

    def append(self, value: int) -> None:
        """
        Добавление цифры в конец.

        Raises:
            DigitRangeError: Если value вне 0..radix-1
        """
        self._link_before(None, self._validate_digit(value))

    def insert(self, index: int, value: int) -> None:
        """
        Вставка цифры перед позицией index (index == size — в конец).

        Raises:
            ChainIndexError: Если index вне 0..size
            DigitRangeError: Если value вне 0..radix-1
        """
        self._check_index(index, self._size)
        self._validate_digit(value)
        successor = None if index == self._size else self._node_at(index)
        self._link_before(successor, value)

    def extend(self, values: Iterable[int]) -> bool:
        """
        Добавление всех цифр в конец.

        Цифры проверяются до вставки: при ошибке цепочка не изменяется.

        Returns:
            True если цепочка изменилась
        """
        checked = [self._validate_digit(v) for v in values]
        for value in checked:
            self._link_before(None, value)
        return bool(checked)

    add_all = extend

    def insert_all(self, index: int, values: Iterable[int]) -> bool:
        """
        Вставка всех цифр начиная с позиции index, с сохранением порядка.

        Raises:
            ChainIndexError: Если index вне 0..size
            DigitRangeError: Если хотя бы одна цифра вне диапазона
        """
        self._check_index(index, self._size)
        checked = [self._validate_digit(v) for v in values]
        successor = None if index == self._size else self._node_at(index)
        for value in checked:
            self._link_before(successor, value)
        return bool(checked)

    # -------------------------------------------------------------------------
    # Удаление
    # -------------------------------------------------------------------------

    def remove_at(self, index: int) -> int:
        """
        Удаление цифры по индексу.

        Returns:
            Удалённое значение

        Raises:
            ChainIndexError: Если index вне 0..size-1
        """
        self._check_index(index, self._size - 1)
        return self._unlink(self._node_at(index))

    def pop(self, index: Optional[int] = None) -> int:
        """Удаление по индексу (по умолчанию последней цифры)."""
        return self.remove_at(self._size - 1 if index is None else index)

    def remove_value(self, value: int) -> bool:
        """
        Удаление первой цифры, равной value.

        Returns:
            True если цифра была удалена
        """
        node = self._find_first(value)
        if node is None:
            return False
        self._unlink(node)
        return True

    def remove_all(self, values: Iterable[int]) -> bool:
        """Удаление всех вхождений каждой из цифр values."""
        targets = {v for v in values if _is_plain_int(v)}
        return self._remove_where(lambda v: v in targets)

    def retain_all(self, values: Iterable[int]) -> bool:
        """Удаление всех цифр, не входящих в values."""
        keep = {v for v in values if _is_plain_int(v)}
        return self._remove_where(lambda v: v not in keep)

    def _remove_where(self, predicate: Callable[[int], bool]) -> bool:
        modified = False
        node = self._head
        while node is not None:
            following = node.next
            if predicate(node.value):
                self._unlink(node)
                modified = True
            node = following
        return modified

    def clear(self) -> None:
        self._head = self._tail = None
        self._size = 0
        self._mod_count += 1

    # -------------------------------------------------------------------------
    # Поиск
    # -------------------------------------------------------------------------

    def _find_first(self, value: int) -> Optional[_Node]:
        if not _is_plain_int(value):
            return None
        node = self._head
        while node is not None:
            if node.value == value:
                return node
            node = node.next
        return None

    def contains(self, value: int) -> bool:
        return self._find_first(value) is not None

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def contains_all(self, values: Iterable[int]) -> bool:
        return all(self.contains(v) for v in values)

    def index_of(self, value: int) -> int:
        """Индекс первого вхождения value или -1."""
        if not _is_plain_int(value):
            return -1
        for index, digit in enumerate(self):
            if digit == value:
                return index
        return -1

    def last_index_of(self, value: int) -> int:
        """Индекс последнего вхождения value или -1."""
        if not _is_plain_int(value):
            return -1
        index = self._size - 1
        node = self._tail
        while node is not None:
            if node.value == value:
                return index
            node = node.prev
            index -= 1
        return -1

    # -------------------------------------------------------------------------
    # Перестановки
    # -------------------------------------------------------------------------

    def swap(self, index1: int, index2: int) -> bool:
        """
        Обмен значений двух позиций.

        В отличие от get/set, невалидный индекс не вызывает исключение.

        Returns:
            False если хотя бы один индекс вне 0..size-1, иначе True
        """
        if not (_is_plain_int(index1) and _is_plain_int(index2)):
            return False
        if not (0 <= index1 < self._size and 0 <= index2 < self._size):
            return False
        if index1 == index2:
            return True

        first = self._node_at(index1)
        second = self._node_at(index2)
        first.value, second.value = second.value, first.value
        return True

    def _bubble_sort(self, descending: bool) -> None:
        if self._size <= 1:
            return

        # Пузырёк по соседним узлам; устойчив, O(n²)
        for unsorted in range(self._size - 1, 0, -1):
            swapped = False
            node = self._head
            for _ in range(unsorted):
                following = node.next
                out_of_order = (
                    node.value < following.value if descending else node.value > following.value
                )
                if out_of_order:
                    node.value, following.value = following.value, node.value
                    swapped = True
                node = following
            if not swapped:
                break

    def sort_ascending(self) -> None:
        self._bubble_sort(descending=False)

    def sort_descending(self) -> None:
        self._bubble_sort(descending=True)

    def shift_left(self) -> None:
        """
        Циклический сдвиг значений влево: значение головы переходит в хвост.

        Узлы не перемещаются, сдвигаются только хранимые значения.
        """
        if self._size <= 1:
            return

        first = self._head.value
        node = self._head
        while node.next is not None:
            node.value = node.next.value
            node = node.next
        node.value = first

    def shift_right(self) -> None:
        """Циклический сдвиг значений вправо: значение хвоста переходит в голову."""
        if self._size <= 1:
            return

        last = self._tail.value
        node = self._tail
        while node.prev is not None:
            node.value = node.prev.value
            node = node.prev
        node.value = last

    # -------------------------------------------------------------------------
    # Итерация
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[int]:
        expected = self._mod_count
        node = self._head
        while node is not None:
            yield node.value
            if self._mod_count != expected:
                raise RuntimeError("digit chain changed size during iteration")
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        expected = self._mod_count
        node = self._tail
        while node is not None:
            yield node.value
            if self._mod_count != expected:
                raise RuntimeError("digit chain changed size during iteration")
            node = node.prev

    def cursor(self, index: int = 0) -> "DigitCursor":
        """
        Двунаправленный курсор, стоящий перед позицией index.

        Raises:
            ChainIndexError: Если index вне 0..size
        """
        self._check_index(index, self._size)
        return DigitCursor(self, index)

    # -------------------------------------------------------------------------
    # Копии
    # -------------------------------------------------------------------------

    def to_list(self) -> list[int]:
        return list(self)

    def to_array(self) -> list[int]:
        """Новый список цифр длины size (копия, не связанная с цепочкой)."""
        return self.to_list()

    def sub_list(self, from_index: int, to_index: int) -> list[int]:
        """
        Копия цифр в полуинтервале [from_index, to_index).

        Raises:
            ChainIndexError: Если границы вне 0..size или from_index > to_index
        """
        if from_index < 0 or to_index > self._size or from_index > to_index:
            raise ChainIndexError(to_index if to_index > self._size else from_index, self._size)

        result: list[int] = []
        node = self._node_at(from_index) if from_index < self._size else None
        for _ in range(to_index - from_index):
            result.append(node.value)
            node = node.next
        return result

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DigitChain):
            return NotImplemented
        if self._radix != other._radix or self._size != other._size:
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(radix={self._radix.value}, digits={self.to_list()!r})"


# =============================================================================
# CURSOR
# =============================================================================


class DigitCursor:
    """
    Двунаправленный курсор по цепочке.

    Курсор стоит между элементами: next() возвращает элемент справа,
    previous() — слева. Поддерживает замену последнего возвращённого
    элемента (set) и вставку в позицию курсора (add). Удаление через
    курсор не поддерживается.
    """

    def __init__(self, chain: DigitChain, index: int):
        self._chain = chain
        self._index = index
        self._next_node: Optional[_Node] = None if index == chain._size else chain._node_at(index)
        self._last_returned: Optional[_Node] = None
        self._expected_mod_count = chain._mod_count

    def _check_for_comodification(self) -> None:
        if self._chain._mod_count != self._expected_mod_count:
            raise RuntimeError("digit chain changed size outside of the cursor")

    def has_next(self) -> bool:
        return self._index < self._chain._size

    def has_previous(self) -> bool:
        return self._index > 0

    def next_index(self) -> int:
        return self._index

    def previous_index(self) -> int:
        return self._index - 1

    def next(self) -> int:
        """
        Raises:
            StopIteration: Если курсор в конце цепочки
        """
        self._check_for_comodification()
        if not self.has_next():
            raise StopIteration
        node = self._next_node
        self._next_node = node.next
        self._last_returned = node
        self._index += 1
        return node.value

    def previous(self) -> int:
        """
        Raises:
            StopIteration: Если курсор в начале цепочки
        """
        self._check_for_comodification()
        if not self.has_previous():
            raise StopIteration
        node = self._chain._tail if self._next_node is None else self._next_node.prev
        self._next_node = node
        self._last_returned = node
        self._index -= 1
        return node.value

    def set(self, value: int) -> None:
        """
        Замена последнего элемента, возвращённого next()/previous().

        Raises:
            CursorStateError: Если next()/previous() не вызывались после последнего add()
            DigitRangeError: Если value вне 0..radix-1
        """
        self._check_for_comodification()
        if self._last_returned is None:
            raise CursorStateError("set() requires a preceding next() or previous()")
        self._last_returned.value = self._chain._validate_digit(value)

    def add(self, value: int) -> None:
        """
        Вставка цифры в позицию курсора; курсор остаётся после неё.

        Raises:
            DigitRangeError: Если value вне 0..radix-1
        """
        self._check_for_comodification()
        self._chain._link_before(self._next_node, self._chain._validate_digit(value))
        self._index += 1
        self._last_returned = None
        self._expected_mod_count = self._chain._mod_count

    def remove(self) -> None:
        raise UnsupportedOperationError("removal through a digit cursor is not supported")

    def __iter__(self) -> "DigitCursor":
        return self

    def __next__(self) -> int:
        return self.next()
