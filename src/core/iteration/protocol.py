"""
Sequence Protocol — явный контракт итерации

Два интерфейса, через которые компоненты обмениваются последовательностями:
- SequenceProducer: make_cursor() -> Cursor (новый или memoized cursor)
- Cursor: next_step() -> Step (значение или терминальный сигнал)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После Step(done=True) cursor всегда возвращает Step(done=True)
2. Cursor сам является SequenceProducer (make_cursor() возвращает self)
3. Потребитель может бросить cursor в любой момент, ресурсов он не держит
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonConformingProducer(TypeError):
    """
    Значение не реализует контракт SequenceProducer (или Cursor).

    Поднимается сразу в точке запроса cursor, а не при первом next_step().
    """

    def __init__(self, value: Any, capability: str = "make_cursor"):
        self.value = value
        self.capability = capability
        super().__init__(
            f"{type(value).__name__} object does not provide a callable "
            f"'{capability}' (not a sequence producer)"
        )


# =============================================================================
# STEP
# =============================================================================


@dataclass(frozen=True)
class Step(Generic[T]):
    """Результат одного next_step(): значение или терминальный сигнал."""

    value: Any = None
    done: bool = False

    @classmethod
    def of(cls, value: T) -> "Step[T]":
        return cls(value=value, done=False)


# Терминальный сигнал (общий экземпляр, Step immutable)
DONE: Step = Step(done=True)


# =============================================================================
# PROTOCOLS
# =============================================================================


@runtime_checkable
class Cursor(Protocol[T_co]):
    """Однопроходный cursor с явным продвижением."""

    def next_step(self) -> Step: ...

    def make_cursor(self) -> "Cursor[T_co]": ...


@runtime_checkable
class SequenceProducer(Protocol[T_co]):
    """Всё, что умеет выдавать Cursor."""

    def make_cursor(self) -> Cursor[T_co]: ...


# =============================================================================
# CAPABILITY CHECKS
# =============================================================================


def is_producer(value: Any) -> bool:
    """
    Проверка capability SequenceProducer без exception.

    Examples:
        >>> is_producer([1, 2, 3])
        False
        >>> is_producer(from_iterable([1, 2, 3]))
        True
        >>> is_producer(IterableProducer)
        False
    """
    # Класс (а не экземпляр) несёт make_cursor как несвязанную функцию
    if isinstance(value, type):
        return False
    return callable(getattr(value, "make_cursor", None))


def require_producer(value: Any) -> None:
    """
    Fail-fast проверка capability SequenceProducer.

    Raises:
        NonConformingProducer: Если у value нет вызываемого make_cursor
    """
    if not is_producer(value):
        raise NonConformingProducer(value)


def open_cursor(producer: Any) -> Cursor:
    """
    Запрос cursor у producer с проверкой обоих контрактов.

    Args:
        producer: Объект с make_cursor()

    Returns:
        Cursor, полученный от producer

    Raises:
        NonConformingProducer: Если producer или полученный cursor не соответствуют контракту
    """
    require_producer(producer)
    cursor = producer.make_cursor()
    if not callable(getattr(cursor, "next_step", None)):
        raise NonConformingProducer(cursor, capability="next_step")
    return cursor


# =============================================================================
# CONSUMERS
# =============================================================================


def iterate(producer: Any) -> Iterator[Any]:
    """
    Обход одного cursor как обычного Python iterator.

    Cursor запрашивается сразу при вызове (не при первом next()), поэтому
    NonConformingProducer поднимается в точке вызова.
    """
    cursor = open_cursor(producer)
    return _drain(cursor)


def _drain(cursor: Cursor) -> Iterator[Any]:
    while True:
        step = cursor.next_step()
        if step.done:
            return
        yield step.value


def collect(producer: Any) -> List[Any]:
    """
    Линеаризация producer в список (все значения одного cursor, по порядку).

    Examples:
        >>> collect(from_iterable("abc"))
        ['a', 'b', 'c']
    """
    return list(iterate(producer))


# =============================================================================
# ITERABLE ADAPTER
# =============================================================================


class IterableCursor:
    """Cursor поверх Python iterator."""

    __slots__ = ("_iterator", "_exhausted")

    def __init__(self, iterator: Iterator[Any]):
        self._iterator = iterator
        self._exhausted = False

    def next_step(self) -> Step:
        if self._exhausted:
            return DONE
        try:
            value = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return DONE
        return Step.of(value)

    def make_cursor(self) -> "IterableCursor":
        return self


class IterableProducer:
    """
    SequenceProducer поверх произвольного Python iterable.

    Каждый make_cursor() вызывает iter() заново: для list/tuple/range cursors
    независимы, для одноразовых iterator'ов (generator) они делят позицию.
    """

    __slots__ = ("_iterable",)

    def __init__(self, iterable: Iterable[Any]):
        self._iterable = iterable

    def make_cursor(self) -> IterableCursor:
        return IterableCursor(iter(self._iterable))

    def __repr__(self) -> str:
        return f"IterableProducer({self._iterable!r})"


def from_iterable(iterable: Iterable[Any]) -> IterableProducer:
    """
    Адаптер Python iterable → SequenceProducer.

    Raises:
        TypeError: Если значение не iterable
    """
    if not callable(getattr(iterable, "__iter__", None)):
        raise TypeError(f"{type(iterable).__name__} object is not iterable")
    return IterableProducer(iterable)


# Сигнатура transform для lazy_map и аналогичных комбинаторов
Transform = Callable[[Any], Any]
