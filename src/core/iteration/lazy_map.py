"""
LazyMap — ленивое отображение последовательности

lazy_map(source, f) возвращает новый SequenceProducer, который применяет f
к каждому значению source в момент запроса (next_step), без буферизации
и без материализации source или результата.

Гарантии:
- порядок и длина выхода совпадают с source 1:1
- cursor source запрашивается ровно один раз на экземпляр LazyMap
- исключение из f пробрасывается из next_step() без изменений
"""

from typing import Any, Optional

from src.core.iteration.protocol import (
    DONE,
    Cursor,
    Step,
    Transform,
    open_cursor,
    require_producer,
)


class MappedCursor:
    """Cursor, который тянет значение из underlying cursor и применяет transform."""

    __slots__ = ("_source", "_transform", "_exhausted")

    def __init__(self, source: Cursor, transform: Transform):
        self._source = source
        self._transform = transform
        self._exhausted = False

    def next_step(self) -> Step:
        if self._exhausted:
            return DONE
        step = self._source.next_step()
        if step.done:
            # done фиксируется, даже если источник потом вернёт значение
            self._exhausted = True
            return step
        return Step.of(self._transform(step.value))

    def make_cursor(self) -> "MappedCursor":
        return self


class LazyMap:
    """
    SequenceProducer, оборачивающий source и transform.

    Cursor source захватывается при первом make_cursor() и дальше
    переиспользуется: повторные make_cursor() возвращают тот же MappedCursor.
    """

    __slots__ = ("_source", "_transform", "_cursor")

    def __init__(self, source: Any, transform: Transform):
        require_producer(source)
        if not callable(transform):
            raise TypeError(f"transform must be callable, got {type(transform).__name__}")
        self._source = source
        self._transform = transform
        self._cursor: Optional[MappedCursor] = None

    def make_cursor(self) -> MappedCursor:
        if self._cursor is None:
            self._cursor = MappedCursor(open_cursor(self._source), self._transform)
        return self._cursor

    def __repr__(self) -> str:
        transform_name = getattr(self._transform, "__name__", repr(self._transform))
        return f"LazyMap({self._source!r}, {transform_name})"


def lazy_map(source: Any, transform: Transform) -> LazyMap:
    """
    Ленивое применение transform к каждому значению source.

    Args:
        source: Любой SequenceProducer (NumericRange, LazyMap, cursor, ...)
        transform: Функция одного аргумента

    Returns:
        LazyMap — SequenceProducer, пригодный для collect/iterate и нового lazy_map

    Raises:
        NonConformingProducer: Если source не SequenceProducer (сразу, не при обходе)
        TypeError: Если transform не вызываемый

    Examples:
        >>> from src.core.domain.numeric_range import NumericRange
        >>> from src.core.iteration.protocol import collect
        >>> collect(lazy_map(NumericRange(1, 5), lambda x: x * x))
        [1, 4, 9, 16, 25]
    """
    return LazyMap(source, transform)
