"""
Тесты для контракта SequenceProducer / Cursor

Покрывает:
- Step и терминальный сигнал DONE
- is_producer / require_producer / open_cursor
- collect / iterate
- from_iterable адаптер
"""

import pytest

from src.core.iteration import (
    DONE,
    IterableProducer,
    NonConformingProducer,
    Step,
    collect,
    from_iterable,
    is_producer,
    iterate,
    open_cursor,
    require_producer,
)


class _BrokenProducer:
    """make_cursor() возвращает объект без next_step."""

    def make_cursor(self):
        return object()


class _ResurrectingCursor:
    """Некорректный cursor: после done снова выдаёт значения."""

    def __init__(self):
        self._calls = 0

    def next_step(self):
        self._calls += 1
        if self._calls == 2:
            return DONE
        return Step.of(self._calls)

    def make_cursor(self):
        return self


# =============================================================================
# STEP
# =============================================================================


class TestStep:
    """Тесты Step"""

    def test_value_step(self) -> None:
        step = Step.of(42)
        assert step.value == 42
        assert step.done is False

    def test_done_step(self) -> None:
        assert DONE.done is True
        assert DONE.value is None

    def test_none_is_a_valid_value(self) -> None:
        """None как значение не путается с done"""
        assert collect(from_iterable([None, None])) == [None, None]

    def test_step_immutable(self) -> None:
        with pytest.raises(AttributeError):
            DONE.done = False


# =============================================================================
# CAPABILITY CHECKS
# =============================================================================


class TestCapability:
    """Тесты проверки capability"""

    @pytest.mark.parametrize("value", [[1, 2], (1,), "abc", 42, None, object()])
    def test_plain_values_are_not_producers(self, value) -> None:
        assert is_producer(value) is False
        with pytest.raises(NonConformingProducer):
            require_producer(value)

    def test_non_callable_make_cursor(self) -> None:
        class Fake:
            make_cursor = 5

        assert is_producer(Fake()) is False

    def test_producer_class_is_not_a_producer(self) -> None:
        """Класс с make_cursor не является producer, только его экземпляры"""
        assert is_producer(IterableProducer) is False
        with pytest.raises(NonConformingProducer):
            require_producer(IterableProducer)
        with pytest.raises(NonConformingProducer):
            collect(IterableProducer)

    def test_error_is_type_error(self) -> None:
        with pytest.raises(TypeError) as exc_info:
            require_producer([1, 2, 3])
        assert "list" in str(exc_info.value)
        assert exc_info.value.capability == "make_cursor"

    def test_producer_returning_non_cursor(self) -> None:
        with pytest.raises(NonConformingProducer) as exc_info:
            open_cursor(_BrokenProducer())
        assert exc_info.value.capability == "next_step"


# =============================================================================
# CONSUMERS
# =============================================================================


class TestConsumers:
    """Тесты collect / iterate"""

    def test_collect_preserves_order(self) -> None:
        assert collect(from_iterable([3, 1, 2])) == [3, 1, 2]

    def test_collect_empty(self) -> None:
        assert collect(from_iterable([])) == []

    def test_collect_rejects_non_producer(self) -> None:
        with pytest.raises(NonConformingProducer):
            collect([1, 2, 3])

    def test_iterate_fails_at_call_not_at_first_next(self) -> None:
        """NonConformingProducer поднимается сразу при вызове iterate()"""
        with pytest.raises(NonConformingProducer):
            iterate(42)

    def test_iterate_is_lazy(self) -> None:
        pulled = []

        def source():
            for i in range(3):
                pulled.append(i)
                yield i

        it = iterate(from_iterable(source()))
        assert pulled == []
        assert next(it) == 0
        assert pulled == [0]

    def test_iterate_stops_at_first_done(self) -> None:
        """Обход останавливается на первом done, даже если cursor 'оживает'"""
        assert list(iterate(_ResurrectingCursor())) == [1]


# =============================================================================
# ITERABLE ADAPTER
# =============================================================================


class TestFromIterable:
    """Тесты адаптера from_iterable"""

    def test_list_cursors_independent(self) -> None:
        producer = from_iterable([1, 2, 3])
        a = producer.make_cursor()
        b = producer.make_cursor()
        a.next_step()
        a.next_step()
        assert b.next_step().value == 1
        assert a.next_step().value == 3

    def test_generator_is_single_pass(self) -> None:
        producer = from_iterable(x for x in range(3))
        assert collect(producer) == [0, 1, 2]
        assert collect(producer) == []

    def test_exhausted_cursor_stays_done(self) -> None:
        cursor = from_iterable([1]).make_cursor()
        assert cursor.next_step().value == 1
        assert cursor.next_step().done
        assert cursor.next_step().done

    def test_cursor_is_its_own_producer(self) -> None:
        cursor = from_iterable("ab").make_cursor()
        assert cursor.make_cursor() is cursor

    def test_rejects_non_iterable(self) -> None:
        with pytest.raises(TypeError):
            from_iterable(42)

    def test_returns_iterable_producer(self) -> None:
        assert isinstance(from_iterable(range(2)), IterableProducer)
        assert is_producer(from_iterable(range(2)))
