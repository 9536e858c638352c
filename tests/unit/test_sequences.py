"""
Тесты для find_all и UniqueCounter
"""

import pytest

from src.core.iteration import NonConformingProducer, collect, is_producer, lazy_map
from src.core.sequences import (
    COUNTER_START_DEFAULT,
    UniqueCounter,
    find_all,
    unique_integer,
)


class TestFindAll:
    """Тесты find_all"""

    def test_basic(self) -> None:
        assert find_all([0, 1, 2, 1, 0], 1) == [1, 3]

    def test_edges(self) -> None:
        assert find_all([0, 1, 2, 1, 0], 0) == [0, 4]

    def test_no_match(self) -> None:
        assert find_all([0, 1, 2], 7) == []

    def test_empty(self) -> None:
        assert find_all([], 1) == []

    def test_all_match(self) -> None:
        assert find_all([5, 5, 5], 5) == [0, 1, 2]

    def test_tuple_input(self) -> None:
        assert find_all(("a", "b", "a"), "a") == [0, 2]

    def test_equality_semantics(self) -> None:
        """Сравнение по ==, поэтому 1 и 1.0 совпадают"""
        assert find_all([1, 1.0, "1"], 1) == [0, 1]

    def test_range_input(self) -> None:
        """range не поддерживает index(value, start), поиск работает и для него"""
        assert find_all(range(5), 1) == [1]
        assert find_all(range(0, 10, 2), 4) == [2]

    def test_str_matches_single_characters(self) -> None:
        """Для строк сравниваются отдельные символы, не подстроки"""
        assert find_all("abcbc", "bc") == []
        assert find_all("abcbc", "c") == [2, 4]

    def test_generator_input(self) -> None:
        assert find_all((x % 3 for x in range(7)), 0) == [0, 3, 6]


class TestUniqueCounter:
    """Тесты UniqueCounter"""

    def test_returns_then_increments(self) -> None:
        counter = UniqueCounter()
        assert counter() == 0
        assert counter() == 1
        assert counter.counter == 2

    def test_four_calls(self) -> None:
        counter = UniqueCounter()
        for _ in range(4):
            counter()
        assert counter.counter == 4

    def test_custom_start(self) -> None:
        counter = UniqueCounter(start=100)
        assert counter() == 100
        assert counter.counter == 101

    def test_default_start(self) -> None:
        assert UniqueCounter().counter == COUNTER_START_DEFAULT

    def test_counter_can_be_reset(self) -> None:
        counter = UniqueCounter()
        counter()
        counter.counter = 0
        assert counter() == 0

    @pytest.mark.parametrize("bad", [1.5, "0", None, True])
    def test_start_must_be_int(self, bad) -> None:
        with pytest.raises(TypeError):
            UniqueCounter(start=bad)

    def test_values_strictly_increasing(self) -> None:
        counter = UniqueCounter()
        values = [counter() for _ in range(10)]
        assert values == sorted(set(values))

    def test_module_instance(self) -> None:
        before = unique_integer.counter
        assert unique_integer() == before
        assert unique_integer.counter == before + 1

    def test_not_a_producer(self) -> None:
        """Бесконечный общий счётчик не выдаётся как SequenceProducer"""
        counter = UniqueCounter()
        assert is_producer(counter) is False
        with pytest.raises(NonConformingProducer):
            collect(counter)
        with pytest.raises(NonConformingProducer):
            lazy_map(counter, abs)
        assert counter.counter == 0
