"""
UniqueCounter — генератор уникальных целых чисел

Каждый вызов возвращает текущее значение счётчика и увеличивает его.
Счётчик открыт как атрибут `counter`, его можно прочитать или сбросить.

Счётчик не является SequenceProducer: последовательность бесконечна
и общая для всех потребителей, collect() на ней не завершился бы.
"""

from typing import Final

COUNTER_START_DEFAULT: Final[int] = 0


class UniqueCounter:
    """
    Stateful счётчик: counter() → текущее значение, затем +1.

    Examples:
        >>> c = UniqueCounter()
        >>> c(), c(), c()
        (0, 1, 2)
        >>> c.counter
        3
    """

    def __init__(self, start: int = COUNTER_START_DEFAULT):
        if isinstance(start, bool) or not isinstance(start, int):
            raise TypeError(f"start must be an int, got {type(start).__name__}")
        self.counter = start

    def __call__(self) -> int:
        value = self.counter
        self.counter += 1
        return value

    def __repr__(self) -> str:
        return f"UniqueCounter(counter={self.counter})"


# Общий экземпляр уровня модуля
unique_integer = UniqueCounter()
