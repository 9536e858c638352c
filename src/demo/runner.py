"""
Demo Runner — демонстрация iteration primitives на фиксированных входных данных

Воспроизводит демонстрационный вывод:
- find_all по массиву
- значение счётчика после N вызовов
- обход NumericRange и его строковая запись
- ленивое отображение NumericRange (квадраты)

Результаты пишутся в logger, core модули сами ничего не логируют.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from src.core.domain.numeric_range import NumericRange
from src.core.iteration import collect, lazy_map
from src.core.sequences import UniqueCounter, find_all
from src.demo.logger import logger


@dataclass(frozen=True)
class DemoConfig:
    """Входные данные демонстрации."""

    search_items: Tuple[Any, ...] = (0, 1, 2, 1, 0)
    search_value: Any = 1
    counter_calls: int = 4
    range_bounds: Tuple[float, float] = (1, 10)
    signed_range_bounds: Tuple[float, float] = (-2, 2)


@dataclass(frozen=True)
class DemoReport:
    """Результаты демонстрации."""

    found_indexes: List[int]
    counter_value: int
    range_display: str
    range_values: List[int]
    signed_range_values: List[int]
    squared_values: List[int]
    notes: List[str] = field(default_factory=list)

    def lines(self) -> List[str]:
        return [
            f"find_all -> {self.found_indexes}",
            f"unique_integer.counter -> {self.counter_value}",
            f"range -> {self.range_display}",
            f"collect(range) -> {self.range_values}",
            f"collect(signed range) -> {self.signed_range_values}",
            f"collect(lazy_map(range, x * x)) -> {self.squared_values}",
            *self.notes,
        ]


def _square(x: int) -> int:
    return x * x


def run_demo(config: Optional[DemoConfig] = None) -> DemoReport:
    """
    Выполнение демонстрации.

    Счётчик создаётся заново, чтобы результат не зависел от общего
    unique_integer.
    """
    config = config or DemoConfig()

    counter = UniqueCounter()
    for _ in range(config.counter_calls):
        counter()

    numeric_range = NumericRange(*config.range_bounds)
    signed_range = NumericRange(*config.signed_range_bounds)

    notes: List[str] = []
    if numeric_range.is_empty:
        notes.append(f"{numeric_range} contains no integers")

    return DemoReport(
        found_indexes=find_all(list(config.search_items), config.search_value),
        counter_value=counter.counter,
        range_display=str(numeric_range),
        range_values=collect(numeric_range),
        signed_range_values=collect(signed_range),
        squared_values=collect(lazy_map(numeric_range, _square)),
        notes=notes,
    )


def main(
    config: Optional[DemoConfig] = None,
    log: Optional[logging.Logger] = None,
) -> int:
    """
    Точка входа консольного скрипта.

    Args:
        config: Входные данные (по умолчанию DemoConfig())
        log: Logger для вывода (по умолчанию project logger)

    Returns:
        Exit code (0)
    """
    log = log or logger
    report = run_demo(config)
    for line in report.lines():
        log.info(line)
    return 0
