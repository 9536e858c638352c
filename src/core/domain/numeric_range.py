"""
NumericRange — Замкнутый числовой интервал [lower_bound, upper_bound]

Immutable Pydantic модель, которая ведёт себя как множество чисел:
- has(x) / `x in r` — проверка принадлежности
- str(r) — запись в нотации множества: { x | L ≤ x ≤ U }
- make_cursor() — независимый cursor по целым числам интервала

Порядок границ не проверяется: при lower_bound > upper_bound интервал
пустой и cursor сразу возвращает терминальный Step.
"""

import math
from numbers import Real
from typing import Any, Final, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator

from src.core.iteration.protocol import DONE, Step

# Шаг обхода целых чисел интервала
RANGE_STEP: Final[int] = 1

# Шаблон строкового представления (нотация множества)
SET_BUILDER_TEMPLATE: Final[str] = "{{ x | {lower} ≤ x ≤ {upper} }}"

Bound = Union[StrictInt, StrictFloat]


# =============================================================================
# CURSOR
# =============================================================================


class RangeCursor:
    """
    Cursor по целым числам интервала.

    Хранит только текущую позицию и верхний предел, состояние NumericRange
    не затрагивает. Позиция стартует с ceil(lower_bound), предел равен
    upper_bound без округления.
    """

    __slots__ = ("_position", "_limit")

    def __init__(self, start: int, limit: Union[int, float]):
        self._position = start
        self._limit = limit

    def next_step(self) -> Step:
        if self._position > self._limit:
            return DONE
        value = self._position
        self._position += RANGE_STEP
        return Step.of(value)

    def make_cursor(self) -> "RangeCursor":
        return self

    def __repr__(self) -> str:
        return f"RangeCursor(position={self._position}, limit={self._limit})"


# =============================================================================
# NUMERIC RANGE MODEL
# =============================================================================


class NumericRange(BaseModel):
    """
    Замкнутый интервал вещественных чисел.

    Immutable модель (frozen=True): границы задаются один раз при создании.
    Принимает границы позиционно (`NumericRange(1, 10)`) или по имени.
    """

    lower_bound: Bound = Field(..., description="Нижняя граница (включительно)")
    upper_bound: Bound = Field(..., description="Верхняя граница (включительно)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, *args: Any, **data: Any):
        if len(args) > 2:
            raise TypeError(f"NumericRange takes at most 2 positional bounds, got {len(args)}")
        for name, value in zip(("lower_bound", "upper_bound"), args):
            if name in data:
                raise TypeError(f"NumericRange got multiple values for '{name}'")
            data[name] = value
        super().__init__(**data)

    @field_validator("lower_bound", "upper_bound")
    @classmethod
    def validate_finite(cls, v: Union[int, float]) -> Union[int, float]:
        """Границы должны быть конечными (NaN/Inf ломают ceil и сравнения)."""
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError(f"range bound must be a finite number, got {v}")
        return v

    def has(self, x: Any) -> bool:
        """
        Проверка принадлежности интервалу.

        Для нечислового x возвращает False (не exception). bool числом
        не считается.

        Examples:
            >>> NumericRange(1, 10).has(10)
            True
            >>> NumericRange(1, 10).has("5")
            False
        """
        if isinstance(x, bool) or not isinstance(x, Real):
            return False
        return self.lower_bound <= x <= self.upper_bound

    def __contains__(self, x: Any) -> bool:
        return self.has(x)

    def make_cursor(self) -> RangeCursor:
        """Новый независимый cursor: ceil(lower_bound), +1, ... пока <= upper_bound."""
        return RangeCursor(math.ceil(self.lower_bound), self.upper_bound)

    @property
    def is_empty(self) -> bool:
        """True если интервал не содержит ни одного целого числа."""
        return math.ceil(self.lower_bound) > self.upper_bound

    def __str__(self) -> str:
        return SET_BUILDER_TEMPLATE.format(lower=self.lower_bound, upper=self.upper_bound)
