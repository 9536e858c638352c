"""
Sequence utilities: линейный поиск и генератор уникальных чисел.
"""

from src.core.sequences.counter import (
    COUNTER_START_DEFAULT,
    UniqueCounter,
    unique_integer,
)
from src.core.sequences.search import find_all

__all__ = [
    "find_all",
    "COUNTER_START_DEFAULT",
    "UniqueCounter",
    "unique_integer",
]
