"""
Domain модели и value objects.

Содержит NumericRange и cursor по его целым числам.
"""

from src.core.domain.numeric_range import (
    RANGE_STEP,
    SET_BUILDER_TEMPLATE,
    NumericRange,
    RangeCursor,
)

__all__ = [
    "RANGE_STEP",
    "SET_BUILDER_TEMPLATE",
    "NumericRange",
    "RangeCursor",
]
