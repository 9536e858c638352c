"""
Contract Validation Module

Модуль для валидации JSON контрактов (NumericRange).
"""

from .validators import (
    ContractValidator,
    NumericRangeValidator,
    SchemaLoader,
    numeric_range_from_contract,
    validate_numeric_range,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumericRangeValidator",
    # Functions
    "validate_numeric_range",
    "numeric_range_from_contract",
]
