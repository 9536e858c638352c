"""
JSON Schema Contract Validators

Модуль для валидации JSON представления NumericRange согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema для проверки
соответствия данных схемам.

Схемы:
- numeric_range.json
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.numeric_range import NumericRange


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из package data (src/core/contracts/schema/)
    через importlib.resources, поэтому работает и из установленного wheel.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or resources.files(__package__) / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self):
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'numeric_range')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        """
        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (по умолчанию глобальный)
        """
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Mapping[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError объекты)."""
        return self.validator.iter_errors(data)


class NumericRangeValidator(ContractValidator):
    """Валидатор для numeric_range контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("numeric_range", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_numeric_range(data: Mapping[str, Any]) -> None:
    """
    Валидация numeric_range данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NumericRangeValidator().validate(data)


def numeric_range_from_contract(data: Mapping[str, Any]) -> NumericRange:
    """
    Построение NumericRange из данных контракта.

    Сначала JSON Schema (структура и типы), затем Pydantic (конечность границ).

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если границы не конечны
    """
    validate_numeric_range(data)
    return NumericRange.model_validate(dict(data))
