"""
JSON Schema Contract Validators

Модуль для валидации JSON данных на границе системы согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (поставляются вместе с пакетом, каталог schema/):
- probability_request.json — параметры вычисления
- probability_result.json — точный результат
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы ищутся в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'probability_result')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

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

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ProbabilityRequestValidator(ContractValidator):
    """Валидатор для probability_request контракта."""

    def __init__(self):
        super().__init__("probability_request")


class ProbabilityResultValidator(ContractValidator):
    """Валидатор для probability_result контракта."""

    def __init__(self):
        super().__init__("probability_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_probability_request(data: Dict[str, Any]) -> None:
    """
    Валидация параметров вычисления.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    ProbabilityRequestValidator().validate(data)


def validate_probability_result(data: Dict[str, Any]) -> None:
    """
    Валидация результата вычисления.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    ProbabilityResultValidator().validate(data)
