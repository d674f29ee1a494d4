"""
Lattice Definition Contract

Определение решётки (dict) проверяется в два шага:
1. JSON Schema (lattice.json): структура, типы, ненулевые знаменатель и модуль
2. Pydantic (Lattice.model_validate): инварианты моделей, например high >= low

Ошибки схемы адресуются путём внутри определения, например
"dimensions[2].bounds.modulus", чтобы было видно, какая ось невалидна.
"""

import json
import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from src.core.domain.lattice import Lattice

LOG = logging.getLogger(__name__)

# Каталог со схемами (поставляется как package data)
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

LATTICE_SCHEMA: Final[str] = "lattice"


# =============================================================================
# SCHEMA
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str = LATTICE_SCHEMA, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema (с кэшированием).

    Args:
        schema_name: Имя схемы без расширения
        schema_dir: Каталог со схемами

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-валидацию Draft 2020-12
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

    return schema


def format_error_path(path: Iterable[Any]) -> str:
    """
    Путь ошибки внутри определения: ["dimensions", 2, "ratio"] → "dimensions[2].ratio".

    Пустой путь (ошибка на корне) → "<root>".
    """
    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        else:
            rendered += f".{part}" if rendered else str(part)
    return rendered or "<root>"


# =============================================================================
# VALIDATOR
# =============================================================================


class LatticeDefinitionValidator:
    """
    Валидатор определения решётки против lattice.json.

    Для oneOf-ветвей (ratio, bounds) выбирается наиболее релевантная ошибка
    через jsonschema best_match.
    """

    def __init__(self, schema: Dict[str, Any] | None = None):
        self.schema = schema if schema is not None else load_schema(LATTICE_SCHEMA)
        self._validator = Draft202012Validator(self.schema)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def errors(self, data: Dict[str, Any]) -> list[str]:
        """
        Все ошибки в виде "путь: сообщение", отсортированные по пути.

        Returns:
            Пустой список, если определение валидно
        """
        found = sorted(self._validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        return [f"{format_error_path(e.absolute_path)}: {e.message}" for e in found]

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантная ошибка схемы
        """
        error = best_match(self._validator.iter_errors(data))
        if error is not None:
            LOG.debug(
                "Lattice definition rejected at %s: %s",
                format_error_path(error.absolute_path),
                error.message,
            )
            raise error


@lru_cache(maxsize=1)
def _lattice_validator() -> LatticeDefinitionValidator:
    return LatticeDefinitionValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_lattice_definition(data: Dict[str, Any]) -> None:
    """
    Валидация определения решётки по схеме.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _lattice_validator().validate(data)


def build_lattice(data: Dict[str, Any]) -> Lattice:
    """
    Построение Lattice из определения.

    Args:
        data: Определение решётки

    Returns:
        Immutable Lattice

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если нарушены инварианты моделей
            (в том числе нецелые части ratio вроде 3.0)
    """
    validate_lattice_definition(data)
    lattice = Lattice.model_validate(data)
    LOG.debug(
        "Built %d-dimensional lattice from definition (bounds: %s)",
        len(lattice),
        ", ".join(d.bounds.kind for d in lattice.dimensions) or "none",
    )
    return lattice
