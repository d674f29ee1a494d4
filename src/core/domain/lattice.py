"""
Lattice — N-мерная решётка точных дробей

Ось i задаётся генератором (Ratio) и политикой границ. Значение в точке:

    at(c) = Π ratio_i ** resolve_index(bounds_i, c_i)

Координаты и оси сопоставляются позиционно до более короткой
последовательности: лишние координаты или оси игнорируются.
Результат НЕ нормализуется.

Immutable Pydantic модели (frozen=True).
"""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.domain.bounds import BoundPolicy, Unbounded, resolve_index
from src.core.math.ratio import UNITY, Ratio


# =============================================================================
# LATTICE DIMENSION
# =============================================================================


class LatticeDimension(BaseModel):
    """
    Ось решётки: генератор + политика границ.

    ratio принимает Ratio, пару (numerator, denominator)
    или mapping {"numerator": ..., "denominator": ...}.
    """

    ratio: Ratio = Field(..., description="Генератор оси")
    bounds: BoundPolicy = Field(default_factory=Unbounded, description="Политика границ")

    model_config = {"frozen": True}

    @field_validator("ratio", mode="before")
    @classmethod
    def coerce_ratio(cls, v: Any) -> Ratio:
        """
        Приведение ratio к Ratio.

        Части дроби только int: 3.0 отклоняется так же, как "3/2".
        Ошибки Ratio переводятся в ValueError, чтобы Pydantic вернул
        ValidationError.
        """
        try:
            return Ratio.from_pair(v)
        except (TypeError, KeyError) as e:
            raise ValueError(f"invalid ratio {v!r}: {e}") from e

    def resolve_index(self, index: int) -> int:
        """Разрешённый показатель степени для сырой координаты."""
        return resolve_index(self.bounds, index)

    def at(self, index: int) -> Ratio:
        """Вклад оси: ratio ** resolve_index(index)."""
        return self.ratio.pow(self.resolve_index(index))


# =============================================================================
# LATTICE
# =============================================================================


class Lattice(BaseModel):
    """
    Решётка: упорядоченный набор осей.

    Размерность = len(lattice). После создания не изменяется.
    """

    dimensions: tuple[LatticeDimension, ...] = Field(..., description="Оси решётки")

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.dimensions)

    def resolve(self, coordinates: Sequence[int]) -> tuple[int, ...]:
        """
        Разрешённые показатели степени для каждой сопоставленной оси.

        Args:
            coordinates: Сырые координаты

        Returns:
            Кортеж длины min(len(lattice), len(coordinates))
        """
        return tuple(
            dimension.resolve_index(index)
            for dimension, index in zip(self.dimensions, coordinates)
        )

    def at(self, coordinates: Sequence[int]) -> Ratio:
        """
        Точное значение решётки в точке.

        Args:
            coordinates: Сырые координаты (по одной на ось)

        Returns:
            Произведение вкладов осей, начиная с 1/1 (без нормализации)

        Examples:
            >>> lattice = Lattice(dimensions=[LatticeDimension(ratio=(3, 2))])
            >>> lattice.at([-1])
            Ratio(4, 3)
        """
        result = UNITY
        for dimension, index in zip(self.dimensions, coordinates):
            result = result * dimension.at(index)
        return result
