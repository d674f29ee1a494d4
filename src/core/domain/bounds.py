"""
Bounds — Политики границ осей решётки

Сырая целочисленная координата оси проходит через политику границ до
возведения генератора оси в степень.

Политики (tagged union, дискриминатор "kind"):
- Unbounded:    индекс используется как есть
- ZeroBounded:  знакосохраняющий остаток по модулю n
                (n > 0 → [0, n), n < 0 → (n, 0])
- RangeBounded: циклический перенос в окно [low, high]

Immutable Pydantic модели (frozen=True).
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРИМИТИВЫ
# =============================================================================


def truncated_rem(a: int, b: int) -> int:
    """
    Остаток с усечением к нулю (знак делимого).

    Отличается от Python `%` (знак делителя) для отрицательных операндов.

    Examples:
        >>> truncated_rem(-1, 6)
        -1
        >>> truncated_rem(3, -2)
        1
    """
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def sign_preserving_mod(a: int, b: int) -> int:
    """
    Знакосохраняющий модуль: ((a rem b) + b) rem b.

    Результат имеет знак b:
    - b > 0 → [0, b)
    - b < 0 → (b, 0]

    Examples:
        >>> sign_preserving_mod(-1, 2)
        1
        >>> sign_preserving_mod(1, -2)
        -1
    """
    return truncated_rem(truncated_rem(a, b) + b, b)


# =============================================================================
# BOUND POLICIES
# =============================================================================


class Unbounded(BaseModel):
    """Ось без границ: индекс не изменяется."""

    kind: Literal["unbounded"] = "unbounded"

    model_config = {"frozen": True}


class ZeroBounded(BaseModel):
    """
    Ось, замкнутая по модулю от нуля.

    Знак modulus задаёт знак разрешённых индексов.
    """

    kind: Literal["zero_bounded"] = "zero_bounded"
    modulus: int = Field(..., description="Модуль (ненулевой, знак задаёт окно)")

    model_config = {"frozen": True}

    @field_validator("modulus")
    @classmethod
    def validate_modulus_non_zero(cls, v: int) -> int:
        """Модуль 0 даёт деление на ноль."""
        if v == 0:
            raise ValueError("modulus must be non-zero")
        return v


class RangeBounded(BaseModel):
    """
    Ось, замкнутая в диапазоне [low, high] (включительно).

    ВАЖНО: смещение берётся как |low| независимо от знака high,
    поэтому для индексов далеко за окном выбирается конкретный
    представитель класса вычетов:
        span = high - low + 1
        resolved = sign_preserving_mod(index + |low|, span) - |low|
    """

    kind: Literal["range_bounded"] = "range_bounded"
    low: int = Field(..., description="Нижняя граница (включительно)")
    high: int = Field(..., description="Верхняя граница (включительно)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_range_order(self) -> "RangeBounded":
        """Проверка high >= low (пустой или перевёрнутый диапазон запрещён)."""
        if self.high < self.low:
            raise ValueError(f"high ({self.high}) must be >= low ({self.low})")
        return self

    @property
    def span(self) -> int:
        """Количество индексов в окне."""
        return self.high - self.low + 1


BoundPolicy = Annotated[
    Union[Unbounded, ZeroBounded, RangeBounded],
    Field(discriminator="kind"),
]


# =============================================================================
# РАЗРЕШЕНИЕ ИНДЕКСА
# =============================================================================


def resolve_index(bounds: Unbounded | ZeroBounded | RangeBounded, index: int) -> int:
    """
    Приведение сырой координаты к показателю степени согласно политике.

    Args:
        bounds: Политика границ оси
        index: Сырая координата

    Returns:
        Разрешённый показатель степени

    Examples:
        >>> resolve_index(ZeroBounded(modulus=2), -1)
        1
        >>> resolve_index(RangeBounded(low=-1, high=2), 3)
        -1
    """
    if isinstance(bounds, Unbounded):
        return index

    if isinstance(bounds, ZeroBounded):
        return sign_preserving_mod(index, bounds.modulus)

    if isinstance(bounds, RangeBounded):
        offset = abs(bounds.low)
        return sign_preserving_mod(index + offset, bounds.span) - offset

    raise TypeError(f"Unknown bound policy: {bounds!r}")
