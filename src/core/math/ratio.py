"""
Ratio — Точная рациональная арифметика

Неизменяемая дробь numerator/denominator, используемая как генератор осей
решётки (см. src.core.domain.lattice).

Модуль обеспечивает:
- Сокращение дроби при каждом создании (по положительному НОД)
- Умножение и деление без потери точности
- Октавную нормализацию в окно [1, 2)
- Complement: normalize(2 / r)
- Целочисленное возведение в степень, включая отрицательные показатели

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. numerator и denominator взаимно просты после создания
2. Знаки не переносятся в числитель: Ratio(3, -6) == Ratio(1, -2)
3. Отрицательная степень определяется через complement, НЕ через обратную дробь:
   r ** -n == r.complement() ** n
4. Все операции возвращают новые экземпляры, мутаций нет
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Период октавной нормализации: значения приводятся в [1, OCTAVE)
OCTAVE: Final[int] = 2


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RatioDomainViolation(ValueError):
    """
    Нарушение домена рациональной арифметики.

    Возникает при:
    - нулевом знаменателе (в том числе при делении на нулевую дробь)
    - нормализации неположительной дроби (цикл удвоения не завершается)
    """


# =============================================================================
# RATIO
# =============================================================================


def _reduce(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Сокращение пары на положительный НОД.

    Знаки исходной пары сохраняются как есть.

    Examples:
        >>> _reduce(3, 6)
        (1, 2)
        >>> _reduce(-3, 6)
        (-1, 2)
        >>> _reduce(3, -6)
        (1, -2)
    """
    divisor = math.gcd(numerator, denominator)
    return numerator // divisor, denominator // divisor


@dataclass(frozen=True)
class Ratio:
    """
    Точная дробь numerator/denominator.

    Immutable (frozen=True): все операции создают новый экземпляр.
    Сокращение выполняется в __post_init__, поэтому равенство и hash
    работают по сокращённой паре.
    """

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if isinstance(self.numerator, bool) or not isinstance(self.numerator, int):
            raise TypeError(f"numerator must be int, got {self.numerator!r}")
        if isinstance(self.denominator, bool) or not isinstance(self.denominator, int):
            raise TypeError(f"denominator must be int, got {self.denominator!r}")
        if self.denominator == 0:
            raise RatioDomainViolation(
                f"Ratio denominator must be non-zero, got {self.numerator}/0"
            )

        numerator, denominator = _reduce(self.numerator, self.denominator)
        object.__setattr__(self, "numerator", numerator)
        object.__setattr__(self, "denominator", denominator)

    @classmethod
    def from_pair(cls, value: Any) -> "Ratio":
        """
        Приведение внешнего представления к Ratio.

        Args:
            value: Ratio, пара (numerator, denominator) или mapping
                с ключами "numerator"/"denominator"

        Returns:
            Ratio

        Raises:
            TypeError: Если представление не распознано
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(value["numerator"], value["denominator"])
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
            return cls(value[0], value[1])
        raise TypeError(f"Cannot interpret {value!r} as a Ratio")

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def multiply(self, other: "Ratio") -> "Ratio":
        """Произведение: (a.n * b.n) / (a.d * b.d)"""
        return Ratio(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: "Ratio") -> "Ratio":
        """
        Частное: (a.n * b.d) / (b.n * a.d)

        Raises:
            RatioDomainViolation: Если other равен нулю
        """
        return Ratio(
            self.numerator * other.denominator,
            other.numerator * self.denominator,
        )

    def to_float(self) -> float:
        """
        Приближённое вещественное значение.

        ВАЖНО: только для отображения и грубых оценок, не источник истины.
        """
        return self.numerator / self.denominator

    def is_positive(self) -> bool:
        """True если дробь строго больше нуля (с учётом знаков обеих частей)"""
        return self.numerator != 0 and (self.numerator > 0) == (self.denominator > 0)

    def normalize(self) -> "Ratio":
        """
        Октавная нормализация в окно [1, 2).

        Алгоритм:
            пока value >= 2: denominator *= 2
            пока value < 1:  numerator *= 2

        Сравнения выполняются точно на целых числах (по модулю обеих частей),
        без округления через float.

        Returns:
            Сокращённая дробь в [1, 2)

        Raises:
            RatioDomainViolation: Если дробь неположительная

        Examples:
            >>> Ratio(1, 2).normalize()
            Ratio(1, 1)
            >>> Ratio(9, 4).normalize()
            Ratio(9, 8)
        """
        if not self.is_positive():
            raise RatioDomainViolation(f"Only positive ratios can be normalized, got {self}")

        numerator, denominator = self.numerator, self.denominator

        while abs(numerator) >= OCTAVE * abs(denominator):
            denominator *= OCTAVE
        while abs(numerator) < abs(denominator):
            numerator *= OCTAVE

        return Ratio(numerator, denominator)

    def complement(self) -> "Ratio":
        """
        Октавное дополнение: normalize(2 / r).

        Examples:
            >>> Ratio(3, 2).complement()
            Ratio(4, 3)
        """
        return Ratio(OCTAVE, 1).divide(self).normalize()

    def pow(self, exponent: int) -> "Ratio":
        """
        Целочисленная степень.

        - exponent == 0 → 1/1
        - exponent < 0  → complement() ** -exponent
        - exponent > 0  → n**e / d**e

        Args:
            exponent: Показатель степени

        Returns:
            Новая дробь

        Examples:
            >>> Ratio(3, 2).pow(2)
            Ratio(9, 4)
            >>> Ratio(3, 2).pow(-2)  # (4/3) ** 2, а не (2/3) ** 2
            Ratio(16, 9)
        """
        if exponent == 0:
            return Ratio(1, 1)
        if exponent < 0:
            return self.complement().pow(-exponent)
        return Ratio(self.numerator**exponent, self.denominator**exponent)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __mul__(self, other: object) -> "Ratio":
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "Ratio":
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, exponent: int) -> "Ratio":
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __float__(self) -> float:
        return self.to_float()

    def __repr__(self) -> str:
        return f"Ratio({self.numerator}, {self.denominator})"

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


# =============================================================================
# ФУНКЦИОНАЛЬНЫЙ API
# =============================================================================


def multiply(a: Ratio, b: Ratio) -> Ratio:
    """Произведение двух дробей."""
    return a.multiply(b)


def divide(a: Ratio, b: Ratio) -> Ratio:
    """Частное двух дробей."""
    return a.divide(b)


def normalize(a: Ratio) -> Ratio:
    """Октавная нормализация в [1, 2)."""
    return a.normalize()


def complement(a: Ratio) -> Ratio:
    """Октавное дополнение normalize(2 / a)."""
    return a.complement()


def power(a: Ratio, exponent: int) -> Ratio:
    """Целочисленная степень (отрицательная через complement)."""
    return a.pow(exponent)


# Мультипликативная единица
UNITY: Final[Ratio] = Ratio(1, 1)
