"""
Тесты для политик границ осей

Проверяет:
1. Остаток с усечением и знакосохраняющий модуль
2. Разрешение индекса для Unbounded / ZeroBounded / RangeBounded
3. Отличие RangeBounded(0, n) от ZeroBounded(n)
4. Валидацию вырожденных политик (modulus=0, high < low)
5. Immutability и дискриминатор kind
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from src.core.domain import (
    BoundPolicy,
    RangeBounded,
    Unbounded,
    ZeroBounded,
    resolve_index,
    sign_preserving_mod,
    truncated_rem,
)

# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРИМИТИВЫ
# =============================================================================


class TestTruncatedRem:
    """Тесты для truncated_rem (знак делимого)"""

    def test_positive_operands(self) -> None:
        assert truncated_rem(7, 3) == 1
        assert truncated_rem(6, 3) == 0

    def test_negative_dividend(self) -> None:
        assert truncated_rem(-7, 3) == -1
        assert truncated_rem(-1, 6) == -1

    def test_negative_divisor(self) -> None:
        assert truncated_rem(7, -3) == 1
        assert truncated_rem(-7, -3) == -1

    def test_differs_from_python_mod(self) -> None:
        assert -7 % 3 == 2
        assert truncated_rem(-7, 3) == -1


class TestSignPreservingMod:
    """Тесты для sign_preserving_mod (знак делителя)"""

    def test_positive_modulus_range(self) -> None:
        for a in range(-10, 11):
            assert 0 <= sign_preserving_mod(a, 4) < 4

    def test_negative_modulus_range(self) -> None:
        for a in range(-10, 11):
            assert -4 < sign_preserving_mod(a, -4) <= 0

    def test_congruence(self) -> None:
        for a in range(-10, 11):
            assert (sign_preserving_mod(a, 5) - a) % 5 == 0


# =============================================================================
# РАЗРЕШЕНИЕ ИНДЕКСА
# =============================================================================


class TestUnbounded:
    """Тесты для Unbounded"""

    def test_identity(self) -> None:
        bounds = Unbounded()
        assert resolve_index(bounds, 0) == 0
        assert resolve_index(bounds, 3) == 3
        assert resolve_index(bounds, -2) == -2

    def test_identity_wide_range(self) -> None:
        bounds = Unbounded()
        for i in range(-100, 101, 7):
            assert resolve_index(bounds, i) == i


class TestZeroBounded:
    """Тесты для ZeroBounded"""

    def test_positive_modulus(self) -> None:
        bounds = ZeroBounded(modulus=2)
        assert resolve_index(bounds, 0) == 0
        assert resolve_index(bounds, 1) == 1
        assert resolve_index(bounds, 3) == 1
        assert resolve_index(bounds, -1) == 1
        assert resolve_index(bounds, -2) == 0

    def test_negative_modulus(self) -> None:
        bounds = ZeroBounded(modulus=-2)
        assert resolve_index(bounds, 0) == 0
        assert resolve_index(bounds, 1) == -1
        assert resolve_index(bounds, 3) == -1
        assert resolve_index(bounds, -2) == 0

    def test_zero_modulus_rejected(self) -> None:
        with pytest.raises(ValidationError, match="modulus must be non-zero"):
            ZeroBounded(modulus=0)


class TestRangeBounded:
    """Тесты для RangeBounded"""

    def test_range_around_zero(self) -> None:
        bounds = RangeBounded(low=-1, high=2)
        assert resolve_index(bounds, 0) == 0
        assert resolve_index(bounds, 1) == 1
        assert resolve_index(bounds, 2) == 2
        assert resolve_index(bounds, 3) == -1
        assert resolve_index(bounds, -2) == 2

    def test_range_from_zero(self) -> None:
        bounds = RangeBounded(low=0, high=2)
        assert resolve_index(bounds, 0) == 0
        assert resolve_index(bounds, 1) == 1
        assert resolve_index(bounds, 2) == 2
        assert resolve_index(bounds, 3) == 0

    def test_range_from_zero_differs_from_zero_bounded(self) -> None:
        """RangeBounded(0, 2) замыкается по 3, ZeroBounded(2) по 2"""
        ranged = RangeBounded(low=0, high=2)
        zeroed = ZeroBounded(modulus=2)
        assert resolve_index(ranged, 2) == 2
        assert resolve_index(zeroed, 2) == 0

    def test_wide_range(self) -> None:
        bounds = RangeBounded(low=-2, high=3)
        assert resolve_index(bounds, 4) == -2
        assert resolve_index(bounds, -3) == 3
        assert resolve_index(bounds, 9) == 3

    def test_in_window_indices_unchanged(self) -> None:
        bounds = RangeBounded(low=-3, high=4)
        for i in range(-3, 5):
            assert resolve_index(bounds, i) == i

    def test_single_point_range(self) -> None:
        bounds = RangeBounded(low=1, high=1)
        assert bounds.span == 1
        for i in (-5, 0, 1, 7):
            assert resolve_index(bounds, i) == -1

    def test_span(self) -> None:
        assert RangeBounded(low=-1, high=2).span == 4

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be >= low"):
            RangeBounded(low=3, high=1)


# =============================================================================
# МОДЕЛИ
# =============================================================================


class TestBoundPolicyModels:
    """Тесты для Pydantic моделей политик"""

    def test_immutable(self) -> None:
        bounds = ZeroBounded(modulus=2)
        with pytest.raises(ValidationError):
            bounds.modulus = 3  # type: ignore[misc]

    def test_discriminated_union_from_dict(self) -> None:
        adapter = TypeAdapter(BoundPolicy)
        assert adapter.validate_python({"kind": "unbounded"}) == Unbounded()
        assert adapter.validate_python({"kind": "zero_bounded", "modulus": 3}) == ZeroBounded(
            modulus=3
        )
        assert adapter.validate_python(
            {"kind": "range_bounded", "low": -1, "high": 2}
        ) == RangeBounded(low=-1, high=2)

    def test_unknown_kind_rejected(self) -> None:
        adapter = TypeAdapter(BoundPolicy)
        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "clamped"})

    def test_unknown_policy_object_rejected(self) -> None:
        with pytest.raises(TypeError, match="Unknown bound policy"):
            resolve_index(object(), 1)  # type: ignore[arg-type]
