"""
Тесты для QuadraticPolynomial — многочлен второй степени

Проверяет:
1. Комплексно-сопряжённые и вещественные корни
2. real_roots(): пустой список при Δ < 0, двойной корень дважды
3. has_real_roots() ⇔ b² - 4ac >= 0
4. Эталонное масштабирование комплексных корней (умножение на a)
5. Вырожденный случай a == 0: ±Inf/NaN без исключений
6. Равенство и hash по битовому представлению, immutability
7. Строковое представление
"""

import math

import pytest
from pydantic import ValidationError

from src.core.domain import Complex
from src.polynomials import QuadraticPolynomial


# =============================================================================
# КОРНИ
# =============================================================================


class TestComplexRoots:
    """Тесты complex_roots"""

    def test_conjugate_pair(self) -> None:
        """x² + 3x + 16 = 0 → -1.5 ± 3.7080992435478315i"""
        roots = QuadraticPolynomial(a=1, b=3, c=16).complex_roots()
        assert len(roots) == 2

        assert roots[0].real == pytest.approx(-1.5, abs=1e-6)
        assert roots[0].imag == pytest.approx(3.7080992435478315, abs=1e-6)
        assert roots[1].real == pytest.approx(-1.5, abs=1e-6)
        assert roots[1].imag == pytest.approx(-3.7080992435478315, abs=1e-6)

    def test_pure_imaginary(self) -> None:
        """x² + 1 = 0 → ±i"""
        roots = QuadraticPolynomial(a=1, b=0, c=1).complex_roots()
        assert roots == (Complex(0.0, 1.0), Complex(0.0, -1.0))
        assert roots[0].real == 0.0

    def test_real_roots_as_complex(self) -> None:
        """x² + x - 6 = 0 → 2, -3 (первым (-b + √Δ) / 2a)"""
        roots = QuadraticPolynomial(a=1, b=1, c=-6).complex_roots()
        assert roots == (Complex(2.0, 0.0), Complex(-3.0, 0.0))
        assert roots[0].imag == 0.0

    def test_always_two_values(self) -> None:
        for a, b, c in [(1, 3, 16), (1, 1, -6), (1, -2, 1), (2, 0, 0)]:
            assert len(QuadraticPolynomial(a=a, b=b, c=c).complex_roots()) == 2

    def test_reference_scaling_multiplies_by_a(self) -> None:
        """
        Эталонная запись (-b / 2) * a и sqrt(-Δ) / 2 * a.

        2x² + 4x + 10: Δ = -64 → -4 ± 8i (формула корней дала бы -1 ± 2i).
        """
        roots = QuadraticPolynomial(a=2, b=4, c=10).complex_roots()
        assert roots == (Complex(-4.0, 8.0), Complex(-4.0, -8.0))


class TestRealRoots:
    """Тесты real_roots и has_real_roots"""

    def test_two_real_roots(self) -> None:
        assert QuadraticPolynomial(a=1, b=1, c=-6).real_roots() == [2.0, -3.0]

    def test_no_real_roots(self) -> None:
        assert QuadraticPolynomial(a=1, b=3, c=16).real_roots() == []
        assert QuadraticPolynomial(a=1, b=0, c=1).real_roots() == []

    def test_double_root_listed_twice(self) -> None:
        """(x - 1)² → [1, 1]"""
        assert QuadraticPolynomial(a=1, b=-2, c=1).real_roots() == [1.0, 1.0]

    def test_scaled_leading_coefficient(self) -> None:
        """2x² - 8 = 0 → ±2 (вещественная ветвь делит на 2a)"""
        assert QuadraticPolynomial(a=2, b=0, c=-8).real_roots() == [2.0, -2.0]

    @pytest.mark.parametrize(
        "a, b, c",
        [
            (1, 1, -6),
            (1, 0, 1),
            (1, -2, 1),
            (1, 3, 16),
            (-1, 2, 3),
            (2, 1, 5),
            (0.5, -3, 4.5),
        ],
    )
    def test_has_real_roots_iff_non_negative_discriminant(
        self, a: float, b: float, c: float
    ) -> None:
        poly = QuadraticPolynomial(a=a, b=b, c=c)
        assert poly.discriminant() == b * b - 4 * a * c
        assert poly.has_real_roots() == (b * b - 4 * a * c >= 0)
        assert (len(poly.real_roots()) == 2) == poly.has_real_roots()


class TestDegenerate:
    """a == 0: деление на ноль распространяется как ±Inf/NaN"""

    def test_zero_leading_coefficient_does_not_raise(self) -> None:
        x1, x2 = QuadraticPolynomial(a=0, b=2, c=4).real_roots()
        assert math.isnan(x1)
        assert x2 == -math.inf

    def test_zero_leading_coefficient_complex_roots(self) -> None:
        first, second = QuadraticPolynomial(a=0, b=2, c=4).complex_roots()
        assert math.isnan(first.re)
        assert second.re == -math.inf


# =============================================================================
# РАВЕНСТВО И IMMUTABILITY
# =============================================================================


class TestEquality:
    """Равенство и hash по битам коэффициентов"""

    def test_equal(self) -> None:
        p1 = QuadraticPolynomial(a=1, b=1, c=-6)
        p2 = QuadraticPolynomial(a=1.0, b=1.0, c=-6.0)
        assert p1 == p2
        assert hash(p1) == hash(p2)

    def test_not_equal(self) -> None:
        assert QuadraticPolynomial(a=1, b=1, c=-6) != QuadraticPolynomial(a=1, b=1, c=-6.0000001)

    def test_signed_zero_differs(self) -> None:
        """0.0 и -0.0 различаются по битам"""
        assert QuadraticPolynomial(a=1, b=0.0, c=1) != QuadraticPolynomial(a=1, b=-0.0, c=1)

    def test_nan_equals_nan(self) -> None:
        """Канонический NaN: равенство по битам"""
        p1 = QuadraticPolynomial(a=1, b=math.nan, c=1)
        p2 = QuadraticPolynomial(a=1, b=math.nan, c=1)
        assert p1 == p2
        assert len({p1, p2}) == 1

    def test_immutable(self) -> None:
        """QuadraticPolynomial должен быть immutable (frozen=True)"""
        poly = QuadraticPolynomial(a=1, b=1, c=-6)
        with pytest.raises(ValidationError):
            poly.a = 2.0  # type: ignore


# =============================================================================
# СТРОКОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


class TestStr:
    """Тесты format/__str__"""

    def test_format(self) -> None:
        assert QuadraticPolynomial(a=1, b=1, c=-6).format(0) == "x² + x - 6"
        assert QuadraticPolynomial(a=1, b=0, c=1).format(0) == "x² + 1"

    def test_str_uses_four_places(self) -> None:
        assert str(QuadraticPolynomial(a=1, b=-4, c=29)) == "x² - 4x + 29"
        assert str(QuadraticPolynomial(a=0.123456, b=1, c=0)) == "0.1235x² + x"
