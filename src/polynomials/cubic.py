"""
CubicPolynomial — решение кубического уравнения в радикалах

Уравнение A·x³ + B·x² + C·x + D = 0, A != 0.

ФОРМУЛЫ (депрессированная кубика x³ + p·x + q = 0):
    a' = B/A,  b' = C/A,  c' = D/A
    p  = b' - a'²/3
    q  = 2a'³/27 - a'·b'/3 + c'
    Δ  = q²/4 + p³/27

Классификация по Δ (толерантность EPS_ROOT_COMPARE):
    Δ ≈ 0 → кратные корни:
        x1 = -2·cbrt(q/2) - a'/3,  x2 = x3 = cbrt(q/2) - a'/3
    Δ > 0 → один вещественный корень (Кардано):
        x1 = cbrt(-q/2 + √Δ) + cbrt(-q/2 - √Δ) - a'/3
        оставшаяся пара — корни частного от синтетического деления на (x - x1)
    Δ < 0 → три различных вещественных корня (тригонометрическая форма,
        без комплексной арифметики)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. A == 0 или NaN/Inf коэффициенты → ValidationError при создании
2. Все вещественные корни округляются half-up до ROOT_ROUND_PLACES знаков
3. roots() возвращает ровно 3 значения или поднимает RootRecoveryError
4. Константы депрессированной кубики не кэшируются
"""

import logging
import math
from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.domain.complex_number import Complex
from src.core.math.numerical_safeguards import (
    ROOT_ROUND_PLACES,
    approx_equal,
    clamp,
    float_bits,
    real_cbrt,
    round_half_up,
)
from src.polynomials.formatting import FormatConfig, format_cubic
from src.polynomials.quadratic import QuadraticPolynomial

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RootRecoveryError(ArithmeticError):
    """
    Вещественный корень не делит многочлен нацело (остаток вне толерантности),
    поэтому оставшуюся пару корней восстановить нельзя.
    """

    pass


# =============================================================================
# TYPES
# =============================================================================


class CubicCase(str, Enum):
    """Структура корней по знаку дискриминанта."""

    REPEATED_ROOTS = "repeated_roots"
    ONE_REAL_ROOT = "one_real_root"
    THREE_REAL_ROOTS = "three_real_roots"


class DepressedCubic(NamedTuple):
    """Константы приведения к виду x³ + p·x + q = 0."""

    a_prime: float
    b_prime: float
    c_prime: float
    p: float
    q: float
    discriminant: float


def _round_root(value: float) -> float:
    return round_half_up(value, ROOT_ROUND_PLACES)


# =============================================================================
# CUBIC POLYNOMIAL
# =============================================================================


class CubicPolynomial(BaseModel):
    """
    Многочлен a·x³ + b·x² + c·x + d.

    Immutable модель (frozen=True). Равенство и hash — по битовому
    представлению всех четырёх коэффициентов.
    """

    a: float = Field(..., allow_inf_nan=False, description="Коэффициент при x³ (!= 0)")
    b: float = Field(..., allow_inf_nan=False, description="Коэффициент при x²")
    c: float = Field(..., allow_inf_nan=False, description="Коэффициент при x")
    d: float = Field(..., allow_inf_nan=False, description="Свободный член")

    model_config = {"frozen": True}  # Immutable

    @field_validator("a")
    @classmethod
    def validate_leading_coefficient(cls, v: float) -> float:
        """Старший коэффициент не может быть нулевым."""
        if v == 0:
            raise ValueError("leading coefficient a must be non-zero")
        return v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CubicPolynomial):
            return NotImplemented
        return self._bits() == other._bits()

    def __hash__(self) -> int:
        return hash(self._bits())

    def _bits(self) -> tuple[int, int, int, int]:
        return (
            float_bits(self.a),
            float_bits(self.b),
            float_bits(self.c),
            float_bits(self.d),
        )

    # -------------------------------------------------------------------------
    # Дискриминант
    # -------------------------------------------------------------------------

    def depressed(self) -> DepressedCubic:
        """Нормировка на a и приведение к депрессированной форме."""
        a_prime = self.b / self.a
        b_prime = self.c / self.a
        c_prime = self.d / self.a

        p = b_prime - (a_prime * a_prime / 3)
        q = (2 * a_prime * a_prime * a_prime / 27) - (a_prime * b_prime / 3) + c_prime
        delta = (q * q / 4) + (p * p * p / 27)

        return DepressedCubic(a_prime, b_prime, c_prime, p, q, delta)

    def discriminant(self) -> float:
        """Δ = q²/4 + p³/27"""
        return self.depressed().discriminant

    def classify(self, depressed: Optional[DepressedCubic] = None) -> CubicCase:
        """
        Классификация структуры корней.

        Raises:
            ArithmeticError: Если Δ == NaN (переполнение промежуточных величин)
        """
        depressed = depressed or self.depressed()
        delta = depressed.discriminant

        if math.isnan(delta):
            raise ArithmeticError(f"discriminant is not a number for {self!r}")

        if approx_equal(delta, 0.0):
            case = CubicCase.REPEATED_ROOTS
        elif delta > 0:
            case = CubicCase.ONE_REAL_ROOT
        else:
            case = CubicCase.THREE_REAL_ROOTS

        logger.debug("discriminant=%r case=%s", delta, case.value)
        return case

    # -------------------------------------------------------------------------
    # Корни
    # -------------------------------------------------------------------------

    def real_roots(self) -> list[float]:
        """
        Все вещественные корни, округлённые до 4 знаков.

        Returns:
            3 значения (x2 == x3) для кратных корней,
            1 значение для Δ > 0,
            3 значения для Δ < 0
        """
        depressed = self.depressed()
        return self._real_roots(self.classify(depressed), depressed)

    def roots(self) -> list[Complex]:
        """
        Все три корня как Complex.

        Для Δ > 0 первым идёт вещественный корень, за ним пара корней
        квадратного частного, полученного синтетическим делением
        на (x - x1).

        Raises:
            RootRecoveryError: Если x1 не делит многочлен нацело
        """
        depressed = self.depressed()
        case = self.classify(depressed)

        if case is not CubicCase.ONE_REAL_ROOT:
            return [Complex(x, 0.0) for x in self._real_roots(case, depressed)]

        x1 = self._cardano_root(depressed)
        quotient = self.synthetic_division(x1)
        if quotient is None:
            raise RootRecoveryError(
                f"real root {x1!r} of {self} leaves a non-zero remainder "
                f"{self.horner_evaluate(x1)!r}"
            )

        return [Complex(_round_root(x1), 0.0), *quotient.complex_roots()]

    def _real_roots(self, case: CubicCase, depressed: DepressedCubic) -> list[float]:
        if case is CubicCase.REPEATED_ROOTS:
            x1, x2 = self._repeated_roots(depressed)
            return [_round_root(x1), _round_root(x2), _round_root(x2)]

        if case is CubicCase.ONE_REAL_ROOT:
            return [_round_root(self._cardano_root(depressed))]

        return [_round_root(x) for x in self._trigonometric_roots(depressed)]

    def _repeated_roots(self, depressed: DepressedCubic) -> tuple[float, float]:
        shift = depressed.a_prime / 3
        half_q = real_cbrt(depressed.q / 2)
        return -2 * half_q - shift, half_q - shift

    def _cardano_root(self, depressed: DepressedCubic) -> float:
        root_delta = math.sqrt(depressed.discriminant)
        half_q = -depressed.q / 2
        return (
            real_cbrt(half_q + root_delta)
            + real_cbrt(half_q - root_delta)
            - depressed.a_prime / 3
        )

    def _trigonometric_roots(
        self, depressed: DepressedCubic
    ) -> tuple[float, float, float]:
        shift = depressed.a_prime / 3
        root3 = math.sqrt(3)
        root_minus_p = math.sqrt(-depressed.p)
        # Умножение вместо ** : при переполнении даёт Inf, а не OverflowError
        cube = root_minus_p * root_minus_p * root_minus_p

        # |ratio| <= 1 при Δ < 0; clamp снимает шум округления
        ratio = clamp(
            (3 * root3 * depressed.q) / (2 * cube),
            -1.0,
            1.0,
        )
        angle = math.asin(ratio) / 3

        x1 = (2 / root3) * root_minus_p * math.sin(angle) - shift
        x2 = (-2 / root3) * root_minus_p * math.sin(angle + math.pi / 3) - shift
        x3 = (2 / root3) * root_minus_p * math.cos(angle + math.pi / 6) - shift
        return x1, x2, x3

    # -------------------------------------------------------------------------
    # Вычисление и деление
    # -------------------------------------------------------------------------

    def horner_evaluate(self, x: float) -> float:
        """
        f(x) по схеме Горнера за O(n).

        Значение равно остатку от деления на (x - n): ноль означает корень.
        """
        result = self.a
        for coefficient in (self.b, self.c, self.d):
            result = result * x + coefficient
        return result

    def synthetic_division(self, x: float) -> Optional[QuadraticPolynomial]:
        """
        Синтетическое деление на (x - root).

        Args:
            x: предполагаемый корень

        Returns:
            Частное a·x² + b·x + c, либо None если остаток
            не равен нулю в пределах EPS_ROOT_COMPARE
        """
        quotient_b = self.a * x + self.b
        quotient_c = quotient_b * x + self.c
        remainder = abs(quotient_c * x + self.d)

        if not approx_equal(remainder, 0.0):
            logger.debug("x=%r is not a root, remainder=%r", x, remainder)
            return None

        return QuadraticPolynomial(a=self.a, b=quotient_b, c=quotient_c)

    def probable_roots(self) -> set[float]:
        """
        Кандидаты в рациональные корни (теорема о рациональных корнях).

        Для каждого делителя i числа |d| (1 <= i <= |d|) добавляются i/a и -i/a.
        Осмысленно только при целых a и d; для нецелых коэффициентов
        кандидаты не фильтруются.
        """
        candidates: set[float] = set()
        i = 1
        while i <= abs(self.d):
            if self.d % i == 0:
                candidates.add(i / self.a)
                candidates.add(-i / self.a)
            i += 1
        return candidates

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def format(self, places: int) -> str:
        """Строковое представление с places знаками после запятой."""
        return format_cubic(self, FormatConfig(places=places))

    def __str__(self) -> str:
        return format_cubic(self)
