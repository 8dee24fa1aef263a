"""
Complex — неизменяемое комплексное число

Immutable value type: после создания значение не меняется, каждая
операция возвращает новый экземпляр.

Политика округления (для совместимости с эталонными значениями):
- add/subtract: точная десятичная арифметика, без округления
- multiply, power (целая и вещественная), reciprocal: оба компонента
  округляются до COMPLEX_ROUND_PLACES знаков по правилу round-half-up
- divide = multiply(reciprocal): наследует оба округления

Вырожденные случаи не вызывают исключений: reciprocal от нуля даёт
NaN/Inf компоненты, которые распространяются дальше (divide, tan, tanh).
"""

import math
import numbers
from dataclasses import dataclass
from typing import NamedTuple

from src.core.math.numerical_safeguards import (
    COMPLEX_ROUND_PLACES,
    decimal_add,
    decimal_divide,
    decimal_subtract,
    decimal_sum_of_squares,
    round_half_up,
)


# =============================================================================
# POLAR FORM
# =============================================================================


class Polar(NamedTuple):
    """Полярная форма z = r(cosθ + i·sinθ)."""

    modulus: float
    theta: float

    def __str__(self) -> str:
        return f"{self.modulus:.4f} cos({self.theta:.4f}) + isin({self.theta:.4f})"


def _round(value: float) -> float:
    return round_half_up(value, COMPLEX_ROUND_PLACES)


def _pow_modulus(modulus: float, n: float) -> float:
    # 0.0 ** -n поднимает ZeroDivisionError, переполнение поднимает
    # OverflowError; по IEEE оба случая дают +Inf
    if modulus == 0.0 and n < 0:
        return math.inf
    try:
        return modulus**n
    except OverflowError:
        return math.inf


# =============================================================================
# COMPLEX
# =============================================================================


@dataclass(frozen=True)
class Complex:
    """
    Комплексное число re + i·im.

    Равенство точное (==) по обоим компонентам, без толерантности.
    Свойства real/imag возвращают 0.0 вместо -0.0.
    """

    re: float
    im: float

    def __post_init__(self) -> None:
        # Complex(5, 6) хранит float, а не int
        object.__setattr__(self, "re", float(self.re))
        object.__setattr__(self, "im", float(self.im))

    # -------------------------------------------------------------------------
    # Компоненты
    # -------------------------------------------------------------------------

    @property
    def real(self) -> float:
        """Re[z]; -0.0 нормализуется в 0.0."""
        if self.re == 0.0:
            return 0.0
        return self.re

    @property
    def imag(self) -> float:
        """Im[z]; -0.0 нормализуется в 0.0."""
        if self.im == 0.0:
            return 0.0
        return self.im

    def abs(self) -> float:
        """
        |z| — модуль (расстояние от начала координат).

        math.hypot вместо sqrt(re² + im²): без переполнения на промежуточных
        квадратах.
        """
        return math.hypot(self.re, self.im)

    def modulus(self) -> float:
        return self.abs()

    def argument(self) -> float:
        """arg(z) = atan2(im, re), диапазон (-π, π]."""
        return math.atan2(self.im, self.re)

    def phase(self) -> float:
        return self.argument()

    def to_polar(self) -> Polar:
        """
        Полярная форма.

        Модуль считается как sqrt(re² + im²), угол — через однопараметрический
        atan(im / re) с поправкой +π при re < 0. При re == 0 угол остаётся 0,
        даже если im != 0: для чисто мнимых z to_polar().theta != argument().
        """
        re, im = self.re, self.im
        modulus = math.sqrt(re * re + im * im)

        theta = 0.0
        if re > 0:
            theta = math.atan(im / re)
        elif re < 0:
            theta = math.atan(im / re) + math.pi

        return Polar(modulus, theta)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Complex") -> "Complex":
        return Complex(decimal_add(self.re, other.re), decimal_add(self.im, other.im))

    def subtract(self, other: "Complex") -> "Complex":
        return Complex(
            decimal_subtract(self.re, other.re),
            decimal_subtract(self.im, other.im),
        )

    def multiply(self, other: "Complex") -> "Complex":
        """
        (a + bi)(c + di) = (ac - bd) + (ad + bc)i

        Произведения считаются во float, сумма/разность — в десятичной
        арифметике, затем оба компонента округляются до 5 знаков.
        """
        real = decimal_subtract(self.re * other.re, self.im * other.im)
        imag = decimal_add(self.re * other.im, self.im * other.re)
        return Complex(_round(real), _round(imag))

    def reciprocal(self) -> "Complex":
        """
        1/z = (re - i·im) / (re² + im²)

        Знаменатель считается точно в Decimal, частные округляются до
        5 знаков. При z == 0 компоненты становятся NaN (без исключения).
        """
        scale = decimal_sum_of_squares(self.re, self.im)
        return Complex(
            decimal_divide(self.re, scale, COMPLEX_ROUND_PLACES),
            decimal_divide(-self.im, scale, COMPLEX_ROUND_PLACES),
        )

    def divide(self, other: "Complex") -> "Complex":
        """self / other, определено как self · reciprocal(other)."""
        return self.multiply(other.reciprocal())

    def scale(self, alpha: float) -> "Complex":
        """Умножение на вещественное число (без округления)."""
        return Complex(alpha * self.re, alpha * self.im)

    def negate(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def conjugate(self) -> "Complex":
        return Complex(self.re, -self.im)

    # -------------------------------------------------------------------------
    # Степени и корни
    # -------------------------------------------------------------------------

    def power(self, n: float) -> "Complex":
        """
        Возведение в степень.

        - Целый показатель (int): быстрое возведение повторным возведением
          в квадрат, рекурсия по n // 2. По определению z**0 == 0 + 0i,
          z**1 == z. Отрицательные целые показатели не поддерживаются.
        - Вещественный показатель (float): формула Муавра через to_polar(),
          z**n = r**n (cos nθ + i sin nθ).

        Оба варианта округляют результат до 5 знаков.

        Raises:
            ValueError: Если n — отрицательное целое
        """
        if isinstance(n, numbers.Integral):
            return self._power_integral(int(n))
        return self._power_real(float(n))

    def _power_integral(self, n: int) -> "Complex":
        if n < 0:
            raise ValueError(f"negative integer exponents are not supported, got {n}")

        if n == 0:
            return Complex(0.0, 0.0)

        if n == 1:
            return self

        half = self._power_integral(n // 2)
        if n % 2 == 0:
            return half.multiply(half)

        return self.multiply(half.multiply(half))

    def _power_real(self, n: float) -> "Complex":
        polar = self.to_polar()
        modulus = _pow_modulus(polar.modulus, n)
        return Complex(
            _round(modulus * math.cos(n * polar.theta)),
            _round(modulus * math.sin(n * polar.theta)),
        )

    def sqrt(self) -> tuple["Complex", "Complex"]:
        """
        Оба квадратных корня: z**(1/2) и его противоположное значение.

        Всегда ровно два значения, даже если они совпадают (z == 0).
        """
        root = self.power(0.5)
        return root, root.negate()

    def cbrt(self) -> "Complex":
        """Главный кубический корень, z**(1/3)."""
        return self.power(1.0 / 3.0)

    # -------------------------------------------------------------------------
    # Трансцендентные функции
    # -------------------------------------------------------------------------

    def exp(self) -> "Complex":
        """e**z = e**re (cos im + i sin im)"""
        scale = math.exp(self.re)
        return Complex(scale * math.cos(self.im), scale * math.sin(self.im))

    def log(self) -> "Complex":
        """Главная ветвь логарифма: ln|z| + i·arg(z)."""
        return Complex(math.log(self.abs()), self.argument())

    def sin(self) -> "Complex":
        return Complex(
            math.sin(self.re) * math.cosh(self.im),
            math.cos(self.re) * math.sinh(self.im),
        )

    def cos(self) -> "Complex":
        return Complex(
            math.cos(self.re) * math.cosh(self.im),
            -math.sin(self.re) * math.sinh(self.im),
        )

    def tan(self) -> "Complex":
        return self.sin().divide(self.cos())

    def sinh(self) -> "Complex":
        return Complex(
            math.sinh(self.re) * math.cos(self.im),
            math.cosh(self.re) * math.sin(self.im),
        )

    def cosh(self) -> "Complex":
        return Complex(
            math.cosh(self.re) * math.cos(self.im),
            math.sinh(self.re) * math.sin(self.im),
        )

    def tanh(self) -> "Complex":
        return self.sinh().divide(self.cosh())

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: "Complex") -> "Complex":
        return self.add(other)

    def __sub__(self, other: "Complex") -> "Complex":
        return self.subtract(other)

    def __mul__(self, other: "Complex") -> "Complex":
        return self.multiply(other)

    def __truediv__(self, other: "Complex") -> "Complex":
        return self.divide(other)

    def __pow__(self, n: float) -> "Complex":
        return self.power(n)

    def __neg__(self) -> "Complex":
        return self.negate()

    def __abs__(self) -> float:
        return self.abs()

    def __str__(self) -> str:
        """x, i, -i, yi, x + yi или x - yi; единичный мнимый коэффициент опускается."""
        re, im = self.re, self.im

        if im == 0:
            return f"{re}"

        if re == 0:
            if im == 1.0:
                return "i"
            if im == -1.0:
                return "-i"
            return f"{im}i"

        if im < 0:
            return f"{re} - {'' if im == -1.0 else -im}i"

        return f"{re} + {'' if im == 1.0 else im}i"
