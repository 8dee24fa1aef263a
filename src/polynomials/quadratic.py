"""
QuadraticPolynomial — многочлен второй степени a·x² + b·x + c

Immutable Pydantic модель. Коэффициент a не проверяется: при a == 0
деление на ноль не поднимает исключение, а распространяет ±Inf/NaN
(ответственность вызывающего кода).

Корни:
    Δ = b² - 4ac
    Δ < 0:  пара комплексно-сопряжённых корней
    Δ >= 0: два вещественных корня (двойной корень — дважды)

ВНИМАНИЕ: в ветви Δ < 0 используется эталонная запись
    real = (-b / 2) * a,  imag = sqrt(-Δ) / 2 * a
то есть умножение на a вместо деления на 2a. Для a == 1 результат
совпадает с формулой корней квадратного уравнения.
"""

import math

from pydantic import BaseModel, Field

from src.core.domain.complex_number import Complex
from src.core.math.numerical_safeguards import float_bits, ieee_divide
from src.polynomials.formatting import FormatConfig, format_quadratic


class QuadraticPolynomial(BaseModel):
    """
    Многочлен a·x² + b·x + c.

    Равенство и hash — по битовому представлению всех трёх коэффициентов.
    """

    a: float = Field(..., description="Коэффициент при x² (не проверяется на ноль)")
    b: float = Field(..., description="Коэффициент при x")
    c: float = Field(..., description="Свободный член")

    model_config = {"frozen": True}  # Immutable

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuadraticPolynomial):
            return NotImplemented
        return self._bits() == other._bits()

    def __hash__(self) -> int:
        return hash(self._bits())

    def _bits(self) -> tuple[int, int, int]:
        return float_bits(self.a), float_bits(self.b), float_bits(self.c)

    def discriminant(self) -> float:
        """Δ = b² - 4ac"""
        return (self.b * self.b) - (4 * self.a * self.c)

    def has_real_roots(self) -> bool:
        """True если Δ >= 0."""
        return self.discriminant() >= 0.0

    def complex_roots(self) -> tuple[Complex, Complex]:
        """
        Оба корня как Complex (всегда ровно два значения).

        Δ < 0 → (real + i·imag, real - i·imag)
        Δ >= 0 → ((-b + √Δ) / 2a, (-b - √Δ) / 2a) с нулевой мнимой частью
        """
        delta = self.discriminant()

        if delta < 0.0:
            real = -self.b / 2 * self.a
            imag = math.sqrt(-delta) / 2 * self.a
            return Complex(real, imag), Complex(real, -imag)

        x1, x2 = self._real_pair(delta)
        return Complex(x1, 0.0), Complex(x2, 0.0)

    def real_roots(self) -> list[float]:
        """
        Только вещественные корни.

        Returns:
            [] если Δ < 0, иначе [(-b + √Δ) / 2a, (-b - √Δ) / 2a]
        """
        delta = self.discriminant()
        if delta < 0.0:
            return []
        return list(self._real_pair(delta))

    def _real_pair(self, delta: float) -> tuple[float, float]:
        root = math.sqrt(delta)
        denominator = 2 * self.a
        return (
            ieee_divide(-self.b + root, denominator),
            ieee_divide(-self.b - root, denominator),
        )

    def format(self, places: int) -> str:
        """Строковое представление с places знаками после запятой."""
        return format_quadratic(self, FormatConfig(places=places))

    def __str__(self) -> str:
        return format_quadratic(self)
