"""
Formatting — строковое представление многочленов

Только презентационный слой: на численные результаты не влияет.

Правила:
- коэффициенты округляются half-up до config.places знаков, хвостовые нули
  отбрасываются (1.5000 → "1.5", 2.0 → "2")
- коэффициент с модулем "1" при x опускается: 1x² → x², -1x → -x
- члены, которые после округления равны "0", пропускаются
- "+ -c" сворачивается в "- c"
- многочлен, у которого все члены нулевые, выводится как "0"

Examples:
    x² + x - 6
    x² + 1
    x³ - 7x² + 41x - 87
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from src.core.math.numerical_safeguards import is_valid_float, round_half_up, to_decimal

if TYPE_CHECKING:
    from src.polynomials.cubic import CubicPolynomial
    from src.polynomials.quadratic import QuadraticPolynomial


# =============================================================================
# CONSTANTS
# =============================================================================

# Количество знаков после запятой по умолчанию
DEFAULT_DISPLAY_PLACES: Final[int] = 4

_SUPERSCRIPTS: Final[dict[int, str]] = {2: "²", 3: "³"}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация вывода многочлена."""

    places: int = DEFAULT_DISPLAY_PLACES
    variable: str = "x"

    def __post_init__(self) -> None:
        if isinstance(self.places, bool) or not isinstance(self.places, int):
            raise ValueError(f"places must be an int, got {self.places!r}")
        if self.places < 0:
            raise ValueError(f"places must be non-negative, got {self.places}")
        if not self.variable:
            raise ValueError("variable must be a non-empty string")


# =============================================================================
# FORMATTERS
# =============================================================================


def format_coefficient(value: float, places: int) -> str:
    """
    Число с не более чем places знаками после запятой.

    Examples:
        >>> format_coefficient(1.23456, 4)
        '1.2346'
        >>> format_coefficient(-6.0, 4)
        '-6'
        >>> format_coefficient(-0.00001, 4)
        '0'
    """
    if not is_valid_float(value):
        return repr(value)

    text = f"{to_decimal(round_half_up(value, places)):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    if text == "-0":
        return "0"
    return text


def format_polynomial(
    coefficients: Sequence[float],
    config: FormatConfig | None = None,
) -> str:
    """
    Многочлен по коэффициентам от старшей степени к свободному члену.

    Args:
        coefficients: [a_n, ..., a_1, a_0]
        config: конфигурация вывода (опционально, используется default)
    """
    config = config or FormatConfig()
    degree = len(coefficients) - 1

    terms: list[tuple[bool, str]] = []
    for power, value in zip(range(degree, -1, -1), coefficients):
        text = format_coefficient(value, config.places)
        if text == "0":
            continue

        negative = text.startswith("-")
        body = text.lstrip("-")

        if power > 0:
            if body == "1":
                body = ""
            body += config.variable + _SUPERSCRIPTS.get(power, "")

        terms.append((negative, body))

    if not terms:
        return "0"

    head_negative, head = terms[0]
    parts = [f"-{head}" if head_negative else head]
    for negative, body in terms[1:]:
        parts.append(f"- {body}" if negative else f"+ {body}")

    return " ".join(parts)


def format_quadratic(
    polynomial: "QuadraticPolynomial",
    config: FormatConfig | None = None,
) -> str:
    """a·x² + b·x + c"""
    return format_polynomial([polynomial.a, polynomial.b, polynomial.c], config)


def format_cubic(
    polynomial: "CubicPolynomial",
    config: FormatConfig | None = None,
) -> str:
    """a·x³ + b·x² + c·x + d"""
    return format_polynomial(
        [polynomial.a, polynomial.b, polynomial.c, polynomial.d], config
    )
