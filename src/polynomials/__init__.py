"""
Polynomials — решатели многочленов второй и третьей степени в радикалах
"""

from src.polynomials.cubic import (
    CubicCase,
    CubicPolynomial,
    DepressedCubic,
    RootRecoveryError,
)
from src.polynomials.formatting import (
    DEFAULT_DISPLAY_PLACES,
    FormatConfig,
    format_coefficient,
    format_cubic,
    format_polynomial,
    format_quadratic,
)
from src.polynomials.quadratic import QuadraticPolynomial

__all__ = [
    # Quadratic
    "QuadraticPolynomial",
    # Cubic
    "CubicCase",
    "CubicPolynomial",
    "DepressedCubic",
    "RootRecoveryError",
    # Formatting
    "DEFAULT_DISPLAY_PLACES",
    "FormatConfig",
    "format_coefficient",
    "format_cubic",
    "format_polynomial",
    "format_quadratic",
]
