"""
Core math modules

Численные примитивы: сравнение с толерантностью, десятичное округление
round-half-up, IEEE-совместимое деление.
"""

from src.core.math.numerical_safeguards import (
    # Constants
    COMPLEX_ROUND_PLACES,
    DECIMAL_PRECISION,
    EPS_ROOT_COMPARE,
    ROOT_ROUND_PLACES,
    # Comparisons
    approx_equal,
    float_bits,
    is_valid_float,
    # Decimal arithmetic
    decimal_add,
    decimal_divide,
    decimal_subtract,
    decimal_sum_of_squares,
    round_half_up,
    to_decimal,
    # IEEE helpers
    ieee_divide,
    real_cbrt,
    # Utilities
    clamp,
)

__all__ = [
    # Constants
    "COMPLEX_ROUND_PLACES",
    "DECIMAL_PRECISION",
    "EPS_ROOT_COMPARE",
    "ROOT_ROUND_PLACES",
    # Comparisons
    "approx_equal",
    "float_bits",
    "is_valid_float",
    # Decimal arithmetic
    "decimal_add",
    "decimal_divide",
    "decimal_subtract",
    "decimal_sum_of_squares",
    "round_half_up",
    "to_decimal",
    # IEEE helpers
    "ieee_divide",
    "real_cbrt",
    # Utilities
    "clamp",
]
