"""
Numerical Safeguards — примитивы точной арифметики и сравнений

Модуль содержит низкоуровневые численные примитивы, на которых построены
Complex и полиномиальные решатели:
- ApproxEquality: сравнение float с фиксированной толерантностью
- Десятичное округление round-half-up (через decimal, не через round())
- Точные десятичные сложение/вычитание/деление значений float
- IEEE-совместимое деление (±Inf/NaN вместо ZeroDivisionError)
- Вещественный кубический корень с сохранением знака

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Толерантность ApproxEquality фиксирована (EPS_ROOT_COMPARE) и не настраивается
2. Округление выполняется в десятичном представлении: ничьи всегда от нуля
3. NaN/Inf никогда не вызывают исключений, а распространяются дальше
4. Все операции детерминированы и воспроизводимы
"""

import math
import struct
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность ApproxEquality: классификация дискриминанта и остатка деления
EPS_ROOT_COMPARE: Final[float] = 1e-4

# Точность (знаков) для multiply/power/reciprocal у Complex
COMPLEX_ROUND_PLACES: Final[int] = 5

# Точность (знаков) для вещественных корней кубического уравнения
ROOT_ROUND_PLACES: Final[int] = 4

# Рабочая точность десятичного контекста.
# Любой конечный float64 после квантования до 5 знаков помещается целиком.
DECIMAL_PRECISION: Final[int] = 400

# Канонический NaN (как Double.doubleToLongBits)
CANONICAL_NAN_BITS: Final[int] = 0x7FF8000000000000

# Без ловушек: деление на ноль даёт Infinity, неопределённость даёт NaN
_DECIMAL_CONTEXT: Final[Context] = Context(
    prec=DECIMAL_PRECISION,
    rounding=ROUND_HALF_UP,
    traps=[],
)


# =============================================================================
# APPROX EQUALITY
# =============================================================================


def approx_equal(a: float, b: float) -> bool:
    """
    Сравнение двух float с фиксированной толерантностью.

    Алгоритм:
        abs(a - b) < EPS_ROOT_COMPARE   (строгое неравенство)

    Используется только для классификации дискриминанта кубического
    уравнения и проверки остатка синтетического деления. Все остальные
    сравнения в системе точные.

    Examples:
        >>> approx_equal(0.0, 0.00009)
        True
        >>> approx_equal(0.0, 0.0001)
        False
    """
    return abs(a - b) < EPS_ROOT_COMPARE


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def float_bits(value: float) -> int:
    """
    IEEE-754 битовое представление float64 как целое.

    Все NaN приводятся к каноническому значению, поэтому два NaN
    дают одинаковые биты, а 0.0 и -0.0 различаются.
    """
    if math.isnan(value):
        return CANONICAL_NAN_BITS
    return struct.unpack("<q", struct.pack("<d", value))[0]


# =============================================================================
# ДЕСЯТИЧНАЯ АРИФМЕТИКА
# =============================================================================


def to_decimal(value: float) -> Decimal:
    """
    Перевод float в Decimal через кратчайшее десятичное представление.

    Decimal(repr(x)), а не Decimal(x): 0.1 превращается в Decimal('0.1'),
    а не в точное двоичное значение 0.1000000000000000055511...
    NaN/Inf сохраняются.
    """
    return Decimal(repr(float(value)))


def round_half_up(value: float, places: int) -> float:
    """
    Округление до places знаков после запятой по правилу round-half-up.

    Ничья (ровно половина) округляется от нуля. В отличие от встроенного
    round(), который работает с двоичным значением и округляет ничьи
    к чётному, здесь округляется десятичная запись числа.

    Args:
        value: Исходное значение
        places: Количество знаков после запятой (>= 0)

    Returns:
        Округлённое значение; NaN/Inf возвращаются без изменений

    Raises:
        ValueError: Если places < 0

    Examples:
        >>> round_half_up(2.675, 2)
        2.68
        >>> round(2.675, 2)
        2.67
        >>> round_half_up(-1.00005, 4)
        -1.0001
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    if not is_valid_float(value):
        return value

    return float(_quantize_half_up(to_decimal(value), places))


def _quantize_half_up(value: Decimal, places: int) -> Decimal:
    return value.quantize(
        Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT
    )


def decimal_add(a: float, b: float) -> float:
    """Точная десятичная сумма a + b, возвращённая как float."""
    return float(_DECIMAL_CONTEXT.add(to_decimal(a), to_decimal(b)))


def decimal_subtract(a: float, b: float) -> float:
    """Точная десятичная разность a - b, возвращённая как float."""
    return float(_DECIMAL_CONTEXT.subtract(to_decimal(a), to_decimal(b)))


def decimal_sum_of_squares(a: float, b: float) -> Decimal:
    """Точное a² + b² в Decimal (знаменатель для reciprocal)."""
    da, db = to_decimal(a), to_decimal(b)
    return _DECIMAL_CONTEXT.add(
        _DECIMAL_CONTEXT.multiply(da, da), _DECIMAL_CONTEXT.multiply(db, db)
    )


def decimal_divide(
    numerator: float | Decimal,
    denominator: float | Decimal,
    places: int,
) -> float:
    """
    Десятичное деление с округлением частного half-up до places знаков.

    float-аргументы переводятся через to_decimal, Decimal используются как есть.

    Деление на ноль не вызывает исключения:
    - x / 0 при x != 0 → ±Inf
    - 0 / 0 → NaN

    Args:
        numerator: Числитель
        denominator: Знаменатель
        places: Количество знаков после запятой в частном

    Returns:
        Округлённое частное (float)
    """
    if not isinstance(numerator, Decimal):
        numerator = to_decimal(numerator)
    if not isinstance(denominator, Decimal):
        denominator = to_decimal(denominator)

    quotient = _DECIMAL_CONTEXT.divide(numerator, denominator)
    if not quotient.is_finite():
        return float(quotient)
    return float(_quantize_half_up(quotient, places))


# =============================================================================
# IEEE-СОВМЕСТИМЫЕ ОПЕРАЦИИ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float по правилам IEEE-754.

    Python поднимает ZeroDivisionError при делении на 0.0; здесь вместо
    этого возвращается ±Inf (или NaN для 0/0 и NaN/0), как в вычислениях
    с вырожденными коэффициентами.

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator) or math.isnan(denominator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def real_cbrt(value: float) -> float:
    """
    Вещественный кубический корень с сохранением знака.

    Для отрицательных x возвращает -((-x) ** (1/3)); возведение
    отрицательного float в дробную степень в Python дало бы complex.

    Examples:
        >>> real_cbrt(8.0)
        2.0
        >>> real_cbrt(-8.0)
        -2.0
    """
    if value < 0:
        return -((-value) ** (1.0 / 3.0))
    return value ** (1.0 / 3.0)


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(1.0000000001, -1.0, 1.0)
        1.0
        >>> clamp(0.5, -1.0, 1.0)
        0.5
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
