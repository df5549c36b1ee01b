"""
Numerical Safeguards — IEEE-754 Real Primitives

Вещественные примитивы, на которых построен ComplexNumber:
exp, log, sqrt, sin, cos, sinh, cosh, atan2, ldexp, деление и scaled hypotenuse.

Модуль stdlib `math` бросает исключения там, где IEEE-754 возвращает
специальное значение:
- math.exp(1000)  → OverflowError   (IEEE: inf)
- math.log(0.0)   → ValueError      (IEEE: -inf)
- math.sin(inf)   → ValueError      (IEEE: nan)
- 1.0 / 0.0       → ZeroDivisionError (IEEE: inf)

Здесь эти случаи перехватываются и заменяются IEEE-значением.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает исключение на числовом входе
2. NaN/Inf пропагируют по правилам IEEE-754 (не санитизируются)
3. Все операции детерминированы и не имеют побочных эффектов
"""

import logging
import math
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# log(10), делитель для десятичного логарифма
LN10: Final[float] = math.log(10.0)

# Толерантности для приближённых сравнений (никогда не используются в ==)
EPS_COMPLEX_COMPARE_REL: Final[float] = 1e-9
EPS_COMPLEX_COMPARE_ABS: Final[float] = 1e-12

# Порог max-компоненты, выше которого sqrt считается как 4·sqrt(z/16):
# 2·(|z| + |real|) <= 2·(1 + √2)·2^1020 < DBL_MAX
SQRT_RESCALE_THRESHOLD: Final[float] = 2.0**1020


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


# =============================================================================
# IEEE-ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754 вместо ZeroDivisionError.

    Деление на ноль (с учётом знака нуля):
    - x / ±0 → ±inf (знак = sign(x) * sign(0))
    - 0 / 0, nan / 0 → nan

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        logger.debug("ieee_divide: %r / %r -> nan", numerator, denominator)
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    logger.debug("ieee_divide: %r / %r -> %s", numerator, denominator, "inf" if sign > 0 else "-inf")
    return math.copysign(math.inf, sign)


def safe_ldexp(x: float, exponent: int) -> float:
    """
    x · 2^exponent; переполнение → ±inf вместо OverflowError.

    Антипереполнение даёт ±0 (так ведёт себя и math.ldexp).
    """
    try:
        return math.ldexp(x, exponent)
    except OverflowError:
        logger.debug("safe_ldexp: %r * 2**%d overflow -> inf", x, exponent)
        return math.copysign(math.inf, x)


# =============================================================================
# ЭКСПОНЕНТА И ЛОГАРИФМ
# =============================================================================


def safe_exp(x: float) -> float:
    """exp(x); переполнение даёт inf."""
    try:
        return math.exp(x)
    except OverflowError:
        logger.debug("safe_exp: overflow for x=%r -> inf", x)
        return math.inf


def safe_log(x: float) -> float:
    """
    Натуральный логарифм с IEEE-семантикой.

    - log(±0) → -inf
    - log(x < 0) → nan
    - log(inf) → inf, log(nan) → nan
    """
    if x == 0.0:
        logger.debug("safe_log: log(%r) -> -inf", x)
        return -math.inf
    if x < 0.0:
        logger.debug("safe_log: log(%r) -> nan", x)
        return math.nan
    return math.log(x)


def safe_sqrt(x: float) -> float:
    """sqrt(x); отрицательный аргумент даёт nan."""
    if x < 0.0:
        logger.debug("safe_sqrt: sqrt(%r) -> nan", x)
        return math.nan
    return math.sqrt(x)


# =============================================================================
# ТРИГОНОМЕТРИЯ И ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def safe_sin(x: float) -> float:
    """sin(x); sin(±inf) = nan."""
    if math.isinf(x):
        logger.debug("safe_sin: sin(%r) -> nan", x)
        return math.nan
    return math.sin(x)


def safe_cos(x: float) -> float:
    """cos(x); cos(±inf) = nan."""
    if math.isinf(x):
        logger.debug("safe_cos: cos(%r) -> nan", x)
        return math.nan
    return math.cos(x)


def safe_sinh(x: float) -> float:
    """sinh(x); переполнение даёт ±inf со знаком x."""
    try:
        return math.sinh(x)
    except OverflowError:
        logger.debug("safe_sinh: overflow for x=%r", x)
        return math.copysign(math.inf, x)


def safe_cosh(x: float) -> float:
    """cosh(x); переполнение даёт inf."""
    try:
        return math.cosh(x)
    except OverflowError:
        logger.debug("safe_cosh: overflow for x=%r -> inf", x)
        return math.inf


def safe_atan2(y: float, x: float) -> float:
    # math.atan2 тотальна на всех double, включая nan/inf
    return math.atan2(y, x)


# =============================================================================
# SCALED HYPOTENUSE
# =============================================================================


def scaled_hypot(x: float, y: float) -> float:
    """
    Длина вектора (x, y) без промежуточного переполнения.

    Наивная формула sqrt(x² + y²) переполняется уже при |x| ~ 1.4e154.
    Масштабирование на m = max(|x|, |y|) держит слагаемые в [0, 1]:

        m * sqrt((x/m)² + (y/m)²)

    Особые случаи:
    - m == 0 → 0.0
    - бесконечная компонента → inf (даже если другая nan)
    - иначе nan пропагирует

    Examples:
        >>> scaled_hypot(3.0, 4.0)
        5.0
        >>> scaled_hypot(1e308, 1e308)  # ≈ 1.414e308, не inf
    """
    if math.isinf(x) or math.isinf(y):
        return math.inf

    ax = abs(x)
    ay = abs(y)
    if math.isnan(ax) or math.isnan(ay):
        return math.nan

    m = max(ax, ay)
    if m == 0.0:
        return 0.0

    rx = x / m
    ry = y / m
    return m * math.sqrt(rx * rx + ry * ry)
