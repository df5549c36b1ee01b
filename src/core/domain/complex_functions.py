"""
Complex Functions — функциональный API над ComplexNumber

Свободные функции повторяют методы ComplexNumber (exp(z) == z.exp()),
но принимают также вещественные скаляры и встроенный complex:

    >>> sqrt(-4)
    ComplexNumber(real=0.0, imag=2.0)

Дополнительно: классификация (isfinite/isnan/isinf) и приближённое
сравнение isclose по расстоянию |a - b|. Оператор == остаётся точным.
"""

import math
import numbers
from typing import Any, Union

from src.core.domain.complex_number import ComplexNumber, RealScalar
from src.core.math import EPS_COMPLEX_COMPARE_ABS, EPS_COMPLEX_COMPARE_REL

# Допустимый аргумент функций модуля
ComplexLike = Union[ComplexNumber, complex, RealScalar]


# =============================================================================
# ПРИВЕДЕНИЕ
# =============================================================================


def as_complex(value: Any) -> ComplexNumber:
    """
    Приведение аргумента к ComplexNumber.

    Args:
        value: ComplexNumber, вещественный скаляр (кроме bool) или complex

    Returns:
        ComplexNumber (тот же объект, если value уже ComplexNumber)

    Raises:
        TypeError: Если тип не поддерживается
    """
    if isinstance(value, ComplexNumber):
        return value
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return ComplexNumber(float(value))
    if isinstance(value, complex):
        return ComplexNumber(value.real, value.imag)
    raise TypeError(f"cannot convert {type(value).__name__} to ComplexNumber")


# =============================================================================
# КОНСТРУИРОВАНИЕ И ПОЛЯРНЫЕ КООРДИНАТЫ
# =============================================================================


def polar(rho: RealScalar, theta: RealScalar) -> ComplexNumber:
    """ComplexNumber из модуля и аргумента."""
    return ComplexNumber.polar(rho, theta)


def to_polar(z: ComplexLike) -> tuple[float, float]:
    """(|z|, arg z)."""
    return as_complex(z).to_polar()


def magnitude(z: ComplexLike) -> float:
    return as_complex(z).abs()


def phase(z: ComplexLike) -> float:
    return as_complex(z).arg()


def conj(z: ComplexLike) -> ComplexNumber:
    return as_complex(z).conj()


def norm(z: ComplexLike) -> float:
    return as_complex(z).norm()


# =============================================================================
# ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ
# =============================================================================


def exp(z: ComplexLike) -> ComplexNumber:
    return as_complex(z).exp()


def log(z: ComplexLike) -> ComplexNumber:
    """Главная ветвь логарифма: log(-1) == (0, π)."""
    return as_complex(z).log()


def log10(z: ComplexLike) -> ComplexNumber:
    return as_complex(z).log10()


def pow(z: ComplexLike, exponent: ComplexLike) -> ComplexNumber:
    """Главное значение z ** exponent = exp(exponent · log z)."""
    return as_complex(z).pow(exponent)


def sqrt(z: ComplexLike) -> ComplexNumber:
    return as_complex(z).sqrt()


def sin(z: ComplexLike) -> ComplexNumber:
    return as_complex(z).sin()


def cos(z: ComplexLike) -> ComplexNumber:
    return as_complex(z).cos()


def tan(z: ComplexLike) -> ComplexNumber:
    return as_complex(z).tan()


def sinh(z: ComplexLike) -> ComplexNumber:
    return as_complex(z).sinh()


def cosh(z: ComplexLike) -> ComplexNumber:
    return as_complex(z).cosh()


def tanh(z: ComplexLike) -> ComplexNumber:
    return as_complex(z).tanh()


# =============================================================================
# КЛАССИФИКАЦИЯ И ПРИБЛИЖЁННОЕ СРАВНЕНИЕ
# =============================================================================


def isfinite(z: ComplexLike) -> bool:
    return as_complex(z).is_finite()


def isnan(z: ComplexLike) -> bool:
    return as_complex(z).is_nan()


def isinf(z: ComplexLike) -> bool:
    """True, если хотя бы одна компонента бесконечна (даже при nan в другой)."""
    return as_complex(z).is_infinite()


def isclose(
    a: ComplexLike,
    b: ComplexLike,
    rel_tol: float = EPS_COMPLEX_COMPARE_REL,
    abs_tol: float = EPS_COMPLEX_COMPARE_ABS,
) -> bool:
    """
    Приближённое равенство комплексных чисел.

    Алгоритм (как cmath.isclose):
        a == b                                   → True
        бесконечная компонента у a или b         → False
        |a - b| <= max(rel_tol · max(|a|, |b|), abs_tol)

    Используется для проверок "в пределах точности" (sqrt(z)² ≈ z),
    оператор == при этом остаётся точным.

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Raises:
        ValueError: Если толерантность отрицательная
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(f"tolerances must be non-negative, got rel_tol={rel_tol}, abs_tol={abs_tol}")

    za = as_complex(a)
    zb = as_complex(b)

    if za == zb:
        return True
    if za.is_infinite() or zb.is_infinite():
        return False

    diff = (za - zb).abs()
    if math.isnan(diff):
        return False
    return diff <= max(rel_tol * max(za.abs(), zb.abs()), abs_tol)
