"""
Formatting — текстовое представление double

Компоненты ComplexNumber выводятся в форме ECMAScript Number#toString:
- целые значения без ".0":           3.0    → "3"
- кратчайшие round-trip цифры:       0.1    → "0.1"
- фиксированная запись при 1e-6 <= |x| < 1e21
- иначе экспоненциальная:            1e21   → "1e+21", 1.5e-7 → "1.5e-7"
- специальные значения:              "NaN", "Infinity", "-Infinity"
- отрицательный ноль:                -0.0   → "0"
"""

import math
from decimal import Decimal
from typing import Final

# Границы фиксированной записи (включительно снизу, исключительно сверху)
FIXED_NOTATION_MIN: Final[float] = 1e-6
FIXED_NOTATION_MAX: Final[float] = 1e21


def format_real(value: float) -> str:
    """
    Кратчайшее десятичное представление double.

    Цифры берутся из repr() (shortest round-trip), затем раскладываются
    в фиксированную или экспоненциальную запись.

    Args:
        value: Значение для форматирования

    Returns:
        Строковое представление

    Examples:
        >>> format_real(3.0)
        '3'
        >>> format_real(-2.5)
        '-2.5'
        >>> format_real(1e21)
        '1e+21'
        >>> format_real(float('-inf'))
        '-Infinity'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0.0:
        return "0"

    shortest = repr(float(value))
    magnitude = abs(value)

    if FIXED_NOTATION_MIN <= magnitude < FIXED_NOTATION_MAX:
        # normalize() убирает хвостовые нули: "3.0" → "3", "1e+20" → "1E+20"
        return format(Decimal(shortest).normalize(), "f")

    # Вне диапазона repr() уже даёт экспоненту ("1e-07", "1.5e+300")
    mantissa, _, exponent = shortest.partition("e")
    return f"{mantissa}e{int(exponent):+d}"
