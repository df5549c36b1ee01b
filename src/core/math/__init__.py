"""
Core math modules

Вещественные IEEE-754 примитивы и форматирование чисел, на которых
построен ComplexNumber.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Constants
    EPS_COMPLEX_COMPARE_ABS,
    EPS_COMPLEX_COMPARE_REL,
    LN10,
    SQRT_RESCALE_THRESHOLD,
    # Checks
    is_valid_float,
    # IEEE primitives
    ieee_divide,
    safe_atan2,
    safe_cos,
    safe_cosh,
    safe_exp,
    safe_ldexp,
    safe_log,
    safe_sin,
    safe_sinh,
    safe_sqrt,
    scaled_hypot,
)

# Formatting
from src.core.math.formatting import (
    FIXED_NOTATION_MAX,
    FIXED_NOTATION_MIN,
    format_real,
)

__all__ = [
    # Numerical Safeguards — Constants
    "EPS_COMPLEX_COMPARE_ABS",
    "EPS_COMPLEX_COMPARE_REL",
    "LN10",
    "SQRT_RESCALE_THRESHOLD",
    # Numerical Safeguards — Checks
    "is_valid_float",
    # Numerical Safeguards — IEEE primitives
    "ieee_divide",
    "safe_atan2",
    "safe_cos",
    "safe_cosh",
    "safe_exp",
    "safe_ldexp",
    "safe_log",
    "safe_sin",
    "safe_sinh",
    "safe_sqrt",
    "scaled_hypot",
    # Formatting
    "FIXED_NOTATION_MAX",
    "FIXED_NOTATION_MIN",
    "format_real",
]
