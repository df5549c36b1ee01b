"""
Domain models and value objects.

Contains the ComplexNumber value type and its functional API.
Transcendental free functions (exp, log, sqrt, ...) live in
src.core.domain.complex_functions and are not re-exported here.
"""

from src.core.domain.complex_number import ComplexNumber, RealScalar
from src.core.domain.complex_functions import (
    ComplexLike,
    as_complex,
    isclose,
)

__all__ = [
    # ComplexNumber model
    "ComplexNumber",
    "RealScalar",
    # Functional API
    "ComplexLike",
    "as_complex",
    "isclose",
]
