"""
ComplexNumber — комплексное число над парой IEEE-754 double

Immutable Pydantic модель (frozen=True): каждая операция создаёт новый
экземпляр. Составное присваивание (z += w) перепривязывает имя и никогда
не изменяет исходный объект, поэтому экземпляры безопасно разделять
между ссылками и потоками.

Операнды арифметики — замкнутое множество:
- ComplexNumber
- вещественный скаляр (numbers.Real, кроме bool), трактуется как (r, 0)
- встроенный complex конвертируется в ComplexNumber

Любой другой операнд → NotImplemented → TypeError от интерпретатора.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Числовые особые случаи (деление на ноль, log(0), переполнение) никогда
   не бросают исключение: результат nan/±inf пропагирует по IEEE-754
2. Равенство точное, покомпонентное, без epsilon
3. abs() и деление масштабируются на max-компоненту (без переполнения
   промежуточных квадратов)
4. log, sqrt и нецелые степени возвращают главное значение, arg ∈ (-π, π]
"""

import math
import numbers
from typing import Any, Union

from pydantic import BaseModel, Field

from src.core.math import (
    LN10,
    SQRT_RESCALE_THRESHOLD,
    format_real,
    ieee_divide,
    is_valid_float,
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

# Вещественный операнд арифметики
RealScalar = Union[int, float]


def _coerce_operand(other: Any) -> Union["ComplexNumber", float, None]:
    """
    Приведение операнда к одному из двух видов: ComplexNumber или float.

    Returns:
        ComplexNumber, float или None для неподдерживаемого типа
    """
    if isinstance(other, ComplexNumber):
        return other
    if isinstance(other, bool):
        return None
    if isinstance(other, numbers.Real):
        return float(other)
    if isinstance(other, complex):
        return ComplexNumber(other.real, other.imag)
    return None


def _divide_parts(a: float, b: float, c: float, d: float) -> tuple[float, float]:
    """
    (a + bi) / (c + di) без промежуточного переполнения.

    Делитель масштабируется на 2^-f, где 2^f — двоичный порядок
    s = max(|c|, |d|); делимое независимо масштабируется на 2^-e по своей
    max-компоненте. Классическая формула применяется к масштабированным
    значениям:

        ((a'c' + b'd') / (c'² + d'²), (b'c' - a'd') / (c'² + d'²))

    и результат возвращается в исходный масштаб умножением на 2^(e - f).
    После масштабирования все компоненты лежат в [-1, 1], знаменатель в
    [0.25, 2], поэтому промежуточные значения не переполняются ни при
    большом делимом, ни при малом делителе. Умножение на степень двойки
    точно: для z / z масштабированные делимое и делитель совпадают
    побитово, и результат равен (1, 0) точно.

    Особые случаи:
    - nan в делителе → (nan, nan)
    - делитель (±0, ±0) → покомпонентное IEEE-деление (a/c, b/c)
    - бесконечный делитель и конечное делимое → нули
    """
    if math.isnan(c) or math.isnan(d):
        return math.nan, math.nan

    s = max(abs(c), abs(d))
    if s == 0.0:
        return ieee_divide(a, c), ieee_divide(b, c)

    if math.isinf(s):
        if not (is_valid_float(a) and is_valid_float(b)):
            return math.nan, math.nan
        c = math.copysign(1.0 if math.isinf(c) else 0.0, c)
        d = math.copysign(1.0 if math.isinf(d) else 0.0, d)
        a = a / s
        b = b / s
        den = c * c + d * d
        return (a * c + b * d) / den, (b * c - a * d) / den

    f = math.frexp(s)[1]
    e = math.frexp(max(abs(a), abs(b)))[1]
    c = math.ldexp(c, -f)
    d = math.ldexp(d, -f)
    a = math.ldexp(a, -e)
    b = math.ldexp(b, -e)

    den = c * c + d * d
    return (
        safe_ldexp((a * c + b * d) / den, e - f),
        safe_ldexp((b * c - a * d) / den, e - f),
    )


class ComplexNumber(BaseModel):
    """
    Комплексное число real + imag·i.

    Формы конструирования:
        ComplexNumber()           → (0, 0)
        ComplexNumber(r)          → (r, 0)
        ComplexNumber(r, i)       → (r, i)
        ComplexNumber(real=r, imag=i)

    Strict-режим: принимаются int и float, str/bool/None → ValidationError.
    Значения компонент не ограничены: nan и ±inf допустимы.
    """

    real: float = Field(default=0.0, description="Вещественная часть")
    imag: float = Field(default=0.0, description="Мнимая часть")

    model_config = {"frozen": True, "strict": True}  # Immutable

    def __init__(self, real: RealScalar = 0.0, imag: RealScalar = 0.0) -> None:
        super().__init__(real=real, imag=imag)

    @classmethod
    def polar(cls, rho: RealScalar, theta: RealScalar) -> "ComplexNumber":
        """
        Конструирование из полярных координат: (ρ·cos θ, ρ·sin θ).

        При θ == 0 возвращается (ρ, θ): иначе ρ = inf дал бы inf·0 = nan
        в мнимой части.

        Args:
            rho: Модуль
            theta: Аргумент (радианы)
        """
        if theta == 0.0:
            return cls(rho, theta)
        return cls(rho * safe_cos(theta), rho * safe_sin(theta))

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __pos__(self) -> "ComplexNumber":
        return self

    def __neg__(self) -> "ComplexNumber":
        return ComplexNumber(-self.real, -self.imag)

    def __add__(self, other: Any) -> "ComplexNumber":
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        if isinstance(operand, ComplexNumber):
            return ComplexNumber(self.real + operand.real, self.imag + operand.imag)
        return ComplexNumber(self.real + operand, self.imag)

    def __radd__(self, other: Any) -> "ComplexNumber":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "ComplexNumber":
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        if isinstance(operand, ComplexNumber):
            return ComplexNumber(self.real - operand.real, self.imag - operand.imag)
        return ComplexNumber(self.real - operand, self.imag)

    def __rsub__(self, other: Any) -> "ComplexNumber":
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        if isinstance(operand, ComplexNumber):
            return operand.__sub__(self)
        return ComplexNumber(operand - self.real, -self.imag)

    def __mul__(self, other: Any) -> "ComplexNumber":
        """(a,b)*(c,d) = (ac - bd, ad + bc); скаляр: (a·r, b·r)."""
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        if isinstance(operand, ComplexNumber):
            a, b = self.real, self.imag
            c, d = operand.real, operand.imag
            return ComplexNumber(a * c - b * d, a * d + b * c)
        return ComplexNumber(self.real * operand, self.imag * operand)

    def __rmul__(self, other: Any) -> "ComplexNumber":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "ComplexNumber":
        """
        Деление на комплексное число или скаляр.

        Комплексный делитель: масштабированная формула (_divide_parts).
        Скалярный делитель: (a/r, b/r) с IEEE-семантикой деления на ноль.

        Examples:
            >>> ComplexNumber(1, 0) / ComplexNumber(0, 0)
            ComplexNumber(real=inf, imag=nan)
        """
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        if isinstance(operand, ComplexNumber):
            return ComplexNumber(
                *_divide_parts(self.real, self.imag, operand.real, operand.imag)
            )
        return ComplexNumber(ieee_divide(self.real, operand), ieee_divide(self.imag, operand))

    def __rtruediv__(self, other: Any) -> "ComplexNumber":
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        if isinstance(operand, ComplexNumber):
            return operand.__truediv__(self)
        return ComplexNumber(*_divide_parts(operand, 0.0, self.real, self.imag))

    def __pow__(self, other: Any) -> "ComplexNumber":
        if _coerce_operand(other) is None:
            return NotImplemented
        return self.pow(other)

    def __rpow__(self, other: Any) -> "ComplexNumber":
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        if isinstance(operand, ComplexNumber):
            return operand.pow(self)
        return ComplexNumber(operand).pow(self)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        """
        Точное покомпонентное равенство IEEE-754.

        Скаляр равен только при imag == 0. nan не равен ничему.
        """
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        if isinstance(operand, ComplexNumber):
            return self.real == operand.real and self.imag == operand.imag
        return self.real == operand and self.imag == 0.0

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # Согласован с float и complex: hash(ComplexNumber(3, 0)) == hash(3.0)
        return hash(complex(self.real, self.imag))

    def __bool__(self) -> bool:
        return self.real != 0.0 or self.imag != 0.0

    # Число, а не контейнер полей: list(z) → TypeError
    __iter__ = None  # type: ignore[assignment]

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __abs__(self) -> float:
        return self.abs()

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        """
        Текстовое представление: "<real>" при imag == 0, иначе "<real> + <imag>i".

        Знак мнимой части не обрабатывается отдельно:
        ComplexNumber(3, -4) → "3 + -4i".

        Examples:
            >>> ComplexNumber(3, 4).to_string()
            '3 + 4i'
            >>> ComplexNumber(3, 0).to_string()
            '3'
        """
        if self.imag == 0.0:
            return format_real(self.real)
        return f"{format_real(self.real)} + {format_real(self.imag)}i"

    # =========================================================================
    # МОДУЛЬ И АРГУМЕНТ
    # =========================================================================

    def abs(self) -> float:
        """
        Модуль |z| по scaled hypotenuse.

        m = max(|real|, |imag|); m * sqrt((real/m)² + (imag/m)²).
        Не переполняется для компонент порядка 1e308.
        """
        return scaled_hypot(self.real, self.imag)

    def arg(self) -> float:
        """
        Главное значение аргумента, atan2(imag, real) ∈ (-π, π].

        Отрицательный ноль в мнимой части на отрицательной полуоси даёт +π,
        а не -π.
        """
        theta = safe_atan2(self.imag, self.real)
        if self.imag == 0.0:
            return abs(theta)
        return theta

    def conj(self) -> "ComplexNumber":
        return ComplexNumber(self.real, -self.imag)

    def conjugate(self) -> "ComplexNumber":
        return self.conj()

    def norm(self) -> float:
        """Квадрат модуля, abs()²."""
        r = self.abs()
        return r * r

    def to_polar(self) -> tuple[float, float]:
        """Полярные координаты (abs, arg)."""
        return self.abs(), self.arg()

    # =========================================================================
    # КЛАССИФИКАЦИЯ
    # =========================================================================

    def is_finite(self) -> bool:
        return is_valid_float(self.real) and is_valid_float(self.imag)

    def is_nan(self) -> bool:
        return math.isnan(self.real) or math.isnan(self.imag)

    def is_infinite(self) -> bool:
        return math.isinf(self.real) or math.isinf(self.imag)

    # =========================================================================
    # ЭКСПОНЕНТА, ЛОГАРИФМ, СТЕПЕНЬ, КОРЕНЬ
    # =========================================================================

    def exp(self) -> "ComplexNumber":
        """exp(z) = polar(exp(real), imag)."""
        return ComplexNumber.polar(safe_exp(self.real), self.imag)

    def log(self) -> "ComplexNumber":
        """
        Натуральный логарифм, главная ветвь: (log|z|, arg z).

        Мнимая часть всегда в (-π, π]. log(0) = (-inf, 0).
        """
        return ComplexNumber(safe_log(self.abs()), self.arg())

    def log10(self) -> "ComplexNumber":
        return self.log() / LN10

    def pow(self, exponent: Any) -> "ComplexNumber":
        """
        Степень exp(exponent · log(z)) для вещественного или комплексного показателя.

        Возвращается главное значение, а не все ветви: поэтому
        (z²)^(1/2) != z в общем случае (например, z = -1 - i).
        pow(0, 0) следует формуле и даёт nan.

        Комплексный показатель с imag == 0 умножается как скаляр:
        иначе (-inf, 0) · (2, 0) дало бы -inf·0 = nan для z = 0.

        Args:
            exponent: ComplexNumber, вещественный скаляр или complex

        Raises:
            TypeError: Если показатель неподдерживаемого типа
        """
        operand = _coerce_operand(exponent)
        if operand is None:
            raise TypeError(
                f"unsupported exponent type for ComplexNumber.pow: {type(exponent).__name__}"
            )
        if isinstance(operand, ComplexNumber) and operand.imag == 0.0:
            operand = operand.real
        return (self.log() * operand).exp()

    def sqrt(self) -> "ComplexNumber":
        """
        Главный квадратный корень (построение Муавра через половинный угол).

        real == 0:
            t = sqrt(|imag| / 2)  →  (t, sign(imag)·t)
        иначе:
            t = sqrt(2·(|z| + |real|)), u = t / 2
            real >= 0  →  (u, imag / t)
            real < 0   →  (|imag| / t, sign(imag)·u)

        При max-компоненте выше SQRT_RESCALE_THRESHOLD 2·(|z| + |real|)
        переполнился бы: считается sqrt(z / 16) · 4 (масштаб степенью двойки
        точен).
        """
        a, b = self.real, self.imag
        if a == 0.0:
            t = safe_sqrt(abs(b) / 2.0)
            return ComplexNumber(t, -t if b < 0.0 else t)

        scale = 1.0
        if max(abs(a), abs(b)) > SQRT_RESCALE_THRESHOLD:
            a, b, scale = a / 16.0, b / 16.0, 4.0

        t = safe_sqrt(2.0 * (scaled_hypot(a, b) + abs(a)))
        u = t / 2.0
        if a >= 0.0:
            return ComplexNumber(u * scale, ieee_divide(b, t) * scale)
        return ComplexNumber(ieee_divide(abs(b), t) * scale, (-u if b < 0.0 else u) * scale)

    # =========================================================================
    # ТРИГОНОМЕТРИЯ
    # =========================================================================

    def cos(self) -> "ComplexNumber":
        a, b = self.real, self.imag
        return ComplexNumber(safe_cos(a) * safe_cosh(b), -safe_sin(a) * safe_sinh(b))

    def sin(self) -> "ComplexNumber":
        a, b = self.real, self.imag
        return ComplexNumber(safe_sin(a) * safe_cosh(b), safe_cos(a) * safe_sinh(b))

    def tan(self) -> "ComplexNumber":
        return self.sin() / self.cos()

    # =========================================================================
    # ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
    # =========================================================================

    def cosh(self) -> "ComplexNumber":
        a, b = self.real, self.imag
        return ComplexNumber(safe_cosh(a) * safe_cos(b), safe_sinh(a) * safe_sin(b))

    def sinh(self) -> "ComplexNumber":
        a, b = self.real, self.imag
        return ComplexNumber(safe_sinh(a) * safe_cos(b), safe_cosh(a) * safe_sin(b))

    def tanh(self) -> "ComplexNumber":
        return self.sinh() / self.cosh()
