"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. IEEE-деление (деление на ноль без исключений)
2. Экспоненту/логарифм/корень на границах области определения
3. Тригонометрию и гиперболические функции при переполнении
4. Scaled hypotenuse без промежуточного переполнения
5. Масштабирование степенью двойки (safe_ldexp)
6. Проверку конечности и логирование особых случаев
"""

import logging
import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_COMPLEX_COMPARE_ABS,
    EPS_COMPLEX_COMPARE_REL,
    LN10,
    SQRT_RESCALE_THRESHOLD,
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

# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestConstants:
    """Тесты констант модуля"""

    def test_ln10(self) -> None:
        """LN10 равен натуральному логарифму 10"""
        assert LN10 == math.log(10.0)

    def test_tolerances_positive(self) -> None:
        """Толерантности положительные и малые"""
        assert 0 < EPS_COMPLEX_COMPARE_ABS < EPS_COMPLEX_COMPARE_REL < 1e-6

    def test_sqrt_rescale_threshold_leaves_headroom(self) -> None:
        """2·(|z| + |real|) ниже порога не переполняется"""
        assert math.isfinite(2.0 * (1.0 + math.sqrt(2.0)) * SQRT_RESCALE_THRESHOLD)


# =============================================================================
# ТЕСТЫ IEEE-ДЕЛЕНИЯ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_regular_division(self) -> None:
        """Обычное деление не меняется"""
        assert ieee_divide(6.0, 3.0) == 2.0
        assert ieee_divide(-1.0, 4.0) == -0.25

    def test_positive_by_zero_is_inf(self) -> None:
        """x / +0 → +inf"""
        assert ieee_divide(1.0, 0.0) == math.inf

    def test_sign_of_zero_respected(self) -> None:
        """Знак нуля в делителе учитывается"""
        assert ieee_divide(1.0, -0.0) == -math.inf
        assert ieee_divide(-1.0, 0.0) == -math.inf
        assert ieee_divide(-1.0, -0.0) == math.inf

    def test_zero_by_zero_is_nan(self) -> None:
        """0 / 0 → nan"""
        assert math.isnan(ieee_divide(0.0, 0.0))

    def test_nan_by_zero_is_nan(self) -> None:
        """nan / 0 → nan"""
        assert math.isnan(ieee_divide(math.nan, 0.0))

    def test_inf_by_zero_is_inf(self) -> None:
        """inf / 0 → inf"""
        assert ieee_divide(math.inf, 0.0) == math.inf

    def test_division_by_zero_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Деление на ноль пишет DEBUG-запись"""
        caplog.set_level(logging.DEBUG, logger="src.core.math.numerical_safeguards")
        ieee_divide(1.0, 0.0)
        assert any("ieee_divide" in record.getMessage() for record in caplog.records)


class TestSafeLdexp:
    """Тесты для safe_ldexp"""

    def test_exact_power_of_two_scaling(self) -> None:
        """Умножение на 2^k точно"""
        assert safe_ldexp(0.75, 3) == 6.0
        assert safe_ldexp(3.0, -2) == 0.75

    def test_overflow_gives_signed_inf(self) -> None:
        """Переполнение → ±inf вместо OverflowError"""
        assert safe_ldexp(1.5, 1024) == math.inf
        assert safe_ldexp(-1.5, 1024) == -math.inf

    def test_underflow_gives_zero(self) -> None:
        """Антипереполнение → 0"""
        assert safe_ldexp(1.0, -2000) == 0.0

    def test_special_values_pass_through(self) -> None:
        """inf, nan и ноль не меняются"""
        assert safe_ldexp(math.inf, -10) == math.inf
        assert math.isnan(safe_ldexp(math.nan, 10))
        assert safe_ldexp(0.0, 5000) == 0.0


# =============================================================================
# ТЕСТЫ ЭКСПОНЕНТЫ, ЛОГАРИФМА, КОРНЯ
# =============================================================================


class TestSafeExpLog:
    """Тесты для safe_exp, safe_log, safe_sqrt"""

    def test_exp_regular(self) -> None:
        """Обычные значения"""
        assert safe_exp(0.0) == 1.0
        assert safe_exp(1.0) == pytest.approx(math.e)

    def test_exp_overflow_is_inf(self) -> None:
        """Переполнение даёт inf вместо OverflowError"""
        assert safe_exp(1000.0) == math.inf

    def test_exp_of_minus_inf_is_zero(self) -> None:
        """exp(-inf) = 0"""
        assert safe_exp(-math.inf) == 0.0

    def test_log_of_zero_is_minus_inf(self) -> None:
        """log(±0) = -inf вместо ValueError"""
        assert safe_log(0.0) == -math.inf
        assert safe_log(-0.0) == -math.inf

    def test_log_of_negative_is_nan(self) -> None:
        """log(x < 0) = nan"""
        assert math.isnan(safe_log(-1.0))

    def test_log_regular(self) -> None:
        """Обычные значения"""
        assert safe_log(1.0) == 0.0
        assert safe_log(math.e) == pytest.approx(1.0)
        assert safe_log(math.inf) == math.inf

    def test_sqrt(self) -> None:
        """sqrt: обычные значения и отрицательный аргумент"""
        assert safe_sqrt(4.0) == 2.0
        assert safe_sqrt(math.inf) == math.inf
        assert math.isnan(safe_sqrt(-1.0))


# =============================================================================
# ТЕСТЫ ТРИГОНОМЕТРИИ
# =============================================================================


class TestSafeTrigonometry:
    """Тесты для safe_sin, safe_cos, safe_sinh, safe_cosh, safe_atan2"""

    def test_sin_cos_regular(self) -> None:
        """Обычные значения"""
        assert safe_sin(0.0) == 0.0
        assert safe_cos(0.0) == 1.0
        assert safe_sin(math.pi / 2) == pytest.approx(1.0)

    def test_sin_cos_of_infinity_is_nan(self) -> None:
        """sin/cos(±inf) = nan вместо ValueError"""
        assert math.isnan(safe_sin(math.inf))
        assert math.isnan(safe_cos(-math.inf))

    def test_sinh_overflow_keeps_sign(self) -> None:
        """sinh при переполнении: ±inf со знаком аргумента"""
        assert safe_sinh(1000.0) == math.inf
        assert safe_sinh(-1000.0) == -math.inf

    def test_cosh_overflow_is_inf(self) -> None:
        """cosh при переполнении: +inf"""
        assert safe_cosh(1000.0) == math.inf
        assert safe_cosh(-1000.0) == math.inf

    def test_atan2(self) -> None:
        """atan2 тотальна"""
        assert safe_atan2(1.0, 0.0) == math.pi / 2
        assert safe_atan2(0.0, -1.0) == math.pi
        assert math.isnan(safe_atan2(math.nan, 1.0))


# =============================================================================
# ТЕСТЫ SCALED HYPOTENUSE
# =============================================================================


class TestScaledHypot:
    """Тесты для scaled_hypot"""

    def test_pythagorean_triple_exact(self) -> None:
        """3-4-5 вычисляется точно"""
        assert scaled_hypot(3.0, 4.0) == 5.0
        assert scaled_hypot(-3.0, -4.0) == 5.0

    def test_zero(self) -> None:
        """Нулевой вектор"""
        assert scaled_hypot(0.0, 0.0) == 0.0

    def test_near_max_double_does_not_overflow(self) -> None:
        """Компоненты ~1e308: наивная формула дала бы inf"""
        result = scaled_hypot(1e308, 1e308)
        assert math.isfinite(result)
        assert result == pytest.approx(math.sqrt(2.0) * 1e308)

    def test_subnormal_does_not_underflow(self) -> None:
        """Компоненты ~1e-310: наивная формула дала бы 0"""
        assert scaled_hypot(1e-310, 1e-310) > 0.0

    def test_infinite_component_wins_over_nan(self) -> None:
        """Бесконечная компонента даёт inf даже при nan"""
        assert scaled_hypot(math.inf, math.nan) == math.inf
        assert scaled_hypot(math.nan, -math.inf) == math.inf

    def test_nan_propagates(self) -> None:
        """nan без inf пропагирует"""
        assert math.isnan(scaled_hypot(math.nan, 1.0))
        assert math.isnan(scaled_hypot(1.0, math.nan))


# =============================================================================
# ТЕСТЫ ПРОВЕРОК
# =============================================================================


class TestChecks:
    """Тесты для is_valid_float"""

    def test_is_valid_float(self) -> None:
        """Только конечные значения валидны"""
        assert is_valid_float(1.0)
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
