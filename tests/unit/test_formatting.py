"""
Тесты для модуля Formatting

Проверяет форму ECMAScript Number#toString:
1. Целые значения без ".0"
2. Кратчайшие round-trip цифры
3. Границы фиксированной и экспоненциальной записи
4. Специальные значения
"""

import math

import pytest

from src.core.math.formatting import (
    FIXED_NOTATION_MAX,
    FIXED_NOTATION_MIN,
    format_real,
)


class TestFormatReal:
    """Тесты для format_real"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (3.0, "3"),
            (-4.0, "-4"),
            (100.0, "100"),
            (9007199254740992.0, "9007199254740992"),
        ],
    )
    def test_integral_values_without_fraction(self, value: float, expected: str) -> None:
        """Целые значения выводятся без дробной части"""
        assert format_real(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.5, "0.5"),
            (-2.5, "-2.5"),
            (0.1, "0.1"),
            (123.456, "123.456"),
            (0.1 + 0.2, "0.30000000000000004"),
        ],
    )
    def test_shortest_round_trip_digits(self, value: float, expected: str) -> None:
        """Дробные значения: кратчайшие цифры repr()"""
        assert format_real(value) == expected

    def test_zero_and_negative_zero(self) -> None:
        """Ноль любого знака выводится как "0" """
        assert format_real(0.0) == "0"
        assert format_real(-0.0) == "0"

    def test_special_values(self) -> None:
        """nan и ±inf"""
        assert format_real(math.nan) == "NaN"
        assert format_real(math.inf) == "Infinity"
        assert format_real(-math.inf) == "-Infinity"

    def test_large_values_below_threshold_are_fixed(self) -> None:
        """До 1e21 используется фиксированная запись"""
        assert format_real(1e16) == "10000000000000000"
        assert format_real(1e20) == "100000000000000000000"
        assert format_real(1.23e20) == "123000000000000000000"

    def test_large_values_from_threshold_are_exponential(self) -> None:
        """С 1e21 используется экспоненциальная запись"""
        assert format_real(FIXED_NOTATION_MAX) == "1e+21"
        assert format_real(1.5e300) == "1.5e+300"
        assert format_real(-2e25) == "-2e+25"

    def test_small_values(self) -> None:
        """Граница 1e-6: включительно фиксированная, ниже экспоненциальная"""
        assert format_real(FIXED_NOTATION_MIN) == "0.000001"
        assert format_real(1.5e-6) == "0.0000015"
        assert format_real(1e-7) == "1e-7"
        assert format_real(1.5e-7) == "1.5e-7"
        assert format_real(5e-324) == "5e-324"

    def test_int_input(self) -> None:
        """int принимается наравне с float"""
        assert format_real(3) == "3"
