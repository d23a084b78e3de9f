"""
Тесты для Formatting: форматирование результата

Проверяемые инварианты:
1. Не более precision дробных цифр
2. Хвостовые нули и '.' удаляются
3. Half-up по умолчанию, half-even по выбору
4. Результат всегда в алфавите буфера (fixed-point, без экспоненты)
"""

import math

import pytest

from exprbuf.core.domain import ExpressionBuffer
from exprbuf.core.math.formatting import (
    DEFAULT_PRECISION,
    FormatConfig,
    RoundingMode,
    format_result,
)


class TestFormatResult:
    """Тесты format_result с конфигурацией по умолчанию."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (4.0, "4"),
            (14.0, "14"),
            (3.5, "3.5"),
            (5.12, "5.12"),
            (5.123456, "5.1235"),
            (1 / 3, "0.3333"),
            (2 / 3, "0.6667"),
            (0.1 + 0.2, "0.3"),
            (-2.5, "-2.5"),
            (0.0, "0"),
            (-0.0, "0"),
        ],
    )
    def test_values(self, value, expected) -> None:
        assert format_result(value) == expected

    def test_default_precision_is_four(self) -> None:
        assert DEFAULT_PRECISION == 4

    def test_tiny_negative_normalizes_to_zero(self) -> None:
        assert format_result(-0.00001) == "0"

    def test_half_up_at_boundary(self) -> None:
        assert format_result(2.00005) == "2.0001"
        assert format_result(-2.00005) == "-2.0001"

    def test_large_value_fixed_point(self) -> None:
        assert format_result(1e20) == "100000000000000000000"

    def test_small_value_no_exponent(self) -> None:
        assert format_result(0.00012) == "0.0001"

    def test_result_is_valid_buffer(self) -> None:
        for value in (1e20, -123.456789, 0.5, -0.00001, 7 / 3):
            buf = ExpressionBuffer.from_result(format_result(value))
            assert "e" not in buf.text.lower()

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_raises(self, value) -> None:
        with pytest.raises(ValueError, match="non-finite"):
            format_result(value)


class TestFormatConfig:
    """Тесты FormatConfig."""

    def test_half_even(self) -> None:
        cfg = FormatConfig(rounding=RoundingMode.HALF_EVEN)
        assert format_result(2.00005, cfg) == "2"
        assert format_result(2.00015, cfg) == "2.0002"

    def test_string_rounding_accepted(self) -> None:
        cfg = FormatConfig(rounding="half_even")
        assert cfg.rounding is RoundingMode.HALF_EVEN

    def test_precision_zero(self) -> None:
        cfg = FormatConfig(precision=0)
        assert format_result(2.5, cfg) == "3"
        assert format_result(1 / 3, cfg) == "0"

    def test_higher_precision(self) -> None:
        cfg = FormatConfig(precision=8)
        assert format_result(1 / 3, cfg) == "0.33333333"

    @pytest.mark.parametrize("precision", [-1, 13])
    def test_invalid_precision_raises(self, precision) -> None:
        with pytest.raises(ValueError, match="precision"):
            FormatConfig(precision=precision)

    def test_invalid_rounding_raises(self) -> None:
        with pytest.raises(ValueError):
            FormatConfig(rounding="ceiling")

    def test_frozen(self) -> None:
        cfg = FormatConfig()
        with pytest.raises(AttributeError):
            cfg.precision = 2  # type: ignore
