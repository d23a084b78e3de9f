"""
Formatting: Форматирование результата для буфера

Правила:
- не более FormatConfig.precision дробных цифр (по умолчанию 4)
- округление half-up (от нуля) по десятичному repr float; half-even по выбору
- хвостовые нули дробной части убираются вместе с '.' ("4.0" → "4")
- "-0" нормализуется в "0"
- только fixed-point, без экспоненты: строка остаётся в алфавите буфера

Округление выполняется в Decimal от кратчайшего repr значения, поэтому
5.12345 → "5.1235", хотя двоичное представление 5.12345 чуть меньше.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Context, Decimal
from enum import Enum
from typing import Final, Optional


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DEFAULT_PRECISION: Final[int] = 4

MAX_PRECISION: Final[int] = 12

# Достаточно для любого конечного float в fixed-point (1.8e308) плюс дробная часть
_DECIMAL_CONTEXT_PREC: Final[int] = 400


class RoundingMode(str, Enum):
    """Режим округления на границе .5"""

    HALF_UP = "half_up"
    HALF_EVEN = "half_even"


_DECIMAL_ROUNDING: Final[dict[RoundingMode, str]] = {
    RoundingMode.HALF_UP: ROUND_HALF_UP,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
}


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация форматирования результата."""

    precision: int = DEFAULT_PRECISION
    rounding: RoundingMode = RoundingMode.HALF_UP

    def __post_init__(self):
        if not 0 <= self.precision <= MAX_PRECISION:
            raise ValueError(
                f"precision must be in range 0-{MAX_PRECISION}, got {self.precision}"
            )
        # Принимаем и строковое значение ("half_even") из настроек
        object.__setattr__(self, "rounding", RoundingMode(self.rounding))


# =============================================================================
# FORMAT
# =============================================================================


def format_result(value: float, config: Optional[FormatConfig] = None) -> str:
    """
    Форматирование результата вычисления в display string.

    Args:
        value: Конечный float
        config: Точность и режим округления (default: 4 знака, half-up)

    Returns:
        Строка вида "14", "3.5", "-0.3333"

    Raises:
        ValueError: Если value равно NaN или Inf

    Examples:
        >>> format_result(4.0)
        '4'
        >>> format_result(5.123456)
        '5.1235'
        >>> format_result(1 / 3)
        '0.3333'
        >>> format_result(-0.00001)
        '0'
    """
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value {value}")

    cfg = config or FormatConfig()
    context = Context(prec=_DECIMAL_CONTEXT_PREC, rounding=_DECIMAL_ROUNDING[cfg.rounding])

    # repr даёт кратчайшую строку, которая читается обратно в тот же float
    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-cfg.precision)
    rounded = exact.quantize(quantum, context=context)

    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    if text in ("-0", ""):
        return "0"
    return text
