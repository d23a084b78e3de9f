"""
Glyphs: Алфавит буфера выражения

Единственное место, где определяются символы, допустимые в буфере:
- цифры 0-9
- десятичная точка '.'
- операторы в display-форме: '+', '-', '×', '÷'

Display glyph (то, что видит пользователь на кнопке) отличается от
evaluation glyph (то, что понимает вычислитель) только для умножения и
деления. Перевод между ними чисто лексический и выполняется только перед
вычислением.
"""

from enum import Enum
from typing import Final, Union


# =============================================================================
# КОНСТАНТЫ АЛФАВИТА
# =============================================================================

# Начальное ("пустое") состояние буфера
INITIAL_TEXT: Final[str] = "0"

DECIMAL_POINT: Final[str] = "."

DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# ОПЕРАТОРЫ
# =============================================================================


class Operator(str, Enum):
    """
    Бинарный оператор буфера.

    Значение enum равно display glyph, именно он хранится в буфере.
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def eval_glyph(self) -> str:
        """Символ оператора для вычислителя."""
        return _EVAL_GLYPHS[self]

    @property
    def precedence(self) -> int:
        """Уровень приоритета: 2 для ×÷, 1 для +-."""
        if self in (Operator.MULTIPLY, Operator.DIVIDE):
            return 2
        return 1


_EVAL_GLYPHS: Final[dict[Operator, str]] = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "-",
    Operator.MULTIPLY: "*",
    Operator.DIVIDE: "/",
}

# Альтернативные написания, которые приходят с клавиатуры или из API.
# Все нормализуются в display glyph.
_OPERATOR_ALIASES: Final[dict[str, Operator]] = {
    "+": Operator.ADD,
    "-": Operator.SUBTRACT,
    "−": Operator.SUBTRACT,
    "×": Operator.MULTIPLY,
    "*": Operator.MULTIPLY,
    "x": Operator.MULTIPLY,
    "X": Operator.MULTIPLY,
    "÷": Operator.DIVIDE,
    "/": Operator.DIVIDE,
    ":": Operator.DIVIDE,
}

OPERATOR_GLYPHS: Final[frozenset[str]] = frozenset(op.value for op in Operator)

# Все символы, которые могут находиться в буфере
BUFFER_ALPHABET: Final[frozenset[str]] = DIGITS | OPERATOR_GLYPHS | {DECIMAL_POINT}


# =============================================================================
# ПРЕДИКАТЫ И ПАРСИНГ
# =============================================================================


def is_digit(char: str) -> bool:
    return char in DIGITS


def is_operator(char: str) -> bool:
    """True если char является display glyph оператора."""
    return char in OPERATOR_GLYPHS


def parse_digit(value: Union[str, int]) -> str:
    """
    Нормализация цифры в односимвольную строку.

    Args:
        value: '0'-'9' или int 0-9

    Returns:
        Односимвольная строка цифры

    Raises:
        ValueError: Если value не является цифрой
    """
    # bool является подклассом int, но не цифрой
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value <= 9:
            return str(value)
        raise ValueError(f"digit must be in range 0-9, got {value}")

    if isinstance(value, str) and len(value) == 1 and is_digit(value):
        return value

    raise ValueError(f"digit must be a single character 0-9, got {value!r}")


def parse_operator(value: Union[str, Operator]) -> Operator:
    """
    Нормализация оператора (display, evaluation или alias glyph) в Operator.

    Examples:
        >>> parse_operator("*")
        <Operator.MULTIPLY: '×'>
        >>> parse_operator(Operator.ADD)
        <Operator.ADD: '+'>

    Raises:
        ValueError: Если glyph не распознан
    """
    if isinstance(value, Operator):
        return value

    try:
        return _OPERATOR_ALIASES[value]
    except (KeyError, TypeError):
        raise ValueError(f"unknown operator glyph: {value!r}") from None


def to_eval_text(text: str) -> str:
    """
    Лексический перевод display glyphs в evaluation glyphs.

    Только замена символов: приоритеты и структура выражения не меняются.

    Examples:
        >>> to_eval_text("2+3×4÷2")
        '2+3*4/2'
    """
    for op in (Operator.MULTIPLY, Operator.DIVIDE):
        text = text.replace(op.value, op.eval_glyph)
    return text
