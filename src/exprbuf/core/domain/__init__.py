"""
Domain models and value objects.

Contains the buffer alphabet (digits, operators, decimal point) and the
ExpressionBuffer value object with its edit transitions.
"""

from exprbuf.core.domain.buffer import (
    REJECT_DUPLICATE_DECIMAL,
    REJECT_OPERATOR_AFTER_DECIMAL,
    REJECT_OPERATOR_AFTER_OPERATOR,
    EditOutcome,
    ExpressionBuffer,
)
from exprbuf.core.domain.display_state import DisplayState
from exprbuf.core.domain.glyphs import (
    BUFFER_ALPHABET,
    DECIMAL_POINT,
    DIGITS,
    INITIAL_TEXT,
    OPERATOR_GLYPHS,
    Operator,
    is_digit,
    is_operator,
    parse_digit,
    parse_operator,
    to_eval_text,
)

__all__ = [
    # Glyphs
    "BUFFER_ALPHABET",
    "DECIMAL_POINT",
    "DIGITS",
    "INITIAL_TEXT",
    "OPERATOR_GLYPHS",
    "Operator",
    "is_digit",
    "is_operator",
    "parse_digit",
    "parse_operator",
    "to_eval_text",
    # Buffer
    "ExpressionBuffer",
    "EditOutcome",
    "REJECT_DUPLICATE_DECIMAL",
    "REJECT_OPERATOR_AFTER_DECIMAL",
    "REJECT_OPERATOR_AFTER_OPERATOR",
    # Snapshot
    "DisplayState",
]
