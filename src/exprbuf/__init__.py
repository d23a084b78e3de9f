"""
exprbuf: incremental arithmetic-expression engine for calculator surfaces.

The engine accumulates an expression one key press at a time, keeps it
parseable after every edit, evaluates it with ×÷ over +- precedence and
formats the result for redisplay.
"""

from exprbuf.core.domain import DisplayState, EditOutcome, ExpressionBuffer, Operator
from exprbuf.core.math import (
    DivisionByZero,
    EvalError,
    FormatConfig,
    MalformedExpression,
    ResultOutOfRange,
    RoundingMode,
    format_result,
)
from exprbuf.engine import ExpressionEngine
from exprbuf.keypad import KeyAction, Keypad, KeyPressResult

__version__ = "0.1.0"

__all__ = [
    "ExpressionEngine",
    "ExpressionBuffer",
    "EditOutcome",
    "Operator",
    "DisplayState",
    "EvalError",
    "MalformedExpression",
    "DivisionByZero",
    "ResultOutOfRange",
    "FormatConfig",
    "RoundingMode",
    "format_result",
    "Keypad",
    "KeyPressResult",
    "KeyAction",
]
