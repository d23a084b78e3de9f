"""
Core math modules для exprbuf

Вычисление выражений буфера и форматирование результата.
"""

# Evaluator
from exprbuf.core.math.evaluator import (
    EVAL_OPERATORS,
    DivisionByZero,
    EvalError,
    MalformedExpression,
    ResultOutOfRange,
    evaluate_expression,
    evaluate_tokens,
    tokenize,
)

# Formatting
from exprbuf.core.math.formatting import (
    DEFAULT_PRECISION,
    MAX_PRECISION,
    FormatConfig,
    RoundingMode,
    format_result,
)

__all__ = [
    # Evaluator: Constants
    "EVAL_OPERATORS",
    # Evaluator: Exceptions
    "EvalError",
    "MalformedExpression",
    "DivisionByZero",
    "ResultOutOfRange",
    # Evaluator: Functions
    "tokenize",
    "evaluate_tokens",
    "evaluate_expression",
    # Formatting: Constants
    "DEFAULT_PRECISION",
    "MAX_PRECISION",
    # Formatting: Types
    "FormatConfig",
    "RoundingMode",
    # Formatting: Functions
    "format_result",
]
