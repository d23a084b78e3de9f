"""
Evaluator: Двухуровневый вычислитель выражений буфера

Специализированный вычислитель вместо универсального eval():
- tokenize: text → чередующаяся последовательность операнд/оператор
- первый проход сворачивает '*' и '/' (высокий приоритет)
- второй проход сворачивает '+' и '-' слева направо

Ошибки классифицируются точно:
- MalformedExpression: текст не является последовательностью
  операнд (оператор операнд)*, например заканчивается оператором или '.'
- DivisionByZero: правый операнд '/' равен нулю
- ResultOutOfRange: операнд или результат вне диапазона float (inf/NaN)

Деление всегда float: 7÷2 → 3.5.
"""

import math
import re
from typing import Final, Union

from exprbuf.core.domain.glyphs import DECIMAL_POINT, Operator, to_eval_text


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ADD: Final[str] = Operator.ADD.eval_glyph
SUBTRACT: Final[str] = Operator.SUBTRACT.eval_glyph
MULTIPLY: Final[str] = Operator.MULTIPLY.eval_glyph
DIVIDE: Final[str] = Operator.DIVIDE.eval_glyph

EVAL_OPERATORS: Final[frozenset[str]] = frozenset((ADD, SUBTRACT, MULTIPLY, DIVIDE))

# Операнд: "12", "12.5" или ".5" (только ASCII-цифры); "12." допустим только в процессе набора
_OPERAND_RE: Final[re.Pattern[str]] = re.compile(r"(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)\Z")

Token = Union[float, str]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EvalError(Exception):
    """
    Базовая ошибка вычисления.

    kind: стабильный идентификатор для presentation layer.
    Буфер при ошибке не меняется, сессия остаётся рабочей.
    """

    kind: str = "eval_error"

    def __init__(self, message: str, expression: str = ""):
        super().__init__(message)
        self.expression = expression


class MalformedExpression(EvalError):
    """Текст не разбирается как операнд (оператор операнд)*."""

    kind = "malformed_expression"


class DivisionByZero(EvalError):
    """Правый операнд деления равен нулю."""

    kind = "division_by_zero"


class ResultOutOfRange(EvalError):
    """Операнд или результат не является конечным float."""

    kind = "result_out_of_range"


# =============================================================================
# TOKENIZER
# =============================================================================


def tokenize(text: str) -> list[Token]:
    """
    Разбор текста буфера на чередующиеся операнды (float) и операторы.

    Допускается один ведущий '-' (знак отрицательного результата); он
    применяется к первому операнду.

    Args:
        text: Текст в display или evaluation glyphs

    Returns:
        [operand, op, operand, ..., operand]

    Raises:
        MalformedExpression: При нарушении грамматики
        ResultOutOfRange: Если операнд не помещается в float

    Examples:
        >>> tokenize("2+3×4")
        [2.0, '+', 3.0, '*', 4.0]
        >>> tokenize("-1.5÷3")
        [-1.5, '/', 3.0]
    """
    expr = to_eval_text(text)

    if not expr:
        raise MalformedExpression("expression is empty", text)
    if expr[-1] in EVAL_OPERATORS:
        raise MalformedExpression(f"expression ends with operator {text[-1]!r}", text)
    if expr[-1] == DECIMAL_POINT:
        raise MalformedExpression("expression ends with a decimal point", text)

    negative = expr[0] == SUBTRACT
    start = 1 if negative else 0

    tokens: list[Token] = []
    operand_start = start
    for i in range(start, len(expr)):
        char = expr[i]
        if char in EVAL_OPERATORS:
            tokens.append(_parse_operand(expr[operand_start:i], text))
            tokens.append(char)
            operand_start = i + 1
    tokens.append(_parse_operand(expr[operand_start:], text))

    if negative:
        tokens[0] = -tokens[0]

    return tokens


def _parse_operand(run: str, expression: str) -> float:
    if not run:
        raise MalformedExpression("missing operand next to an operator", expression)
    if not _OPERAND_RE.match(run):
        raise MalformedExpression(f"invalid operand {run!r}", expression)

    value = float(run)
    if not math.isfinite(value):
        raise ResultOutOfRange(f"operand {run[:16]}... exceeds float range", expression)
    return value


# =============================================================================
# EVALUATION
# =============================================================================


def evaluate_tokens(tokens: list[Token], expression: str = "") -> float:
    """
    Вычисление токенов с приоритетом ×÷ над +- и левой ассоциативностью.

    Проход 1: каждая цепочка умножений/делений сворачивается в один term.
    Проход 2: terms складываются/вычитаются слева направо.

    Raises:
        MalformedExpression: Если токены не чередуются операнд/оператор
        DivisionByZero: Если делитель равен нулю
        ResultOutOfRange: Если результат inf или NaN
    """
    if not tokens or len(tokens) % 2 == 0:
        raise MalformedExpression("token sequence must be operand (operator operand)*", expression)

    terms: list[float] = [tokens[0]]
    additive_ops: list[str] = []

    for i in range(1, len(tokens), 2):
        op = tokens[i]
        right = tokens[i + 1]

        if op == MULTIPLY:
            terms[-1] = terms[-1] * right
        elif op == DIVIDE:
            if right == 0.0:
                raise DivisionByZero("division by zero", expression)
            terms[-1] = terms[-1] / right
        elif op in (ADD, SUBTRACT):
            additive_ops.append(op)
            terms.append(right)
        else:
            raise MalformedExpression(f"unknown operator {op!r}", expression)

    result = terms[0]
    for op, term in zip(additive_ops, terms[1:]):
        if op == ADD:
            result = result + term
        else:
            result = result - term

    if not math.isfinite(result):
        raise ResultOutOfRange(f"result {result} is outside the float range", expression)

    return result


def evaluate_expression(text: str) -> float:
    """
    Вычисление текста буфера без сессии.

    Examples:
        >>> evaluate_expression("2+3×4")
        14.0
        >>> evaluate_expression("7÷2")
        3.5
    """
    return evaluate_tokens(tokenize(text), text)
