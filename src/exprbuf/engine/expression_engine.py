"""ExpressionEngine: сессия калькулятора над одним буфером выражения.

Движок владеет единственным изменяемым состоянием: текущим ExpressionBuffer.
- Редактирующие операции (digit/operator/decimal/backspace/clear) никогда не
  падают на валидном вводе; недопустимое редактирование молча отклоняется
- evaluate() заменяет буфер отформатированным результатом или поднимает
  EvalError, оставляя буфер без изменений

Однопоточный синхронный объект: один движок на одну интерактивную сессию.
"""

from typing import Optional, Union

import structlog

from exprbuf.core.domain.buffer import EditOutcome, ExpressionBuffer
from exprbuf.core.domain.glyphs import Operator
from exprbuf.core.math.evaluator import EvalError, evaluate_expression
from exprbuf.core.math.formatting import FormatConfig, format_result

logger = structlog.get_logger()


class ExpressionEngine:
    """Engine над буфером выражения калькулятора.

    Args:
        format_config: точность и режим округления результата
            (default: 4 знака, half-up)
    """

    def __init__(self, format_config: Optional[FormatConfig] = None):
        self.format_config = format_config or FormatConfig()
        self._buffer = ExpressionBuffer.initial()

    @property
    def buffer(self) -> ExpressionBuffer:
        """Текущий буфер (immutable снапшот)."""
        return self._buffer

    def current_display(self) -> str:
        """Текст буфера для отображения. Состояние не меняет."""
        return self._buffer.text

    # -------------------------------------------------------------------------
    # Edit operations
    # -------------------------------------------------------------------------

    def append_digit(self, digit: Union[str, int]) -> EditOutcome:
        return self._apply("append_digit", self._buffer.with_digit(digit))

    def append_operator(self, op: Union[str, Operator]) -> EditOutcome:
        return self._apply("append_operator", self._buffer.with_operator(op))

    def append_decimal(self) -> EditOutcome:
        return self._apply("append_decimal", self._buffer.with_decimal())

    def backspace(self) -> EditOutcome:
        return self._apply("backspace", self._buffer.without_last())

    def clear(self) -> EditOutcome:
        """Сброс буфера в начальное "0"."""
        return self._apply("clear", EditOutcome.accept(ExpressionBuffer.initial()))

    def _apply(self, action: str, outcome: EditOutcome) -> EditOutcome:
        if outcome.accepted:
            self._buffer = outcome.buffer
        else:
            logger.debug(
                "Edit rejected",
                action=action,
                reason=outcome.reject_reason,
                buffer=self._buffer.text,
            )
        return outcome

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def evaluate(self) -> str:
        """Вычисление буфера.

        Returns:
            Отформатированный результат; он же становится новым буфером

        Raises:
            MalformedExpression: буфер не разбирается (хвостовой оператор или '.')
            DivisionByZero: деление на ноль
            ResultOutOfRange: результат вне диапазона float
        """
        expression = self._buffer.text
        try:
            value = evaluate_expression(expression)
        except EvalError as e:
            logger.warning("Evaluation failed", expression=expression, kind=e.kind, error=str(e))
            raise

        display = format_result(value, self.format_config)
        self._buffer = ExpressionBuffer.from_result(display)
        logger.info("Expression evaluated", expression=expression, result=display)
        return display
