"""Keypad: диспетчер нажатий клавиш калькулятора.

Связывает label кнопки presentation layer с операцией ExpressionEngine:
- "0"-"9" → append_digit
- "+", "-", "×", "÷" (и "*", "/", "x", ":") → append_operator
- "." → append_decimal
- "⌫" / "DEL" / "backspace" → backspace
- "AC" / "C" / "clear" → clear
- "=" → evaluate

"%" и "±" присутствуют на кнопочной сетке, но семантики не имеют:
такое нажатие отклоняется с unsupported_key, буфер не меняется.

Диспетчер никогда не поднимает исключений: отклонения и ошибки вычисления
возвращаются в KeyPressResult.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Final, Optional

import structlog

from exprbuf.core.contracts.validators import validate_display_state, validate_key_event
from exprbuf.core.domain.display_state import DisplayState
from exprbuf.core.domain.glyphs import DECIMAL_POINT, is_digit, parse_operator
from exprbuf.core.math.evaluator import EvalError
from exprbuf.engine.expression_engine import ExpressionEngine

logger = structlog.get_logger()


class KeyAction(str, Enum):
    """Операция, на которую отображается клавиша."""

    DIGIT = "digit"
    OPERATOR = "operator"
    DECIMAL = "decimal"
    BACKSPACE = "backspace"
    CLEAR = "clear"
    EVALUATE = "evaluate"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"


BACKSPACE_KEYS: Final[frozenset[str]] = frozenset({"⌫", "DEL", "backspace"})
CLEAR_KEYS: Final[frozenset[str]] = frozenset({"AC", "C", "clear"})
EVALUATE_KEYS: Final[frozenset[str]] = frozenset({"="})

# Кнопки без определённой семантики
UNSUPPORTED_KEYS: Final[frozenset[str]] = frozenset({"%", "±", "+/-"})

REJECT_UNSUPPORTED_KEY = "unsupported_key"
REJECT_UNKNOWN_KEY = "unknown_key"
REJECT_EVAL_ERROR = "eval_error"


@dataclass(frozen=True)
class KeyPressResult:
    """Результат нажатия клавиши."""

    key: str
    action: KeyAction
    accepted: bool
    display: str
    is_result: bool = False

    # Причина отклонения ("" если принято)
    reject_reason: str = ""

    # Ошибка вычисления (только для "=")
    error: Optional[str] = None
    error_message: Optional[str] = None

    details: str = ""

    def to_display_state(self) -> DisplayState:
        return DisplayState(
            display=self.display,
            accepted=self.accepted,
            is_result=self.is_result,
            error=self.error,
            error_message=self.error_message,
        )


def classify_key(key: str) -> KeyAction:
    """Определение операции по label клавиши."""
    if len(key) == 1 and is_digit(key):
        return KeyAction.DIGIT
    if key == DECIMAL_POINT:
        return KeyAction.DECIMAL
    if key in BACKSPACE_KEYS:
        return KeyAction.BACKSPACE
    if key in CLEAR_KEYS:
        return KeyAction.CLEAR
    if key in EVALUATE_KEYS:
        return KeyAction.EVALUATE
    if key in UNSUPPORTED_KEYS:
        return KeyAction.UNSUPPORTED
    try:
        parse_operator(key)
    except ValueError:
        return KeyAction.UNKNOWN
    return KeyAction.OPERATOR


class Keypad:
    """Keypad над одним ExpressionEngine.

    Args:
        engine: движок сессии (создаётся новый, если не передан)
    """

    def __init__(self, engine: Optional[ExpressionEngine] = None):
        self.engine = engine or ExpressionEngine()

    def press(self, key: str) -> KeyPressResult:
        """Нажатие клавиши.

        Returns:
            KeyPressResult с новым дисплеем и признаком принятия
        """
        action = classify_key(key)

        if action == KeyAction.UNSUPPORTED:
            return self._rejected(
                key, action, REJECT_UNSUPPORTED_KEY, f"Key {key!r} has no defined operation"
            )
        if action == KeyAction.UNKNOWN:
            return self._rejected(
                key, action, REJECT_UNKNOWN_KEY, f"Key {key!r} is not on the keypad"
            )

        if action == KeyAction.EVALUATE:
            return self._evaluate(key)

        if action == KeyAction.DIGIT:
            outcome = self.engine.append_digit(key)
        elif action == KeyAction.OPERATOR:
            outcome = self.engine.append_operator(key)
        elif action == KeyAction.DECIMAL:
            outcome = self.engine.append_decimal()
        elif action == KeyAction.BACKSPACE:
            outcome = self.engine.backspace()
        else:
            outcome = self.engine.clear()

        buffer = self.engine.buffer
        if not outcome.accepted:
            return KeyPressResult(
                key=key,
                action=action,
                accepted=False,
                display=buffer.text,
                is_result=buffer.is_result,
                reject_reason=outcome.reject_reason,
                details=f"{action.value} rejected: {outcome.reject_reason}",
            )

        return KeyPressResult(
            key=key,
            action=action,
            accepted=True,
            display=buffer.text,
            is_result=buffer.is_result,
            details=f"{action.value} applied",
        )

    def _evaluate(self, key: str) -> KeyPressResult:
        try:
            display = self.engine.evaluate()
        except EvalError as e:
            return KeyPressResult(
                key=key,
                action=KeyAction.EVALUATE,
                accepted=False,
                display=self.engine.current_display(),
                is_result=self.engine.buffer.is_result,
                reject_reason=REJECT_EVAL_ERROR,
                error=e.kind,
                error_message=str(e),
                details=f"evaluation failed: {e.kind}",
            )

        return KeyPressResult(
            key=key,
            action=KeyAction.EVALUATE,
            accepted=True,
            display=display,
            is_result=True,
            details=f"evaluated to {display}",
        )

    def _rejected(self, key: str, action: KeyAction, reason: str, details: str) -> KeyPressResult:
        logger.debug("Key rejected", key=key, reason=reason)
        buffer = self.engine.buffer
        return KeyPressResult(
            key=key,
            action=action,
            accepted=False,
            display=buffer.text,
            is_result=buffer.is_result,
            reject_reason=reason,
            details=details,
        )

    def handle_event(self, event: Dict[str, Any]) -> Dict[str, Any]:
        """Обработка key_event контракта.

        Args:
            event: {"key": "7"} (+ опциональный session_id)

        Returns:
            display_state снапшот как dict

        Raises:
            jsonschema.ValidationError: если event не соответствует key_event
        """
        validate_key_event(event)
        result = self.press(event["key"])

        state = result.to_display_state().model_dump()
        validate_display_state(state)
        return state
