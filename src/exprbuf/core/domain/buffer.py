"""
ExpressionBuffer: Модель буфера выражения

Immutable Pydantic модель текста выражения, которое калькулятор накапливает
по одному нажатию клавиши. Каждое редактирование создаёт новый экземпляр,
поэтому инварианты проверяются валидатором при каждом изменении.

ИНВАРИАНТЫ:
1. text никогда не пуст; пустое состояние это "0"
2. Два оператора не стоят рядом; оператор не следует сразу за '.'
3. В каждом run (операнде между операторами) не более одной '.'
4. text начинается с цифры; единственное исключение: знак '-'
   отрицательного результата вычисления, за которым идёт цифра

Отклонённое редактирование не является ошибкой: transition возвращает
EditOutcome с accepted=False и тем же буфером (поведение "disabled button").
"""

from dataclasses import dataclass
from typing import Union

from pydantic import BaseModel, Field, field_validator

from .glyphs import (
    BUFFER_ALPHABET,
    DECIMAL_POINT,
    INITIAL_TEXT,
    Operator,
    is_digit,
    is_operator,
    parse_digit,
    parse_operator,
)


# =============================================================================
# REJECT REASONS
# =============================================================================

REJECT_OPERATOR_AFTER_OPERATOR = "operator_after_operator"
REJECT_OPERATOR_AFTER_DECIMAL = "operator_after_decimal"
REJECT_DUPLICATE_DECIMAL = "duplicate_decimal_in_run"


# =============================================================================
# BUFFER MODEL
# =============================================================================


class ExpressionBuffer(BaseModel):
    """
    Буфер выражения калькулятора.

    is_result=True помечает буфер, записанный вычислителем (а не набранный
    пользователем). Любое последующее редактирование сбрасывает флаг.
    """

    text: str = Field(
        default=INITIAL_TEXT, min_length=1, description="Текст выражения (display glyphs)"
    )
    is_result: bool = Field(
        default=False, description="Буфер содержит отформатированный результат вычисления"
    )

    model_config = {"frozen": True}

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Проверка алфавита и инвариантов 1-4."""
        unknown = set(v) - BUFFER_ALPHABET
        if unknown:
            raise ValueError(f"text contains characters outside the alphabet: {sorted(unknown)}")

        # Ведущий символ: цифра или знак результата перед цифрой
        if not is_digit(v[0]):
            if not (v[0] == Operator.SUBTRACT.value and len(v) > 1 and is_digit(v[1])):
                raise ValueError(f"text must start with a digit, got {v!r}")

        decimals_in_run = 0
        for i, char in enumerate(v):
            if is_operator(char):
                if i > 0 and (is_operator(v[i - 1]) or v[i - 1] == DECIMAL_POINT):
                    raise ValueError(f"operator {char!r} at position {i} follows {v[i - 1]!r}")
                decimals_in_run = 0
            elif char == DECIMAL_POINT:
                decimals_in_run += 1
                if decimals_in_run > 1:
                    raise ValueError(f"second decimal point in one operand at position {i}")

        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def initial(cls) -> "ExpressionBuffer":
        return cls(text=INITIAL_TEXT)

    @classmethod
    def from_result(cls, text: str) -> "ExpressionBuffer":
        """Буфер с отформатированным результатом вычисления."""
        return cls(text=text, is_result=True)

    # -------------------------------------------------------------------------
    # Views (вычисляются из text, не хранятся)
    # -------------------------------------------------------------------------

    @property
    def last_char(self) -> str:
        return self.text[-1]

    def is_initial(self) -> bool:
        return self.text == INITIAL_TEXT

    def ends_with_operator(self) -> bool:
        return is_operator(self.last_char)

    def ends_with_decimal(self) -> bool:
        return self.last_char == DECIMAL_POINT

    def runs(self) -> list[str]:
        """
        Разбиение text на runs по операторам.

        Знак отрицательного результата даёт пустой первый run.

        Examples:
            >>> ExpressionBuffer(text="3.1+2×4").runs()
            ['3.1', '2', '4']
        """
        result = []
        current = []
        for char in self.text:
            if is_operator(char):
                result.append("".join(current))
                current = []
            else:
                current.append(char)
        result.append("".join(current))
        return result

    def last_run(self) -> str:
        """
        Последний (открытый) run.

        Сканирование назад только до ближайшего оператора: O(длина run).
        """
        i = len(self.text)
        while i > 0 and not is_operator(self.text[i - 1]):
            i -= 1
        return self.text[i:]

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def with_digit(self, digit: Union[str, int]) -> "EditOutcome":
        """
        Добавление цифры.

        Начальное "0" заменяется цифрой целиком (нет ведущих нулей "05").

        Raises:
            ValueError: Если digit не является цифрой 0-9
        """
        d = parse_digit(digit)
        if self.is_initial():
            return EditOutcome.accept(ExpressionBuffer(text=d))
        return EditOutcome.accept(ExpressionBuffer(text=self.text + d))

    def with_operator(self, op: Union[str, Operator]) -> "EditOutcome":
        """
        Добавление оператора.

        Отклоняется после оператора и после '.'. На начальном "0" принимается
        ("0+"), так как "0" является валидным операндом.

        Raises:
            ValueError: Если glyph оператора не распознан
        """
        operator = parse_operator(op)
        if self.ends_with_operator():
            return EditOutcome.reject(self, REJECT_OPERATOR_AFTER_OPERATOR)
        if self.ends_with_decimal():
            return EditOutcome.reject(self, REJECT_OPERATOR_AFTER_DECIMAL)
        return EditOutcome.accept(ExpressionBuffer(text=self.text + operator.value))

    def with_decimal(self) -> "EditOutcome":
        """Добавление '.'; отклоняется, если в открытом run точка уже есть."""
        if DECIMAL_POINT in self.last_run():
            return EditOutcome.reject(self, REJECT_DUPLICATE_DECIMAL)
        return EditOutcome.accept(ExpressionBuffer(text=self.text + DECIMAL_POINT))

    def without_last(self) -> "EditOutcome":
        """
        Удаление последнего символа (backspace).

        Всегда принимается. Если остаётся пустой текст или голый знак '-'
        (от отрицательного результата), буфер сбрасывается в "0".
        """
        remaining = self.text[:-1]
        if not remaining or remaining == Operator.SUBTRACT.value:
            return EditOutcome.accept(ExpressionBuffer.initial())
        return EditOutcome.accept(ExpressionBuffer(text=remaining))


# =============================================================================
# EDIT OUTCOME
# =============================================================================


@dataclass(frozen=True)
class EditOutcome:
    """Результат попытки редактирования буфера."""

    buffer: ExpressionBuffer
    accepted: bool
    reject_reason: str = ""

    @classmethod
    def accept(cls, buffer: ExpressionBuffer) -> "EditOutcome":
        return cls(buffer=buffer, accepted=True)

    @classmethod
    def reject(cls, buffer: ExpressionBuffer, reason: str) -> "EditOutcome":
        return cls(buffer=buffer, accepted=False, reject_reason=reason)
