"""
Тесты для Evaluator: двухуровневый вычислитель

Проверяемые инварианты:
1. ×÷ связывают сильнее, чем +-
2. Левая ассоциативность на одном уровне приоритета
3. Деление всегда float
4. Точная классификация ошибок: MalformedExpression / DivisionByZero /
   ResultOutOfRange
"""

import pytest

from exprbuf.core.math.evaluator import (
    DivisionByZero,
    EvalError,
    MalformedExpression,
    ResultOutOfRange,
    evaluate_expression,
    evaluate_tokens,
    tokenize,
)


# =============================================================================
# ТЕСТЫ: Tokenize
# =============================================================================


class TestTokenize:
    """Тесты tokenize."""

    def test_display_glyphs_translated(self) -> None:
        assert tokenize("2+3×4÷2") == [2.0, "+", 3.0, "*", 4.0, "/", 2.0]

    def test_single_operand(self) -> None:
        assert tokenize("0") == [0.0]

    def test_leading_sign_applies_to_first_operand(self) -> None:
        assert tokenize("-1.5÷3") == [-1.5, "/", 3.0]

    def test_operand_without_integer_part(self) -> None:
        assert tokenize("3+.5") == [3.0, "+", 0.5]

    def test_leading_zeros_in_run(self) -> None:
        assert tokenize("3+05") == [3.0, "+", 5.0]

    @pytest.mark.parametrize("text", ["8+", "8×", "0-", "-"])
    def test_trailing_operator_malformed(self, text) -> None:
        with pytest.raises(MalformedExpression, match="ends with operator"):
            tokenize(text)

    @pytest.mark.parametrize("text", ["8.", "3+.", "0."])
    def test_trailing_decimal_malformed(self, text) -> None:
        with pytest.raises(MalformedExpression, match="decimal point"):
            tokenize(text)

    @pytest.mark.parametrize("text", ["+3", "×2", "--3", "1+×2", "."])
    def test_missing_operand_malformed(self, text) -> None:
        with pytest.raises(MalformedExpression):
            tokenize(text)

    @pytest.mark.parametrize("text", ["1.2.3", "1a+2", "3.+2", "1 +2", "٣+1", "1+²"])
    def test_invalid_operand_malformed(self, text) -> None:
        with pytest.raises(MalformedExpression):
            tokenize(text)

    def test_empty_malformed(self) -> None:
        with pytest.raises(MalformedExpression, match="empty"):
            tokenize("")

    def test_huge_literal_out_of_range(self) -> None:
        with pytest.raises(ResultOutOfRange):
            tokenize("9" * 400)


# =============================================================================
# ТЕСТЫ: Evaluation
# =============================================================================


class TestEvaluateExpression:
    """Тесты evaluate_expression."""

    def test_precedence(self) -> None:
        """2+3×4 = 14, а не 20."""
        assert evaluate_expression("2+3×4") == 14.0

    def test_precedence_with_division(self) -> None:
        assert evaluate_expression("10-6÷2") == 7.0

    def test_left_associative_subtraction(self) -> None:
        assert evaluate_expression("10-4-3") == 3.0

    def test_left_associative_division(self) -> None:
        assert evaluate_expression("100÷10÷5") == 2.0

    def test_mixed_chain(self) -> None:
        assert evaluate_expression("2×3+4×5-6÷3") == 24.0

    def test_division_is_float(self) -> None:
        assert evaluate_expression("7÷2") == 3.5

    def test_leading_zero_operand(self) -> None:
        assert evaluate_expression("0-5") == -5.0

    def test_negative_result_buffer(self) -> None:
        assert evaluate_expression("-3+2") == -1.0

    def test_eval_glyphs_accepted(self) -> None:
        assert evaluate_expression("2+3*4/2") == 8.0

    def test_decimal_operands(self) -> None:
        assert evaluate_expression("0.1+0.2") == pytest.approx(0.3)


class TestEvaluationErrors:
    """Тесты классификации ошибок."""

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            evaluate_expression("5÷0")

    def test_division_by_decimal_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            evaluate_expression("5÷0.0")

    def test_zero_divided_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            evaluate_expression("0÷0")

    def test_division_by_zero_inside_chain(self) -> None:
        with pytest.raises(DivisionByZero):
            evaluate_expression("1+2×3÷0-4")

    def test_division_by_zero_distinct_from_malformed(self) -> None:
        with pytest.raises(DivisionByZero) as exc_info:
            evaluate_expression("5÷0")
        assert not isinstance(exc_info.value, MalformedExpression)
        assert exc_info.value.kind == "division_by_zero"

    def test_overflow(self) -> None:
        big = "9" * 300
        with pytest.raises(ResultOutOfRange):
            evaluate_expression(f"{big}×{big}")

    def test_errors_share_base_class(self) -> None:
        for text in ("8+", "5÷0"):
            with pytest.raises(EvalError):
                evaluate_expression(text)

    def test_error_carries_expression(self) -> None:
        with pytest.raises(MalformedExpression) as exc_info:
            evaluate_expression("8+")
        assert exc_info.value.expression == "8+"
        assert exc_info.value.kind == "malformed_expression"


class TestEvaluateTokens:
    """Тесты evaluate_tokens на уровне токенов."""

    def test_even_token_count_malformed(self) -> None:
        with pytest.raises(MalformedExpression):
            evaluate_tokens([1.0, "+"])

    def test_empty_tokens_malformed(self) -> None:
        with pytest.raises(MalformedExpression):
            evaluate_tokens([])

    def test_unknown_operator_malformed(self) -> None:
        with pytest.raises(MalformedExpression, match="unknown operator"):
            evaluate_tokens([1.0, "^", 2.0])
