"""
DisplayState: снапшот дисплея для presentation layer

Immutable Pydantic модель, которую движок отдаёт наружу после каждого
нажатия клавиши. Полная совместимость с JSON Schema
(src/exprbuf/core/contracts/schema/display_state.json).
"""

from typing import Optional

from pydantic import BaseModel, Field


class DisplayState(BaseModel):
    """
    Снапшот дисплея калькулятора.

    error: kind ошибки вычисления ("division_by_zero", ...) или None.
    """

    display: str = Field(..., min_length=1, description="Текущий текст буфера")
    accepted: bool = Field(..., description="Нажатие изменило или вычислило буфер")
    is_result: bool = Field(
        default=False, description="Дисплей показывает результат вычисления"
    )
    error: Optional[str] = Field(None, description="Kind ошибки вычисления (nullable)")
    error_message: Optional[str] = Field(
        None, description="Сообщение об ошибке для пользователя (nullable)"
    )

    model_config = {"frozen": True}
