"""
Contract Validation Module

Модуль для валидации JSON контрактов на границе движка с presentation layer.
"""

from .validators import (
    ContractValidator,
    DisplayStateValidator,
    KeyEventValidator,
    SchemaLoader,
    validate_display_state,
    validate_key_event,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "KeyEventValidator",
    "DisplayStateValidator",
    # Functions
    "validate_key_event",
    "validate_display_state",
]
