"""Keypad: button labels to engine operations for presentation layers."""

from .dispatcher import (
    REJECT_EVAL_ERROR,
    REJECT_UNKNOWN_KEY,
    REJECT_UNSUPPORTED_KEY,
    KeyAction,
    Keypad,
    KeyPressResult,
    classify_key,
)

__all__ = [
    "Keypad",
    "KeyPressResult",
    "KeyAction",
    "classify_key",
    "REJECT_EVAL_ERROR",
    "REJECT_UNKNOWN_KEY",
    "REJECT_UNSUPPORTED_KEY",
]
