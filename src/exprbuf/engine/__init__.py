"""Engine: stateful calculator session over one expression buffer."""

from .expression_engine import ExpressionEngine

__all__ = [
    "ExpressionEngine",
]
