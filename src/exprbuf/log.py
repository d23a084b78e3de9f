"""
Logging setup for exprbuf.

Modules obtain loggers with ``structlog.get_logger()`` and log with keyword
context. This module only wires the level filter and the renderer; library
users that configure structlog themselves never need to call it.
"""

import logging
import sys

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog to render to stderr, dropping events below ``level``."""
    min_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
