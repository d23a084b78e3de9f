"""Shared pytest fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """CLI tests configure structlog against CliRunner streams; restore defaults after each test."""
    yield
    structlog.reset_defaults()
