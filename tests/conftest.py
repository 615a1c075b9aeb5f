"""Shared fixtures for unit and integration tests."""

from pathlib import Path

import pytest
from loguru import logger

from skillbench.utils.settings import get_settings

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added by setup_*_logger calls so they don't leak between tests."""
    yield
    logger.remove()


@pytest.fixture
def clean_settings(monkeypatch):
    """Forget cached settings before and after the test."""
    monkeypatch.delenv("SKILLBENCH_SETTINGS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
