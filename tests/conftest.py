from __future__ import annotations

import pytest

from chartnexus.config import get_settings
from chartnexus.dataset import Dataset


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate each test from ambient CHARTNEXUS_* variables and cached settings."""
    for name in ("CHARTNEXUS_LOG_LEVEL", "CHARTNEXUS_DEFAULT_CHART_TYPE", "CHARTNEXUS_PREVIEW_ROWS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sales() -> Dataset:
    return Dataset(
        name="sales.xlsx",
        rows=[
            {"region": "A", "sales": "10"},
            {"region": "B", "sales": "20"},
            {"region": "A", "sales": "5"},
        ],
    )
