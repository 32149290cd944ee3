"""
Pytest configuration for govuk_frontend tests.

Why: Settings are cached per process. Each test starts from a clean cache
so environment tweaks made with ``monkeypatch`` cannot leak between tests.
"""
from __future__ import annotations

from typing import Callable

import pytest
from bs4 import BeautifulSoup

from govuk_frontend.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def soup() -> Callable[[str], BeautifulSoup]:
    """Parse rendered markup so tests can query elements and attributes."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(str(html), "html.parser")

    return _parse
