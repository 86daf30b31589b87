"""Shared pytest fixtures for codebytes tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from codebytes.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Reset the cached Settings singleton around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
