"""Shared pytest fixtures."""

import os

import pytest

from playvideo_mcp.commons.settings import reset_settings
from playvideo_mcp.infrastructure.factory import reset_factory


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's PlayVideo configuration out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("PLAYVIDEO"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(os.path.dirname(__file__))
    reset_settings()
    reset_factory()
    yield
    reset_settings()
    reset_factory()
