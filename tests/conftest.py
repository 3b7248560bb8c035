"""Shared fixtures."""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

from icon_fetch.constants import API_KEY_ENV_VARS
from icon_fetch.models import BrandAnalysis


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep user config, API keys and the real home directory out of tests."""
    for var in list(os.environ):
        if var.startswith("ICON_FETCH_"):
            monkeypatch.delenv(var)
    for var in API_KEY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def client_storage():
    """Dict standing in for browser localStorage."""
    return {}


@pytest.fixture
def mock_page(client_storage):
    """Create mock Flet page whose client_storage is backed by a dict."""
    page = MagicMock()
    page.title = ""
    page.theme_mode = None
    page.scroll = None
    page.padding = 0
    page.client_storage.get.side_effect = client_storage.get
    page.client_storage.set.side_effect = client_storage.__setitem__
    page.client_storage.contains_key.side_effect = lambda key: key in client_storage
    page.client_storage.remove.side_effect = client_storage.pop
    return page


@pytest.fixture
def github_analysis():
    """Typical analysis returned for github.com."""
    return BrandAnalysis(
        colors=["#181717", "#FFFFFF"],
        style="Minimalist",
        brand_identity="A developer-first platform with a playful octocat mascot.",
        suggested_improvements="Provide a dedicated SVG favicon for crisp rendering.",
    )


@pytest.fixture
def analysis_client(github_analysis):
    """Analysis client double that always returns the github.com analysis."""
    client = MagicMock()
    client.available = True
    client.analyze = AsyncMock(return_value=github_analysis)
    return client
