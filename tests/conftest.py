"""Shared test fixtures and configuration."""
import os

import pytest

from json2rss.models import Post, SiteInfo


@pytest.fixture
def site_info():
    return SiteInfo(title="T", description="D", url="https://s.test")


@pytest.fixture
def posts():
    return {
        "a": Post(title="A", body='<img src="/x.png">', date="2024-01-01", slug="a"),
        "b": Post(title="B & Co", body="<p>plain</p>", date="last tuesday", slug="b"),
    }


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep user/project config files and JSON2RSS_* env vars out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("JSON2RSS_"):
            monkeypatch.delenv(key)
