"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import FeedSyncConfig
from core.constants import DEFAULT_FEED_PATH
from core.errors import FeedConfigError


def test_from_env_reads_sheet_url_and_feed_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should read the sheet URL and feed path from environment."""
    monkeypatch.setenv("SHEET_TSV_URL", "https://example.test/sheet.tsv")
    monkeypatch.setenv("FEEDSYNC_FEED_PATH", "./out/feed.json")

    config = FeedSyncConfig.from_env()

    assert config.sheet_url == "https://example.test/sheet.tsv"
    assert config.feed_path.name == "feed.json"


def test_from_env_defaults_feed_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to data/feed.json when no path is set."""
    monkeypatch.delenv("FEEDSYNC_FEED_PATH", raising=False)

    config = FeedSyncConfig.from_env()

    assert config.feed_path == DEFAULT_FEED_PATH


def test_from_env_raises_for_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a non-numeric fetch timeout."""
    monkeypatch.setenv("FEEDSYNC_FETCH_TIMEOUT", "soon")

    with pytest.raises(FeedConfigError):
        FeedSyncConfig.from_env()


def test_from_env_raises_for_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a zero fetch timeout."""
    monkeypatch.setenv("FEEDSYNC_FETCH_TIMEOUT", "0")

    with pytest.raises(FeedConfigError):
        FeedSyncConfig.from_env()


def test_require_fields_names_missing_sheet_url(monkeypatch: pytest.MonkeyPatch) -> None:
    """Required-field check should name the missing environment variable."""
    monkeypatch.delenv("SHEET_TSV_URL", raising=False)
    config = FeedSyncConfig.from_env()

    with pytest.raises(FeedConfigError, match="SHEET_TSV_URL"):
        config.require_fields()


def test_from_env_treats_blank_sheet_url_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    """An empty SHEET_TSV_URL should count as unset."""
    monkeypatch.setenv("SHEET_TSV_URL", "")

    config = FeedSyncConfig.from_env()

    assert config.sheet_url is None
