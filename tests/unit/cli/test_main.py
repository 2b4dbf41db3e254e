"""Unit tests for CLI command handling."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import ingest.pipeline
from cli.main import main
from tests.fixture_paths import read_fixture_text


def _stub_fetch(monkeypatch: pytest.MonkeyPatch, fixture: str) -> None:
    sheet_text = read_fixture_text(fixture)
    monkeypatch.setattr(
        ingest.pipeline,
        "fetch_sheet_text",
        lambda url, timeout_seconds: sheet_text,
    )


def test_cli_sync_prints_summary_and_writes_feed(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Sync should write the feed and print row and item counts."""
    _stub_fetch(monkeypatch, "sheets/valid_feed.tsv")
    feed_path = tmp_path / "feed.json"
    args = ["--sheet-url", "https://example.test/sheet.tsv", "--feed-path", str(feed_path), "sync"]

    exit_code = main(args)
    output = capsys.readouterr().out.strip()

    assert exit_code == 0
    assert output == "Synced 2 rows. Feed now has 2 items."
    assert len(json.loads(feed_path.read_text(encoding="utf-8"))) == 2


def test_cli_sync_reports_validation_errors(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Invalid rows should produce a report, exit 1, and no feed file."""
    _stub_fetch(monkeypatch, "sheets/invalid_feed.tsv")
    monkeypatch.setenv("SHEET_TSV_URL", "https://example.test/sheet.tsv")
    feed_path = tmp_path / "feed.json"

    exit_code = main(["--feed-path", str(feed_path), "sync"])
    errors = capsys.readouterr().err

    assert exit_code == 1
    assert (
        " - A Very Long Headline For Testing__2024-03-02: title > 5 words; invalid type: foo"
        in errors
    )
    assert feed_path.exists() is False


def test_cli_sync_fails_without_sheet_url(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Missing configuration should exit non-zero with an error line."""
    monkeypatch.delenv("SHEET_TSV_URL", raising=False)

    exit_code = main(["--feed-path", str(tmp_path / "feed.json"), "sync"])

    assert exit_code == 2
    assert "error: Missing required configuration: SHEET_TSV_URL" in capsys.readouterr().err


def test_cli_check_validates_without_writing(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Check should validate rows and leave the feed untouched."""
    _stub_fetch(monkeypatch, "sheets/valid_feed.tsv")
    feed_path = tmp_path / "feed.json"
    args = ["--sheet-url", "https://example.test/sheet.tsv", "--feed-path", str(feed_path), "check"]

    exit_code = main(args)

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "Validated 2 rows."
    assert feed_path.exists() is False


def test_cli_sync_exits_two_when_feed_is_unreadable(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A feed path that cannot be read should fail apart from validation."""
    _stub_fetch(monkeypatch, "sheets/valid_feed.tsv")
    feed_path = tmp_path / "feed.json"
    feed_path.mkdir()
    args = ["--sheet-url", "https://example.test/sheet.tsv", "--feed-path", str(feed_path), "sync"]

    exit_code = main(args)

    assert exit_code == 2
    assert "error: Failed to read feed" in capsys.readouterr().err
