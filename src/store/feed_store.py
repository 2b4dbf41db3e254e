"""Persisted feed file access.

This module reads the feed JSON array at the start of a run and
replaces it wholesale at the end of a successful one.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from core.constants import FEED_JSON_INDENT
from core.errors import FeedStoreError
from core.logging_config import get_logger
from core.types import FeedItem
from store.item_payload import feed_item_from_payload, feed_item_to_payload

_LOGGER = get_logger(__name__)


class FeedStore:
    """JSON file store for the published feed."""

    def __init__(self, feed_path: Path) -> None:
        """Initialize store for one feed file.

        Args:
            feed_path: Path of the feed JSON array.
        """
        self._feed_path = feed_path

    @property
    def feed_path(self) -> Path:
        return self._feed_path

    def load_items(self) -> list[FeedItem]:
        """Read the persisted feed.

        A missing file, invalid JSON, or a non-array document is logged
        and read as an empty feed.

        Returns:
            Items in stored order.

        Raises:
            FeedStoreError: If the file cannot be read or the array holds
                non-object entries.
        """
        payload = self._read_payload()
        items: list[FeedItem] = []
        for index, entry in enumerate(payload):
            if not isinstance(entry, dict):
                raise FeedStoreError(
                    f"Invalid feed entry at {self._feed_path}[{index}]: "
                    "expected JSON object. Fix or remove the entry and re-run."
                )
            items.append(feed_item_from_payload(entry))
        return items

    def write_items(self, items: Sequence[FeedItem]) -> None:
        """Replace the feed file with the given items.

        Args:
            items: Final merged feed.

        Raises:
            FeedStoreError: If the file cannot be written.
        """
        payload = [feed_item_to_payload(item) for item in items]
        document = json.dumps(payload, indent=FEED_JSON_INDENT, ensure_ascii=False)
        try:
            self._feed_path.parent.mkdir(parents=True, exist_ok=True)
            self._feed_path.write_text(document + "\n", encoding="utf-8")
        except OSError as error:
            raise FeedStoreError(
                f"Failed to write feed at {self._feed_path}: {error.strerror}. "
                "Check the path and permissions."
            ) from error
        _LOGGER.info("feed_written", feed_path=str(self._feed_path), item_count=len(items))

    def _read_payload(self) -> list[Any]:
        """Read the raw feed array, empty when missing or unparsable.

        Returns:
            Top-level JSON array entries.

        Raises:
            FeedStoreError: If the path exists but cannot be read.
        """
        if not self._feed_path.exists():
            _log_read_fallback(self._feed_path, "file not found")
            return []
        try:
            raw_bytes = self._feed_path.read_bytes()
        except OSError as error:
            raise FeedStoreError(
                f"Failed to read feed at {self._feed_path}: {error.strerror}. "
                "Check that the path is a readable file."
            ) from error
        try:
            payload = json.loads(raw_bytes.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as error:
            _log_read_fallback(self._feed_path, f"unparsable JSON: {error}")
            return []
        if not isinstance(payload, list):
            _log_read_fallback(self._feed_path, "top level is not an array")
            return []
        return payload


def _log_read_fallback(feed_path: Path, reason: str) -> None:
    """Log that the stored feed is being treated as empty."""
    _LOGGER.warning("feed_read_fallback", feed_path=str(feed_path), reason=reason)
