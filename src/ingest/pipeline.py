"""Feed sync orchestration.

This module coordinates sheet download, parsing, validation,
merge, and the feed write. Any defect aborts before the write.
"""

from __future__ import annotations

from typing import Callable

from core.config import FeedSyncConfig
from core.errors import FeedValidationError
from core.logging_config import get_logger
from core.types import FeedItem, SyncResult
from ingest.record_normalizer import normalize_records
from ingest.sheet_fetch import fetch_sheet_text
from ingest.tsv_parser import parse_tsv
from store.feed_store import FeedStore
from transforms.item_validation import collect_defects
from transforms.key_deduplication import merge_feed_items

_LOGGER = get_logger(__name__)

FetchText = Callable[[str], str]


class FeedSyncRunner:
    """Single-pass runner for one sync invocation."""

    def __init__(
        self,
        config: FeedSyncConfig,
        fetch_text: FetchText | None = None,
        store: FeedStore | None = None,
    ) -> None:
        """Initialize runner and check required configuration.

        Args:
            config: Runtime configuration.
            fetch_text: Optional replacement for the HTTP download.
            store: Optional replacement feed store.

        Raises:
            FeedConfigError: If a required setting is missing.
        """
        config.require_fields()
        self._config = config
        self._fetch_text = fetch_text or self._download_sheet
        self._store = store or FeedStore(config.feed_path)

    def load_incoming(self) -> list[FeedItem]:
        """Fetch, parse, normalize, and validate the sheet rows.

        Returns:
            Validated incoming items in sheet order.

        Raises:
            FeedFetchError: If the sheet cannot be downloaded.
            FeedParseError: If the sheet export is empty.
            FeedValidationError: If any item breaks an editorial rule.
        """
        sheet_text = self._fetch_text(str(self._config.sheet_url))
        incoming_items = normalize_records(parse_tsv(sheet_text))
        defects = collect_defects(incoming_items)
        if defects:
            _LOGGER.error(
                "feed_validation_failed",
                incoming_count=len(incoming_items),
                invalid_count=len(defects),
            )
            raise FeedValidationError(defects)
        return incoming_items

    def run(self) -> SyncResult:
        """Execute the sync and return row and feed counts."""
        incoming_items = self.load_incoming()
        existing_items = self._store.load_items()
        merged_items = merge_feed_items(existing_items, incoming_items)
        self._store.write_items(merged_items)
        result = SyncResult(incoming_count=len(incoming_items), total_count=len(merged_items))
        _log_sync_completion(self._store, len(existing_items), result)
        return result

    def _download_sheet(self, url: str) -> str:
        """Download the sheet with the configured timeout.

        Args:
            url: Sheet export URL.

        Returns:
            Sheet text.
        """
        return fetch_sheet_text(url, self._config.fetch_timeout_seconds)


def sync_feed(config: FeedSyncConfig) -> SyncResult:
    """Run a full sync and persist the merged feed.

    Args:
        config: Runtime configuration.

    Returns:
        Incoming row count and final feed size.

    Raises:
        FeedConfigError: If the sheet URL is not configured.
        FeedFetchError: If the sheet download fails.
        FeedParseError: If the sheet export is empty.
        FeedValidationError: If any incoming item is invalid.
        FeedStoreError: If the feed cannot be written.
    """
    return FeedSyncRunner(config).run()


def check_feed(config: FeedSyncConfig) -> list[FeedItem]:
    """Fetch and validate the sheet without touching the feed file.

    Args:
        config: Runtime configuration.

    Returns:
        Validated incoming items.

    Raises:
        FeedValidationError: If any incoming item is invalid.
    """
    return FeedSyncRunner(config).load_incoming()


def _log_sync_completion(store: FeedStore, existing_count: int, result: SyncResult) -> None:
    """Log sync completion with contextual counts."""
    _LOGGER.info(
        "feed_sync_completed",
        feed_path=str(store.feed_path),
        existing_count=existing_count,
        incoming_count=result.incoming_count,
        total_count=result.total_count,
    )
