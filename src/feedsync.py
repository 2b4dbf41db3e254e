"""Public SDK surface for feedsync.

This module provides a stable import path for library users.
It re-exports the pipeline stages and typed models.
"""

from __future__ import annotations

from core.config import FeedSyncConfig
from core.types import FeedItem, ItemDefect, ItemType, SyncResult
from ingest.pipeline import FeedSyncRunner, check_feed, sync_feed
from ingest.record_normalizer import normalize_records
from ingest.tsv_parser import parse_tsv
from transforms.item_validation import collect_defects, validate_item
from transforms.key_deduplication import merge_feed_items

__all__ = [
    "FeedItem",
    "FeedSyncConfig",
    "FeedSyncRunner",
    "ItemDefect",
    "ItemType",
    "SyncResult",
    "check_feed",
    "collect_defects",
    "merge_feed_items",
    "normalize_records",
    "parse_tsv",
    "sync_feed",
    "validate_item",
]
