"""Merge-key deduplication for the persisted feed.

This module reconciles the stored feed with freshly fetched items.
Items sharing a title and date collapse to the incoming one.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import MERGE_KEY_SEPARATOR
from core.types import FeedItem, MergeKey


def build_merge_key(item: FeedItem) -> MergeKey:
    """Return the identity pair of an item.

    Args:
        item: Feed item.

    Returns:
        Trimmed ``(title, date)`` tuple.
    """
    return item.title.strip(), item.date.strip()


def render_merge_key(item: FeedItem) -> str:
    """Render the merge key for reports, as ``title__date``."""
    title, date = build_merge_key(item)
    return f"{title}{MERGE_KEY_SEPARATOR}{date}"


def merge_feed_items(
    existing_items: Iterable[FeedItem],
    incoming_items: Iterable[FeedItem],
) -> list[FeedItem]:
    """Upsert incoming items into the existing feed by merge key.

    Pre-sort order is not guaranteed. The final stable sort on date
    alone fixes output order, so equal dates keep their upsert order.

    Args:
        existing_items: Feed as previously persisted.
        incoming_items: Validated items from the current run.

    Returns:
        Deduplicated items sorted by date, newest first.
    """
    items_by_key: dict[MergeKey, FeedItem] = {}
    for item in existing_items:
        items_by_key[build_merge_key(item)] = item
    for item in incoming_items:
        items_by_key[build_merge_key(item)] = item
    return sorted(items_by_key.values(), key=lambda item: item.date, reverse=True)
