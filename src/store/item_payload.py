"""Shared JSON serialization for FeedItem payloads.

This module maps feed items to and from the persisted object shape.
Field names follow the published feed: ``type`` rather than ``item_type``.
"""

from __future__ import annotations

from typing import Any

from core.types import FeedItem


def feed_item_to_payload(item: FeedItem) -> dict[str, object]:
    """Serialize FeedItem into a JSON-safe payload.

    Items read from the feed file are written back exactly as stored.
    For sheet rows ``stage`` is left out entirely when the item has none.

    Args:
        item: Feed item instance.

    Returns:
        Dictionary payload for JSON encoding.
    """
    if item.stored_payload is not None:
        return dict(item.stored_payload)
    payload: dict[str, object] = {
        "title": item.title,
        "date": item.date,
        "body": item.body,
        "sources": list(item.sources),
        "type": item.item_type,
    }
    if item.stage is not None:
        payload["stage"] = item.stage
    return payload


def feed_item_from_payload(payload: dict[str, Any]) -> FeedItem:
    """Deserialize a persisted payload into FeedItem.

    Typed fields are read leniently for keying and sorting. The payload
    itself is kept on the item and is what gets written back.

    Args:
        payload: Object read from the feed file.

    Returns:
        Parsed FeedItem, missing fields read as empty.
    """
    sources = payload.get("sources")
    source_values = sources if isinstance(sources, list) else []
    stage = payload.get("stage")
    return FeedItem(
        title=str(payload.get("title") or ""),
        date=str(payload.get("date") or ""),
        body=str(payload.get("body") or ""),
        sources=tuple(str(source) for source in source_values),
        item_type=str(payload.get("type") or ""),
        stage=str(stage) if stage else None,
        stored_payload=payload,
    )
