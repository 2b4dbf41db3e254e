"""Shared typed models.

This module defines immutable data models used by the parser,
validator, merge engine, and feed store to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

RawRecord = Mapping[str, str]
MergeKey = tuple[str, str]


class ItemType(str, Enum):
    """Closed set of editorial item categories."""

    JUDICIAL = "judicial"
    LEGISLATIVE = "legislative"
    EXECUTIVE = "executive"
    AGENCY = "agency"
    STATE = "state"
    LOCAL = "local"


def is_known_item_type(value: str) -> bool:
    """Return whether a lower-cased type value names an ItemType."""
    return value in _ITEM_TYPE_VALUES


_ITEM_TYPE_VALUES = frozenset(item_type.value for item_type in ItemType)


@dataclass(frozen=True)
class FeedItem:
    """Canonical feed item.

    ``item_type`` holds the raw lower-cased value so invalid entries can
    still be reported by the validator. Items read back from the feed file
    keep their stored object in ``stored_payload`` so unmodeled keys and
    values survive a rewrite untouched.

    Attributes:
        title: Headline text.
        date: Publication date, expected as ``YYYY-MM-DD``.
        body: Two-sentence summary text.
        sources: Ordered non-empty source names.
        item_type: Lower-cased category, see ItemType.
        stage: Optional procedural stage label.
        stored_payload: Object as read from the feed file, None for sheet rows.
    """

    title: str
    date: str
    body: str
    sources: tuple[str, ...]
    item_type: str
    stage: str | None = None
    stored_payload: Mapping[str, Any] | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ItemDefect:
    """Validation failure for one incoming item.

    Attributes:
        key: Rendered merge key, ``title__date``.
        reasons: Ordered defect descriptions.
    """

    key: str
    reasons: tuple[str, ...]


@dataclass(frozen=True)
class SyncResult:
    """Outcome of a successful sync run.

    Attributes:
        incoming_count: Items read from the sheet after blank-row filtering.
        total_count: Items in the feed after merge.
    """

    incoming_count: int
    total_count: int
