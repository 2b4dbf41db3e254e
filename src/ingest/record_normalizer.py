"""Raw record to feed item normalization.

Blank filler rows are dropped here. Malformed values pass through
untouched so the validator can report every defect of an item together.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import SOURCE_FIELD_NAMES
from core.types import FeedItem, RawRecord


def normalize_records(records: Iterable[RawRecord]) -> list[FeedItem]:
    """Convert raw sheet records into canonical feed items.

    Args:
        records: Header-keyed records from the TSV parser.

    Returns:
        Items for every record with a title, date, or body.
    """
    return [_to_item(record) for record in records if not _is_blank_row(record)]


def _is_blank_row(record: RawRecord) -> bool:
    """Return whether a record has no title, date, or body.

    Args:
        record: Header-keyed sheet record.

    Returns:
        True for filler rows that carry no item.
    """
    return not (_field(record, "title") or _field(record, "date") or _field(record, "body"))


def _to_item(record: RawRecord) -> FeedItem:
    """Build a feed item from one retained record.

    Args:
        record: Header-keyed sheet record.

    Returns:
        Item with sources collected, type lower-cased, and empty stage unset.
    """
    sources = [_field(record, name) for name in SOURCE_FIELD_NAMES]
    return FeedItem(
        title=_field(record, "title"),
        date=_field(record, "date"),
        body=_field(record, "body"),
        sources=tuple(source for source in sources if source),
        item_type=_field(record, "type").lower(),
        stage=_field(record, "stage") or None,
    )


def _field(record: RawRecord, name: str) -> str:
    """Read a trimmed cell, empty when the column is absent.

    Args:
        record: Header-keyed sheet record.
        name: Lower-cased column name.

    Returns:
        Trimmed cell value.
    """
    return record.get(name, "").strip()
