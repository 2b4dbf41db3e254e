"""Editorial rule validation for feed items.

Every rule is evaluated for every item so one report lists all defects.
The sentence count is a deliberate heuristic: abbreviations and decimals
can split or merge sentences, and such items are rejected as written.
"""

from __future__ import annotations

import re
from typing import Iterable

from core.constants import MAX_TITLE_WORDS, MIN_SOURCE_COUNT, REQUIRED_BODY_SENTENCES
from core.types import FeedItem, ItemDefect, is_known_item_type
from transforms.key_deduplication import render_merge_key

# Whitespace after terminal punctuation, before an uppercase letter, digit, or opening quote.
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9“\"])")
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def validate_item(item: FeedItem) -> list[str]:
    """Apply editorial rules to one item.

    Args:
        item: Normalized feed item.

    Returns:
        Ordered defect descriptions, empty when the item is valid.
    """
    defects: list[str] = []
    if not item.title:
        defects.append("missing title")
    if len(item.title.split()) > MAX_TITLE_WORDS:
        defects.append(f"title > {MAX_TITLE_WORDS} words")
    if count_sentences(item.body) != REQUIRED_BODY_SENTENCES:
        defects.append(f"body not exactly {REQUIRED_BODY_SENTENCES} sentences")
    if len(item.sources) < MIN_SOURCE_COUNT:
        defects.append(f"need ≥{MIN_SOURCE_COUNT} sources")
    if not is_known_item_type(item.item_type):
        defects.append(f"invalid type: {item.item_type}")
    if not _ISO_DATE.fullmatch(item.date):
        defects.append("date not YYYY-MM-DD")
    return defects


def count_sentences(body: str) -> int:
    """Count sentences in body text using the boundary heuristic."""
    return len([piece for piece in _SENTENCE_BOUNDARY.split(body) if piece])


def collect_defects(items: Iterable[FeedItem]) -> list[ItemDefect]:
    """Validate a batch and keep one entry per invalid item.

    Args:
        items: Incoming items in sheet order.

    Returns:
        Defects in input order.
    """
    defects: list[ItemDefect] = []
    for item in items:
        reasons = validate_item(item)
        if reasons:
            defects.append(ItemDefect(key=render_merge_key(item), reasons=tuple(reasons)))
    return defects


def format_defect_report(defects: Iterable[ItemDefect]) -> str:
    """Render defects as a human-readable multi-line report."""
    lines = [f" - {defect.key}: {'; '.join(defect.reasons)}" for defect in defects]
    return "Validation errors:\n" + "\n".join(lines)
