"""feedsync exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations

from typing import Sequence

from core.types import ItemDefect


class FeedSyncError(Exception):
    """Base exception for all feedsync failures."""


class FeedConfigError(FeedSyncError):
    """Raised for missing or invalid runtime configuration."""


class FeedFetchError(FeedSyncError):
    """Raised when the sheet export cannot be downloaded."""


class FeedParseError(FeedSyncError):
    """Raised when sheet text has no header line to parse."""


class FeedStoreError(FeedSyncError):
    """Raised when the feed file cannot be written."""


class FeedValidationError(FeedSyncError):
    """Raised when one or more incoming items break editorial rules.

    Every defect in the batch is collected before this is raised,
    so callers can report the whole batch at once.
    """

    def __init__(self, defects: Sequence[ItemDefect]) -> None:
        self.defects = tuple(defects)
        super().__init__(f"{len(self.defects)} item(s) failed validation")
