"""Core constants used across feedsync modules.

This module centralizes file names, environment keys, and editorial limits.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_FEED_PATH = Path("data/feed.json")
DEFAULT_FETCH_TIMEOUT_SECONDS = 30.0
SHEET_URL_ENV_VAR = "SHEET_TSV_URL"
FEED_PATH_ENV_VAR = "FEEDSYNC_FEED_PATH"
FETCH_TIMEOUT_ENV_VAR = "FEEDSYNC_FETCH_TIMEOUT"
TSV_DELIMITER = "\t"
SOURCE_FIELD_NAMES = ("source1", "source2", "source3")
MAX_TITLE_WORDS = 5
REQUIRED_BODY_SENTENCES = 2
MIN_SOURCE_COUNT = 2
MERGE_KEY_SEPARATOR = "__"
FEED_JSON_INDENT = 2
FETCH_REQUEST_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}
