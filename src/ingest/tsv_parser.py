"""Tab-separated sheet parsing.

This module turns a spreadsheet TSV export into header-keyed records.
Headers are matched case-insensitively by lower-casing them once here.
"""

from __future__ import annotations

import re

from core.constants import TSV_DELIMITER
from core.errors import FeedParseError

_LINE_BREAK = re.compile(r"\r?\n")
_BYTE_ORDER_MARK = "\ufeff"


def parse_tsv(text: str) -> list[dict[str, str]]:
    """Parse TSV text into one record per data line.

    Args:
        text: Raw sheet export, first line is the header row.

    Returns:
        Records mapping lower-cased header to trimmed cell value.
        A leading byte order mark is ignored.
        Cells missing from short lines map to an empty string.

    Raises:
        FeedParseError: If the text has no header line.
    """
    stripped = text.removeprefix(_BYTE_ORDER_MARK).strip()
    if not stripped:
        raise FeedParseError(
            "Sheet export is empty: expected a tab-separated header line. "
            "Check that the sheet is published as TSV."
        )
    lines = _LINE_BREAK.split(stripped)
    headers = [header.strip().lower() for header in lines[0].split(TSV_DELIMITER)]
    return [_parse_row(headers, line) for line in lines[1:]]


def _parse_row(headers: list[str], line: str) -> dict[str, str]:
    """Map one data line onto header positions.

    Args:
        headers: Lower-cased header names in column order.
        line: One data line.

    Returns:
        Record for the line, extra trailing cells ignored.
    """
    cells = line.split(TSV_DELIMITER)
    record: dict[str, str] = {}
    for index, header in enumerate(headers):
        record[header] = cells[index].strip() if index < len(cells) else ""
    return record
