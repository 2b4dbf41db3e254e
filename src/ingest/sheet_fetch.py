"""Remote sheet export download.

This module fetches the published TSV export over HTTP with requests.
Any transport failure or non-success status is fatal for the run.
"""

from __future__ import annotations

import requests

from core.constants import FETCH_REQUEST_HEADERS
from core.errors import FeedFetchError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def fetch_sheet_text(
    url: str,
    timeout_seconds: float,
    session: requests.Session | None = None,
) -> str:
    """Download the sheet export as text.

    Args:
        url: Published TSV export URL.
        timeout_seconds: Connect and read timeout.
        session: Optional session, a plain ``requests`` call is used if omitted.

    Returns:
        Response body decoded as UTF-8, byte order mark removed.

    Raises:
        FeedFetchError: If the request fails or returns a non-2xx status.
    """
    http = session if session is not None else requests
    try:
        response = http.get(url, headers=FETCH_REQUEST_HEADERS, timeout=timeout_seconds)
    except requests.RequestException as error:
        raise FeedFetchError(
            f"Sheet fetch failed for {url}: {error}. "
            "Check network access and the sheet URL, then re-run."
        ) from error
    if not 200 <= response.status_code < 300:
        raise FeedFetchError(
            f"Sheet fetch failed: {response.status_code}. "
            "Confirm the sheet is published and the URL is current."
        )
    text = response.content.decode("utf-8-sig", errors="replace")
    _LOGGER.info(
        "sheet_fetch_completed",
        status_code=response.status_code,
        byte_count=len(response.content),
    )
    return text
