"""Runtime configuration model for feedsync.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_FEED_PATH,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    FEED_PATH_ENV_VAR,
    FETCH_TIMEOUT_ENV_VAR,
    SHEET_URL_ENV_VAR,
)
from core.errors import FeedConfigError

# Field name -> environment variable that supplies it.
REQUIRED_FIELDS = {"sheet_url": SHEET_URL_ENV_VAR}


@dataclass(frozen=True)
class FeedSyncConfig:
    """Validated runtime configuration.

    Attributes:
        sheet_url: Remote TSV export URL of the editorial sheet.
        feed_path: Local JSON file holding the persisted feed.
        fetch_timeout_seconds: Timeout applied to the sheet download.
    """

    sheet_url: str | None
    feed_path: Path
    fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "FeedSyncConfig":
        """Build config from process environment variables.

        Returns:
            A config object. Required fields are checked later by
            ``require_fields`` so CLI overrides can fill them in first.

        Raises:
            FeedConfigError: If environment values are invalid.
        """
        sheet_url = os.getenv(SHEET_URL_ENV_VAR) or None
        feed_path_value = os.getenv(FEED_PATH_ENV_VAR, str(DEFAULT_FEED_PATH))
        timeout_value = os.getenv(FETCH_TIMEOUT_ENV_VAR, str(DEFAULT_FETCH_TIMEOUT_SECONDS))
        return cls(
            sheet_url=sheet_url,
            feed_path=Path(feed_path_value).expanduser(),
            fetch_timeout_seconds=_parse_timeout(timeout_value),
        )

    def require_fields(self) -> None:
        """Check that every required setting is present.

        Raises:
            FeedConfigError: Naming each missing setting.
        """
        missing = [
            env_name
            for field_name, env_name in REQUIRED_FIELDS.items()
            if not getattr(self, field_name)
        ]
        if missing:
            raise FeedConfigError(
                f"Missing required configuration: {', '.join(missing)}. "
                "Set the environment variable or pass --sheet-url."
            )


def _parse_timeout(raw_value: str) -> float:
    """Parse the fetch timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        FeedConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise FeedConfigError(
            f"Invalid {FETCH_TIMEOUT_ENV_VAR} value: "
            f"expected number of seconds, got '{raw_value}'."
        ) from error
    if timeout <= 0:
        raise FeedConfigError(
            f"Invalid {FETCH_TIMEOUT_ENV_VAR} value: expected a positive number, got '{raw_value}'."
        )
    return timeout
