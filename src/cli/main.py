"""feedsync CLI entry points.

This module exposes the sync and check commands.
It maps argparse commands onto pipeline calls and exit codes.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import FeedSyncConfig
from core.errors import FeedSyncError, FeedValidationError
from ingest.pipeline import check_feed, sync_feed
from transforms.item_validation import format_defect_report

EXIT_VALIDATION_FAILED = 1
EXIT_RUN_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="feedsync",
        description="Sync the editorial sheet into the feed",
    )
    parser.add_argument("--sheet-url", help="Override SHEET_TSV_URL for this command")
    parser.add_argument("--feed-path", help="Override FEEDSYNC_FEED_PATH for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_sync_command(subparsers)
    _add_check_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the feedsync CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.sheet_url, args.feed_path)
        if args.command == "sync":
            return _run_sync_command(config)
        return _run_check_command(config)
    except FeedValidationError as error:
        sys.stderr.write(format_defect_report(error.defects) + "\n")
        return EXIT_VALIDATION_FAILED
    except FeedSyncError as error:
        sys.stderr.write(f"error: {error}\n")
        return EXIT_RUN_FAILED


def _build_config(sheet_url: str | None, feed_path: str | None) -> FeedSyncConfig:
    """Build config with optional command-line overrides.

    Args:
        sheet_url: Optional sheet URL override.
        feed_path: Optional feed path override.

    Returns:
        Configuration for this invocation.
    """
    config = FeedSyncConfig.from_env()
    if sheet_url:
        config = replace(config, sheet_url=sheet_url)
    if feed_path:
        config = replace(config, feed_path=Path(feed_path).expanduser())
    return config


def _run_sync_command(config: FeedSyncConfig) -> int:
    """Handle sync command."""
    result = sync_feed(config)
    print(f"Synced {result.incoming_count} rows. Feed now has {result.total_count} items.")
    return 0


def _run_check_command(config: FeedSyncConfig) -> int:
    """Handle check command."""
    items = check_feed(config)
    print(f"Validated {len(items)} rows.")
    return 0


def _add_sync_command(subparsers: Any) -> None:
    """Register sync subcommand."""
    subparsers.add_parser("sync", help="Validate sheet rows and merge them into the feed")


def _add_check_command(subparsers: Any) -> None:
    """Register check subcommand."""
    subparsers.add_parser("check", help="Validate sheet rows without writing the feed")
