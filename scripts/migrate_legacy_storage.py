"""Rewrite legacy storage blobs under the canonical key.

Loads entries exactly as the app does (canonical key first, then each legacy
key) and saves the result under the canonical key. Legacy blobs are left in
place; they are simply no longer consulted once the canonical key exists.

Usage:
  python scripts/migrate_legacy_storage.py --dry-run
  python scripts/migrate_legacy_storage.py --backend sql --database-url sqlite:///./betsheet.db
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from collections.abc import Sequence

from dotenv import find_dotenv, load_dotenv

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from betsheet.config import resolve_storage_settings
from betsheet.db import create_blob_store, storage_keys_from_config
from betsheet.repositories.entry_repository import EntryRepository
from betsheet.services.aggregation_service import build_bet_summary


logger = logging.getLogger(__name__)


def _config_dict(args: argparse.Namespace) -> dict:
    config = resolve_storage_settings()
    if args.backend:
        config["STORAGE_BACKEND"] = args.backend
    if args.database_url:
        config["DATABASE_URL"] = args.database_url
    return config


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Migrate legacy bet storage to the canonical key")
    parser.add_argument("--backend", choices=["sql", "mongo"], default=None)
    parser.add_argument("--database-url", dest="database_url", type=str, default=None)
    parser.add_argument("--dry-run", action="store_true", help="Report what would be written without saving")
    parser.add_argument("--env-file", dest="env_file", type=str, default=None, help="Load this file instead of the nearest .env")
    args = parser.parse_args(argv)

    load_dotenv(args.env_file or find_dotenv(usecwd=True))
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    config = _config_dict(args)
    store = create_blob_store(config)
    repo = EntryRepository(store, storage_keys_from_config(config))

    entries = repo.load()
    summary = build_bet_summary(entries)
    logger.info(
        "Loaded %d entries (%d numbers, total %d)",
        summary.total_entries,
        summary.active_numbers,
        summary.total_amount,
    )

    if args.dry_run:
        logger.info("Dry run: nothing written to %s", repo.keys.canonical)
        return 0

    repo.save(entries)
    logger.info("Saved %d entries under %s", len(entries), repo.keys.canonical)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
