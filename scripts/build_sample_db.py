#!/usr/bin/env python3
"""
Write the built-in sample schedule into a SQLite database.

The resulting file can be served by pointing ITINERARY_DB_PATH at it.

Usage:
    python scripts/build_sample_db.py
    python scripts/build_sample_db.py --db data/legs.db --replace
"""

import logging
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.itinerary_router.adapters.data_providers import SAMPLE_LEGS, write_legs
from src.itinerary_router.logging_config import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_DB = Path("data/legs.db")


def main(db_path: Path = DEFAULT_DB, replace: bool = False) -> int:
    """
    Write SAMPLE_LEGS to db_path.

    Args:
        db_path: Target SQLite file; parent directories are created.
        replace: Delete an existing file first instead of appending.

    Returns:
        Number of legs written.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)

    if replace and db_path.exists():
        logger.info("Removing existing database %s", db_path)
        db_path.unlink()

    return write_legs(db_path, SAMPLE_LEGS)


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Build the sample legs database")
    parser.add_argument("--db", type=Path, default=DEFAULT_DB, help="SQLite file to write")
    parser.add_argument("--replace", action="store_true", help="Overwrite an existing file")
    args = parser.parse_args()

    setup_logging()
    count = main(args.db, replace=args.replace)
    print(f"Wrote {count} legs to {args.db}")
