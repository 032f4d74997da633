"""
SQLite Leg Provider - SQL to DataFrame adapter.

Reads leg records from a `legs` table and validates them against
LegSchema.
"""

import logging
import re
import sqlite3
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Set, Union

import pandas as pd

from src.itinerary_router.ports.leg_data_provider import LegDataProvider
from src.itinerary_router.schemas.leg import LEG_COLUMNS, LegDataFrame, LegSchema

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "legs"

_TABLE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _check_table_name(table: str) -> str:
    if not _TABLE_NAME.match(table):
        raise ValueError(f"Invalid table name: {table!r}")
    return table


def _to_row(record: Dict[str, Any]) -> tuple:
    return tuple(
        int(record[col]) if col == "duration_minutes" else str(record[col])
        for col in LEG_COLUMNS
    )


def write_legs(
    db_path: Union[str, Path],
    records: Sequence[Dict[str, Any]],
    table: str = DEFAULT_TABLE,
) -> int:
    """
    Create the legs table if needed and append records to it.

    Args:
        db_path: SQLite database file.
        records: Leg records with LegSchema columns.
        table: Target table name.

    Returns:
        Number of rows written.
    """
    table = _check_table_name(table)
    conn = sqlite3.connect(str(db_path))
    try:
        conn.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {table} (
                leg_id TEXT NOT NULL,
                origin TEXT NOT NULL,
                destination TEXT NOT NULL,
                operator TEXT NOT NULL,
                duration_minutes INTEGER NOT NULL,
                departure TEXT NOT NULL,
                arrival TEXT NOT NULL
            )
            """
        )
        conn.executemany(
            f"INSERT INTO {table} ({', '.join(LEG_COLUMNS)}) "
            f"VALUES ({', '.join('?' for _ in LEG_COLUMNS)})",
            [_to_row(record) for record in records],
        )
        conn.commit()
    finally:
        conn.close()

    logger.info("Wrote %d legs to %s", len(records), db_path)
    return len(records)


class SQLiteLegProvider(LegDataProvider):
    """
    Data provider for a SQLite database with a legs table.

    Rows are returned in insertion order (rowid), which is the catalog
    order used for hop lookups.

    Attributes:
        _db_path: Path to the SQLite database file.
        _table: Table holding leg rows.
        _conn: SQLite connection (lazy initialized).
    """

    def __init__(
        self,
        db_path: Union[str, Path],
        table: str = DEFAULT_TABLE,
    ) -> None:
        self._db_path = Path(db_path)
        self._table = _check_table_name(table)
        self._conn: Optional[sqlite3.Connection] = None

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._conn is None:
            if not self._db_path.exists():
                raise FileNotFoundError(f"Database not found: {self._db_path}")
            # Refreshes run on a background thread
            self._conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
        return self._conn

    def get_legs_df(self, origin: Optional[str] = None) -> LegDataFrame:
        """
        Fetch legs from the database.

        Args:
            origin: Filter by departure location (optional).

        Returns:
            DataFrame validated against LegSchema.
        """
        conn = self._get_connection()

        query = f"SELECT {', '.join(LEG_COLUMNS)} FROM {self._table}"
        params: list = []

        if origin:
            query += " WHERE origin = ?"
            params.append(origin)

        query += " ORDER BY rowid"

        logger.debug("Executing query: %s with params: %s", query, params)
        df = pd.read_sql(query, conn, params=params)

        if df.empty:
            logger.warning("No legs found in %s", self._db_path)
            df = pd.DataFrame(columns=LEG_COLUMNS)

        validated = LegSchema.validate(df)
        logger.info("Loaded %d legs from %s", len(validated), self._db_path)
        return validated

    def get_locations(self) -> Set[str]:
        conn = self._get_connection()
        query = f"""
            SELECT DISTINCT origin FROM {self._table}
            UNION
            SELECT DISTINCT destination FROM {self._table}
        """
        df = pd.read_sql(query, conn)
        return set(df.iloc[:, 0].dropna().unique())

    @property
    def name(self) -> str:
        return "SQLite"

    @property
    def is_available(self) -> bool:
        return self._db_path.exists()

    def close(self) -> None:
        """Close database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug("Database connection closed")
