"""
Repository pattern for data access.

Handles the append-only prompt history: at most one record per exact
prompt text, no update path, cleared only as a whole.
"""

import json
import logging
from datetime import datetime
from typing import Callable, List, Optional

from ai_water_meter.core.aggregator import Period, PeriodStats, compute_period_stats

from .db import DEFAULT_DB_PATH, get_connection
from .models import PromptRecord, parse_timestamp

logger = logging.getLogger(__name__)


def initialize_schema(db_path: str = DEFAULT_DB_PATH) -> None:
    """Create the prompt_record and meter_setting tables if they don't exist.

    Args:
        db_path: Path to SQLite database file
    """
    conn = get_connection(db_path)
    try:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS prompt_record (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                timestamp TEXT NOT NULL,
                prompt TEXT NOT NULL UNIQUE,
                energy_data TEXT NOT NULL
            )
        """)
        conn.execute("""
            CREATE TABLE IF NOT EXISTS meter_setting (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        conn.commit()
    finally:
        conn.close()


class HistoryRepository:
    """Repository for the prompt history.

    Each call opens its own connection so the repository can be shared
    freely; the schema is created on construction.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        """Initialize the repository with a database path.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path
        initialize_schema(db_path)

    def append(self, record: PromptRecord) -> bool:
        """Append a record unless its prompt text is already stored.

        Args:
            record: The record to store

        Returns:
            True if the record was inserted, False for a duplicate prompt
        """
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                """
                INSERT OR IGNORE INTO prompt_record (timestamp, prompt, energy_data)
                VALUES (?, ?, ?)
                """,
                (
                    record.timestamp.isoformat(),
                    record.prompt,
                    json.dumps(record.energy_data),
                )
            )
            conn.commit()
            inserted = cursor.rowcount == 1
        finally:
            conn.close()

        if not inserted:
            logger.debug("Skipping duplicate prompt: %.40r", record.prompt)
        return inserted

    def append_many(self, records: List[PromptRecord]) -> int:
        """Append several records atomically, skipping duplicates.

        Returns:
            Number of records inserted
        """
        if not records:
            return 0

        conn = get_connection(self.db_path)
        inserted = 0
        try:
            conn.execute("BEGIN TRANSACTION")
            for record in records:
                cursor = conn.execute(
                    """
                    INSERT OR IGNORE INTO prompt_record (timestamp, prompt, energy_data)
                    VALUES (?, ?, ?)
                    """,
                    (
                        record.timestamp.isoformat(),
                        record.prompt,
                        json.dumps(record.energy_data),
                    )
                )
                inserted += cursor.rowcount
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
        return inserted

    def load_all(self, limit: Optional[int] = None) -> List[PromptRecord]:
        """Load history ordered oldest first.

        Rows whose stored data cannot be parsed are skipped with a warning.

        Args:
            limit: Optional maximum number of most recent records to return

        Returns:
            List of records ordered by timestamp (oldest first)

        Raises:
            ValueError: If limit is less than 1
        """
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        conn = get_connection(self.db_path)
        try:
            query = "SELECT id, timestamp, prompt, energy_data FROM prompt_record"
            params = []
            if limit is not None:
                query = f"SELECT * FROM ({query} ORDER BY timestamp DESC, id DESC LIMIT ?)"
                params.append(limit)
            query += " ORDER BY timestamp, id"
            rows = conn.execute(query, params).fetchall()
        finally:
            conn.close()

        records = []
        for row_id, timestamp, prompt, energy_data in rows:
            try:
                data = json.loads(energy_data)
                if not isinstance(data, dict):
                    raise ValueError("energy_data is not an object")
                records.append(PromptRecord(
                    timestamp=parse_timestamp(timestamp),
                    prompt=prompt,
                    energy_data=data,
                ))
            except ValueError as exc:
                logger.warning("Skipping malformed history row %s: %s", row_id, exc)
        return records

    def contains(self, prompt: str) -> bool:
        """Check whether a prompt text has already been recorded."""
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT 1 FROM prompt_record WHERE prompt = ? LIMIT 1", (prompt,)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def count(self) -> int:
        conn = get_connection(self.db_path)
        try:
            return conn.execute("SELECT COUNT(*) FROM prompt_record").fetchone()[0]
        finally:
            conn.close()

    def clear(self) -> int:
        """Delete the whole history.

        Returns:
            Number of records removed
        """
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("DELETE FROM prompt_record")
            conn.commit()
            return cursor.rowcount
        finally:
            conn.close()

    def get_setting(self, key: str) -> Optional[str]:
        """Read a stored setting, or None if it was never written."""
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT value FROM meter_setting WHERE key = ?", (key,)
            ).fetchone()
            return row[0] if row else None
        finally:
            conn.close()

    def get_or_create_setting(self, key: str, factory: Callable[[], str]) -> str:
        """Return a stored setting, writing factory() first if it is missing.

        The first writer wins, so concurrent callers all see the same value.
        Settings survive clear().
        """
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                "INSERT OR IGNORE INTO meter_setting (key, value) VALUES (?, ?)",
                (key, factory()),
            )
            conn.commit()
            return conn.execute(
                "SELECT value FROM meter_setting WHERE key = ?", (key,)
            ).fetchone()[0]
        finally:
            conn.close()

    def get_period_stats(self, period: Period, now: Optional[datetime] = None) -> PeriodStats:
        """Aggregate statistics for a period with a fresh scan of the history.

        Args:
            period: Reporting window
            now: Optional reference time

        Returns:
            PeriodStats for the period
        """
        return compute_period_stats(self.load_all(), period, now)


def get_repository(db_path: str = DEFAULT_DB_PATH) -> HistoryRepository:
    """Get a repository instance for a database path.

    Args:
        db_path: Path to SQLite database file

    Returns:
        An instance of HistoryRepository
    """
    return HistoryRepository(db_path)
