"""SQLite-backed key-value storage."""

import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".unit_converter" / "storage.db"


class SqliteStorage:
    """Durable per-user key-value storage.

    Uses a single SQLite table so the ledger survives restarts.
    """

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        """Initialize the storage.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path
        self._initialized = False

    def initialize(self) -> None:
        """Create the database and table if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS key_value (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """)
        self._initialized = True
        logger.info(f"Storage initialized at {self.db_path}")

    def read(self, key: str) -> str | None:
        """Read the payload stored under a key.

        Args:
            key: Storage key

        Returns:
            Stored payload, or None if absent
        """
        self._ensure_initialized()
        with sqlite3.connect(str(self.db_path)) as conn:
            row = conn.execute(
                "SELECT value FROM key_value WHERE key = ?",
                (key,),
            ).fetchone()
        if row is None:
            return None
        return row[0]

    def write(self, key: str, payload: str) -> None:
        """Store a payload, replacing any previous value.

        Args:
            key: Storage key
            payload: Serialized value
        """
        self._ensure_initialized()
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.execute(
                "INSERT OR REPLACE INTO key_value (key, value) VALUES (?, ?)",
                (key, payload),
            )

    def delete(self, key: str) -> None:
        """Remove a key if present.

        Args:
            key: Storage key
        """
        self._ensure_initialized()
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.execute("DELETE FROM key_value WHERE key = ?", (key,))

    def _ensure_initialized(self) -> None:
        """Create the schema on first use."""
        if not self._initialized:
            self.initialize()
