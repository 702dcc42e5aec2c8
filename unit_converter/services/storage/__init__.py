"""Key-value storage backends for the history ledger."""

from .memory_storage import InMemoryStorage
from .sqlite_storage import DEFAULT_DB_PATH, SqliteStorage

__all__ = ["DEFAULT_DB_PATH", "InMemoryStorage", "SqliteStorage"]
