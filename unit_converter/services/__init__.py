"""Business logic services for Unit Converter."""

from .conversion_engine import ConversionEngine
from .exchange_rate_board import ExchangeRateBoard
from .history_store import HistoryStore
from .interval_task import IntervalTask
from .rate_table import RateTable
from .storage import InMemoryStorage, SqliteStorage

__all__ = [
    "RateTable",
    "ConversionEngine",
    "HistoryStore",
    "InMemoryStorage",
    "SqliteStorage",
    "ExchangeRateBoard",
    "IntervalTask",
]
