"""Bounded, persisted ledger of recent conversions."""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from unit_converter.exceptions import MalformedLedgerError
from unit_converter.interfaces import KeyValueStorage
from unit_converter.models import HistoryRecord

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "convert_history"
DEFAULT_MAX_ITEMS = 10
DEFAULT_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"

HistoryListener = Callable[[list[HistoryRecord]], None]


class HistoryStore:
    """Newest-first conversion history, capped at ``max_items`` records.

    The whole ledger is stored as one JSON array under a single key.
    Every read-modify-write runs under one lock, so callers on different
    threads always observe sequential updates. A payload that cannot be
    decoded reads as an empty ledger.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str = DEFAULT_STORAGE_KEY,
        max_items: int = DEFAULT_MAX_ITEMS,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the history store.

        Args:
            storage: Persistence backend holding the ledger
            storage_key: Key the ledger is stored under
            max_items: Maximum number of records kept
            timestamp_format: strftime format for record timestamps
            clock: Source of the current time
        """
        if max_items < 1:
            raise ValueError(f"max_items must be at least 1, got {max_items}")
        self.storage = storage
        self.storage_key = storage_key
        self.max_items = max_items
        self.timestamp_format = timestamp_format
        self._clock = clock
        self._lock = threading.Lock()
        self._listeners: list[HistoryListener] = []

    def subscribe(self, listener: HistoryListener) -> None:
        """Register a callback run with the new ledger after every change.

        Args:
            listener: Callable receiving the updated record list
        """
        self._listeners.append(listener)

    def list(self) -> list[HistoryRecord]:
        """Get the ledger, newest first.

        Returns:
            Records (at most ``max_items``), or an empty list if nothing is
            stored or the stored payload is malformed
        """
        with self._lock:
            return self._load()

    def add(self, record: HistoryRecord) -> HistoryRecord:
        """Stamp a record with the current time and prepend it.

        The oldest record is evicted when the ledger would exceed
        ``max_items``.

        Args:
            record: Record to add (any existing timestamp is replaced)

        Returns:
            The stamped record as stored
        """
        stamped = replace(record, timestamp=self._clock().strftime(self.timestamp_format))

        with self._lock:
            records = self._load()
            records.insert(0, stamped)
            if len(records) > self.max_items:
                evicted = records.pop()
                logger.debug(f"Evicted oldest history record: {evicted}")
            self._save(records)

        logger.info(f"Recorded conversion: {stamped}")
        self._notify(records)
        return stamped

    def clear(self) -> None:
        """Delete the persisted ledger."""
        with self._lock:
            self.storage.delete(self.storage_key)

        logger.info("Conversion history cleared")
        self._notify([])

    def _load(self) -> list[HistoryRecord]:
        """Read and decode the ledger. Caller must hold the lock."""
        payload = self.storage.read(self.storage_key)
        if payload is None:
            return []
        try:
            return decode_ledger(payload)[: self.max_items]
        except MalformedLedgerError as e:
            logger.warning(f"Ignoring malformed conversion history: {e}")
            return []

    def _save(self, records: list[HistoryRecord]) -> None:
        """Encode and write the ledger. Caller must hold the lock."""
        self.storage.write(self.storage_key, encode_ledger(records))

    def _notify(self, records: list[HistoryRecord]) -> None:
        for listener in self._listeners:
            listener(list(records))


def encode_ledger(records: list[HistoryRecord]) -> str:
    """Serialize records to the persisted JSON array."""
    return json.dumps([record.to_dict() for record in records], ensure_ascii=False)


def decode_ledger(payload: str) -> list[HistoryRecord]:
    """Parse a persisted JSON array into records.

    Raises:
        MalformedLedgerError: If the payload is not a list of valid records
    """
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedLedgerError(f"History payload is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedLedgerError(f"History payload is not a list: {type(data).__name__}")

    return [HistoryRecord.from_dict(item) for item in data]
