"""Protocol for key-value persistence backends."""

from typing import Protocol


class KeyValueStorage(Protocol):
    """Interface for the medium the history ledger is persisted to.

    Payloads are opaque strings; callers own the encoding. Any backend
    (SQLite file, in-memory dict, etc.) implements this protocol to
    hold the ledger.
    """

    def read(self, key: str) -> str | None:
        """Read the payload stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored payload, or None if the key is absent.
        """
        ...

    def write(self, key: str, payload: str) -> None:
        """Store a payload under a key, replacing any previous value.

        Args:
            key: Storage key
            payload: Serialized value
        """
        ...

    def delete(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op.

        Args:
            key: Storage key
        """
        ...
