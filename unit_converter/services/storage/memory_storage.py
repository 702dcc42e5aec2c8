"""In-memory key-value storage."""


class InMemoryStorage:
    """Dict-backed storage for tests and throwaway sessions.

    Implements KeyValueStorage through structural subtyping.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self._data.get(key)

    def write(self, key: str, payload: str) -> None:
        self._data[key] = payload

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data
