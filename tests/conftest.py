"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta

import pytest

from unit_converter.config import ConverterConfig
from unit_converter.models import HistoryRecord
from unit_converter.orchestration import ConverterSession
from unit_converter.presenters import NullPresenter
from unit_converter.services import ConversionEngine, HistoryStore, InMemoryStorage


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths."""
    return ConverterConfig(
        storage_path=temp_dir / "storage.db",
        history_max_items=10,
    )


@pytest.fixture
def memory_storage():
    """Provide an empty in-memory storage backend."""
    return InMemoryStorage()


class FixedClock:
    """A clock that advances one second on every call."""

    def __init__(self, start=datetime(2026, 10, 18, 9, 5, 0)):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current += timedelta(seconds=1)
        return now


@pytest.fixture
def fixed_clock():
    """Provide a deterministic clock starting at 2026-10-18 09:05:00."""
    return FixedClock()


@pytest.fixture
def history_store(memory_storage, fixed_clock):
    """Provide a HistoryStore over in-memory storage."""
    return HistoryStore(memory_storage, clock=fixed_clock)


@pytest.fixture
def engine(test_config):
    """Provide a conversion engine with the test configuration."""
    return ConversionEngine(test_config)


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


class RecordingPresenter:
    """A real PresenterProtocol implementation that records all calls for assertion."""

    def __init__(self):
        self.messages = []
        self.results = []
        self.histories = []
        self.snapshots = []

    def show_info(self, message: str) -> None:
        self.messages.append(("info", message))

    def show_success(self, message: str) -> None:
        self.messages.append(("success", message))

    def show_warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def show_error(self, message: str) -> None:
        self.messages.append(("error", message))

    def show_result(self, result) -> None:
        self.results.append(result)

    def show_history(self, records) -> None:
        self.histories.append(records)

    def show_rates(self, snapshot) -> None:
        self.snapshots.append(snapshot)


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


@pytest.fixture
def session(engine, history_store, recording_presenter):
    """Provide a conversion session over in-memory history."""
    return ConverterSession(engine, history_store, recording_presenter)


@pytest.fixture
def make_record():
    """Factory fixture for creating HistoryRecord instances with sensible defaults."""

    def _make(
        from_value=1.0,
        from_unit="km",
        to_value="1000.0000",
        to_unit="m",
        category="Length",
        timestamp="",
    ):
        return HistoryRecord(
            from_value=from_value,
            from_unit=from_unit,
            to_value=to_value,
            to_unit=to_unit,
            category=category,
            timestamp=timestamp,
        )

    return _make
