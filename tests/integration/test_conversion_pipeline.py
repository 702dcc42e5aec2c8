"""Integration tests for conversions persisted through SQLite."""

from unit_converter.config import ConverterConfig
from unit_converter.models import Category
from unit_converter.orchestration import create_session
from unit_converter.presenters import NullPresenter
from unit_converter.services import SqliteStorage


def _config(tmp_path, **overrides):
    return ConverterConfig(storage_path=tmp_path / "storage.db", **overrides)


class TestPersistedHistory:
    """History should survive a new session over the same database."""

    def test_history_survives_restart(self, tmp_path):
        config = _config(tmp_path)
        first = create_session(config, NullPresenter())
        first.convert_length("3", "mile", "km")
        first.convert_area("1", "亩", "m²")

        second = create_session(config, NullPresenter())
        records = second.history()
        assert [r.category for r in records] == ["Area", "Length"]
        assert records[0].to_value == "666.6670"

    def test_capacity_from_config(self, tmp_path):
        config = _config(tmp_path, history_max_items=3)
        session = create_session(config, NullPresenter())
        for i in range(1, 6):
            session.convert(Category.SPEED, str(i))
        assert [r.from_value for r in session.history()] == [5, 4, 3]

    def test_clear_survives_restart(self, tmp_path):
        config = _config(tmp_path)
        session = create_session(config, NullPresenter())
        session.convert_time("1", "week", "d")
        session.clear_history()
        assert create_session(config, NullPresenter()).history() == []

    def test_corrupt_database_payload_reads_empty(self, tmp_path):
        config = _config(tmp_path)
        SqliteStorage(config.storage_path).write(config.history_storage_key, "[{broken")

        session = create_session(config, NullPresenter())
        assert session.history() == []
        session.convert_volume("1", "gal", "l")
        assert len(session.history()) == 1
