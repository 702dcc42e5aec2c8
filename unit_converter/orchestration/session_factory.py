"""Factory for creating a fully wired conversion session."""

from unit_converter.config import ConverterConfig
from unit_converter.interfaces import KeyValueStorage, PresenterProtocol
from unit_converter.orchestration.converter_session import ConverterSession
from unit_converter.services.conversion_engine import ConversionEngine
from unit_converter.services.history_store import HistoryStore
from unit_converter.services.storage import SqliteStorage


def create_history_store(
    config: ConverterConfig, storage: KeyValueStorage | None = None
) -> HistoryStore:
    """Create the history store described by a configuration.

    Args:
        config: Converter configuration
        storage: Storage backend; a SqliteStorage at ``config.storage_path`` if omitted

    Returns:
        HistoryStore bound to the storage
    """
    if storage is None:
        storage = SqliteStorage(config.storage_path)
    return HistoryStore(
        storage,
        storage_key=config.history_storage_key,
        max_items=config.history_max_items,
        timestamp_format=config.timestamp_format,
    )


def create_session(
    config: ConverterConfig,
    presenter: PresenterProtocol,
    storage: KeyValueStorage | None = None,
    follow_history: bool = True,
) -> ConverterSession:
    """Create a conversion session with its engine and history store.

    Args:
        config: Converter configuration
        presenter: Output presenter
        storage: Optional storage backend override
        follow_history: Whether history changes are pushed to the presenter

    Returns:
        Ready-to-use ConverterSession
    """
    return ConverterSession(
        engine=ConversionEngine(config),
        history=create_history_store(config, storage),
        presenter=presenter,
        follow_history=follow_history,
    )
