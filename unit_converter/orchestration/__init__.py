"""Orchestration layer for conversion sessions."""

from .converter_session import ConverterSession
from .session_factory import create_history_store, create_session

__all__ = ["ConverterSession", "create_history_store", "create_session"]
