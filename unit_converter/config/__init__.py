"""Configuration management for Unit Converter."""

from .config import ConverterConfig
from .defaults import create_default_config

__all__ = ["ConverterConfig", "create_default_config"]
