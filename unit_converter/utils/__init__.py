"""Utility functions for Unit Converter."""

from .number_utils import format_fixed, format_plain, parse_number

__all__ = ["format_fixed", "format_plain", "parse_number"]
