"""Command-line interface for Unit Converter."""
