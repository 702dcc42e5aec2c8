"""PyQt6 desktop front-end for Unit Converter."""
