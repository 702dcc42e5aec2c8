"""
Unit Converter - Multi-Category Unit Conversion Tool

Converts values between units of length, weight, area, volume, speed,
time, temperature and currency, and keeps a short history of recent
conversions.
"""

__version__ = "1.0.0"
__author__ = "Unit Converter Contributors"
