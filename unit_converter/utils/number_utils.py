"""Number parsing and formatting utilities."""

import math
import re

# Leading decimal literal, as accepted by a browser's parseFloat
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(raw) -> float:
    """Normalize user input to a finite float.

    Strings are parsed from their longest leading numeric prefix
    ("12.5kg" -> 12.5). Empty, non-numeric and non-finite input all
    normalize to 0.0; this is never an error.

    Args:
        raw: Text, number or None

    Returns:
        Parsed value, or 0.0
    """
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return 0.0
    else:
        match = _NUMBER_PREFIX.match(str(raw).strip())
        if not match:
            return 0.0
        try:
            value = float(match.group(0))
        except (ValueError, OverflowError):
            return 0.0

    return value if math.isfinite(value) else 0.0


def format_fixed(value: float, decimals: int = 4) -> str:
    """Format a value with a fixed number of decimal places.

    Args:
        value: Value to format
        decimals: Digits after the decimal point

    Returns:
        Formatted string, e.g. "3.2808"
    """
    if value == 0:
        value = 0.0  # Avoid "-0.0000"
    return f"{value:.{decimals}f}"


def format_plain(value: float) -> str:
    """Format a value at full precision, without a trailing ".0".

    Args:
        value: Value to format

    Returns:
        Shortest round-tripping text, e.g. "1234567" or "0.1"
    """
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
