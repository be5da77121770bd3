"""
Formatting utilities for displaying generated values and their shares.
"""

from .constants import MAX_VALUE_DISPLAY_LENGTH, PERCENTAGE_PRECISION


def format_percentage(part: int, total: int, precision: int = PERCENTAGE_PRECISION) -> str:
    """Format ``part`` as a percentage of ``total``."""
    if total <= 0:
        return "n/a"
    return f"{100.0 * part / total:.{precision}f}%"


def format_value(value: object, max_length: int = MAX_VALUE_DISPLAY_LENGTH) -> str:
    """Format a generated value for display, truncating long representations."""
    text = repr(value)
    if len(text) > max_length:
        return text[: max_length - 3] + "..."
    return text
