"""
Input validation utilities.
"""


def validate_non_negative(value: int, name: str) -> None:
    """Validate that an integer is zero or greater."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def validate_positive(value: int, name: str) -> None:
    """Validate that an integer is positive."""
    validate_non_negative(value, name)
    if value == 0:
        raise ValueError(f"{name} must be positive, got {value}")
