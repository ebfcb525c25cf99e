"""
Player Utility Functions

Shared utility functions for player data processing and calculations.
"""

from datetime import date
from typing import Optional, Union


def calculate_player_age(birthdate: Union[date, str], current_date: Optional[Union[date, str]] = None) -> int:
    """
    Calculate player age from birthdate and current game date.

    Uses accurate date arithmetic to determine age, accounting for whether
    the player's birthday has occurred yet in the current year.

    Args:
        birthdate: Player birthdate as a date or "YYYY-MM-DD" string
        current_date: Simulation date as a date or "YYYY-MM-DD" string (today if omitted)

    Returns:
        Age in years (integer)

    Examples:
        >>> calculate_player_age("1992-03-10", "2025-09-04")
        33
        >>> calculate_player_age("1992-09-10", "2025-09-04")
        32  # Birthday hasn't happened yet this year

    Raises:
        ValueError: If date strings are in invalid format

    Notes:
        - Returns 0 if birthdate is in the future (edge case)
    """
    birth = _coerce_date(birthdate)
    current = _coerce_date(current_date) if current_date is not None else date.today()

    age = current.year - birth.year

    # Adjust if birthday hasn't occurred yet this year
    if (current.month, current.day) < (birth.month, birth.day):
        age -= 1

    if age < 0:
        return 0

    return age


def _coerce_date(value: Union[date, str]) -> date:
    if isinstance(value, date):
        return value
    try:
        year, month, day = (int(part) for part in value.split('-'))
        return date(year, month, day)
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Invalid date format: {e}. Expected YYYY-MM-DD format.")


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a value into [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp_attribute(value: int, low: int = 0, high: int = 100) -> int:
    """Clamp an attribute value into [low, high] and return it as int."""
    return int(clamp(value, low, high))
