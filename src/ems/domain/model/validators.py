"""Syntactic validators for event dates and times.

Only range checks are performed: there is no month-length or leap-year
logic, so ``2024-02-31`` is accepted.
"""

from __future__ import annotations


def _to_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def is_valid_date(value: str) -> bool:
    """Check a ``YYYY-MM-DD`` string."""
    if len(value) != 10 or value[4] != "-" or value[7] != "-":
        return False
    year = _to_int(value[0:4])
    month = _to_int(value[5:7])
    day = _to_int(value[8:10])
    if year is None or month is None or day is None:
        return False
    return 1900 <= year <= 2100 and 1 <= month <= 12 and 1 <= day <= 31


def is_valid_time(value: str) -> bool:
    """Check a 24-hour ``HH:MM`` string."""
    if len(value) != 5 or value[2] != ":":
        return False
    hour = _to_int(value[0:2])
    minute = _to_int(value[3:5])
    if hour is None or minute is None:
        return False
    return 0 <= hour <= 23 and 0 <= minute <= 59
