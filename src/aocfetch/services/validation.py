"""Validators for the day and year command-line arguments."""

from __future__ import annotations

from aocfetch.errors import InvalidArgumentError

FIRST_DAY = 1
LAST_DAY = 25
FIRST_YEAR = 2015


def _as_int(value: int | str) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{value!r} must be a number")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise InvalidArgumentError(f"{value!r} must be a number") from exc


def validate_day(value: int | str) -> int:
    """Parse `value` as a puzzle day in [1, 25]."""
    day = _as_int(value)
    if not FIRST_DAY <= day <= LAST_DAY:
        raise InvalidArgumentError(f"Day must be between {FIRST_DAY} and {LAST_DAY} (got {day})")
    return day


def validate_year(value: int | str) -> int:
    """Parse `value` as an event year, 2015 or later."""
    year = _as_int(value)
    if year < FIRST_YEAR:
        raise InvalidArgumentError(f"Year must be {FIRST_YEAR} or greater (got {year})")
    return year


__all__ = ["FIRST_DAY", "FIRST_YEAR", "LAST_DAY", "validate_day", "validate_year"]
