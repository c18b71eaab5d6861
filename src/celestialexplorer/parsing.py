"""User input parsing for the date/time editors."""

import math
import re
from datetime import date, datetime

_TIME_STRIP = re.compile(r"[^0-9:]")


class InputError(ValueError):
    """Malformed user input. Callers discard the edit and keep the previous state."""


def parse_time(value: str) -> float:
    """Parse an ``HH:MM`` string into fractional hours.

    Anything other than digits and ``:`` is dropped first, so ``" 7:05 "`` and
    ``"07h:05"`` both parse.

    Args:
        value: Time string typed by the user.

    Returns:
        Hours in [0, 24).

    Raises:
        InputError: When the string is not ``H:MM``/``HH:MM`` or is out of range.
    """
    if not isinstance(value, str):
        raise InputError(f"Not an HH:MM time: {value!r}")
    cleaned = _TIME_STRIP.sub("", value)
    parts = cleaned.split(":")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise InputError(f"Not an HH:MM time: {value!r}")
    hours, minutes = int(parts[0]), int(parts[1])
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise InputError(f"Time out of range: {value!r}")
    return hours + minutes / 60


def parse_date(value: str | date) -> date:
    """Parse a ``YYYY-MM-DD`` string (or pass a date through).

    Raises:
        InputError: When the string is not a valid calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError) as e:
        raise InputError(f"Not a YYYY-MM-DD date: {value!r}") from e


def require_finite(*values: float) -> None:
    """Raise InputError if any value is NaN or infinite."""
    for v in values:
        if not math.isfinite(v):
            raise InputError(f"Non-finite value: {v!r}")


def format_time(hours: float) -> str:
    """Format fractional hours as ``HH:MM`` (minutes truncated)."""
    h = int(hours)
    m = int((hours % 1) * 60)
    return f"{h:02d}:{m:02d}"


def format_date(d: date, sep: str = ".") -> str:
    """Format a date as ``YYYY.MM.DD`` for display (``sep="-"`` for input fields)."""
    return d.strftime(f"%Y{sep}%m{sep}%d")
