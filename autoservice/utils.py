"""Shared utilities used across the booking client."""

import re
from datetime import date, datetime
from typing import Optional


def digits_only(value: str) -> str:
    """Strip everything except digits.

    Examples:
        >>> digits_only("+1 (555) 123-4567")
        '15551234567'
    """
    return re.sub(r"[^\d]", "", value)


def parse_calendar_date(value: object) -> Optional[date]:
    """Coerce a backend date value to a calendar date.

    Accepts ``date``/``datetime`` objects, ``YYYY-MM-DD`` strings and full
    ISO 8601 timestamps (a trailing ``Z`` is treated as UTC). Empty values
    map to ``None``; anything else unparseable raises ``ValueError``.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return date.fromisoformat(text)
    except ValueError:
        return datetime.fromisoformat(text).date()
