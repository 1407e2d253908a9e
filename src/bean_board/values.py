"""Lenient parsing of spreadsheet cell values."""

from __future__ import annotations

import re
from datetime import datetime

from dateutil import parser as dateparser

# Date parts missing from a cell are taken from here.
DEFAULT_DATE = datetime(1900, 1, 1)

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(value: str | None) -> float | None:
    """Parse the leading number of a cell, e.g. ``"8.5/10"`` -> ``8.5``.

    Returns None when the cell does not start with a number.
    """
    if not value:
        return None
    match = _LEADING_NUMBER.match(value)
    if not match:
        return None
    try:
        return float(match.group(1))
    except (ValueError, OverflowError):
        return None


def parse_date(value: str | None) -> datetime | None:
    """Parse a free-text calendar date. Returns a naive datetime or None."""
    if not value or not value.strip():
        return None
    try:
        parsed = dateparser.parse(value.strip(), default=DEFAULT_DATE)
    except (ValueError, OverflowError):
        return None
    if parsed is None:
        return None
    return parsed.replace(tzinfo=None)
