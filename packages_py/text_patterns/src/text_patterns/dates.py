"""
Date extraction from free text.
"""
from datetime import datetime
from typing import Optional, Tuple

from .regexp import RegExp

# Pattern and the order its groups appear in
DATE_PATTERNS: Tuple[Tuple[str, Tuple[str, str, str]], ...] = (
    (r"(\d{4})[-/](\d{1,2})[-/](\d{1,2})", ("year", "month", "day")),
    (r"(\d{1,2})[-/](\d{1,2})[-/](\d{4})", ("month", "day", "year")),
)


def to_date(text: str) -> Optional[datetime]:
    """
    Find the first date in ``text`` and return it at midnight.

    Supports ``Y-m-d``, ``m-d-Y`` and their ``/`` forms, with one- or
    two-digit months and days. Returns None when no valid date is found.
    """
    for pattern, order in DATE_PATTERNS:
        found = RegExp(pattern).match(text)
        if not found or len(found) != 4:
            continue
        parts = dict(zip(order, (int(value) for value in found[1:])))
        try:
            return datetime(parts["year"], parts["month"], parts["day"])
        except ValueError:
            continue
    return None
