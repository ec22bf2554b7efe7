"""Calendar helpers for contract and loan windows."""
from __future__ import annotations
from datetime import date, datetime
from typing import Any, Optional
import logging

from cafecost.utilities.constants import DATE_FORMAT

logger = logging.getLogger(__name__)

__all__ = ["parse_date", "month_diff", "month_diff_or_zero", "in_window"]


def parse_date(value: Any) -> Optional[date]:
    """Return a date for a date/datetime/ISO string, or None when it cannot be read."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.strptime(text[:10], DATE_FORMAT).date()
    except ValueError:
        logger.debug("Unparseable date %r", value)
        return None


def month_diff(start: date, end: date) -> int:
    """Whole months from start to end, counting the last month once end.day >= start.day.

    2024-01-15 -> 2024-03-15 is 3, 2024-01-15 -> 2024-03-14 is 2, and any end
    before start is 0.
    """
    if end < start:
        return 0
    months = (end.year - start.year) * 12 + (end.month - start.month)
    return months + (1 if end.day >= start.day else 0)


def month_diff_or_zero(start: Any, end: Any) -> int:
    """month_diff over raw values; 0 when either side is missing or invalid."""
    s = parse_date(start)
    e = parse_date(end)
    if s is None or e is None:
        return 0
    return month_diff(s, e)


def in_window(today: date, start: Any, end: Any) -> bool:
    """True when today lies inside [start, end]; a missing or invalid bound means no window."""
    s = parse_date(start)
    e = parse_date(end)
    if s is None or e is None:
        return False
    return s <= today <= e
