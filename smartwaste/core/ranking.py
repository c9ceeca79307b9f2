"""
Urgency ordering for inventory listings and the dashboard.

Items sort by tone (overdue, then expiring soon, then ok) and then by expiry.
Expiry is compared as the canonical YYYY-MM-DD string, which orders the same
way as the date itself.
"""

from datetime import date
from typing import Iterable, List, Optional, Tuple

from smartwaste.core.risk import as_day, classify


def urgency_key(item, today: Optional[date] = None) -> Tuple[int, str]:
    status = classify(item.expiry, today)
    return status.tone.rank, item.expiry


def rank(items: Iterable, today: Optional[date] = None) -> List:
    """Return a new list, most urgent first. Equal keys keep their input order."""
    # Pin "today" once so a midnight rollover mid-sort can't split the keys.
    today = as_day(today)
    return sorted(items, key=lambda item: urgency_key(item, today))


def top_urgent(items: Iterable, n: int, today: Optional[date] = None) -> List:
    if n <= 0:
        return []
    return rank(items, today)[:n]
