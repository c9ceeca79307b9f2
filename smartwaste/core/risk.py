"""
Expiry risk classification.

Both "today" and the expiry are plain calendar dates, so the day difference is
exact and never affected by time of day or DST shifts.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from smartwaste.core.errors import InvalidDateError

# Items expiring within this many days (inclusive) are flagged as "warning".
WARNING_WINDOW_DAYS = 2

# ASCII digits only: \d would also accept other scripts' digits.
_ISO_DATE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")

DateLike = Union[str, date]


class Tone(str, Enum):
    DANGER = "danger"
    WARNING = "warning"
    OK = "ok"

    @property
    def rank(self) -> int:
        return _TONE_RANK[self]

    @property
    def label(self) -> str:
        return _TONE_LABEL[self]


_TONE_RANK = {Tone.DANGER: 0, Tone.WARNING: 1, Tone.OK: 2}
_TONE_LABEL = {Tone.DANGER: "Overdue", Tone.WARNING: "Expiring soon", Tone.OK: "OK"}
_SUGGESTED_ACTION = {
    Tone.DANGER: "Dispose / log waste",
    Tone.WARNING: "Use first / apply discount",
    Tone.OK: "Monitor",
}


@dataclass(frozen=True)
class ExpiryStatus:
    tone: Tone
    days: int

    @property
    def label(self) -> str:
        return self.tone.label

    @property
    def to_schema(self) -> dict:
        return {"tone": self.tone.value, "days": self.days, "label": self.label}


def parse_expiry(value: DateLike) -> date:
    """Parse a canonical YYYY-MM-DD date, rejecting anything that is not a real day.

    Year, month and day are checked by constructing the date directly, so
    "2026-02-31" fails instead of rolling over into March.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(value)

    match = _ISO_DATE.match(value.strip())
    if not match:
        raise InvalidDateError(value)
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(value) from exc


def as_day(today: Optional[date]) -> date:
    if today is None:
        return date.today()
    if isinstance(today, datetime):
        return today.date()
    return today


def days_until(expiry: DateLike, today: Optional[date] = None) -> int:
    """Signed number of days from today to expiry (negative once overdue)."""
    return (parse_expiry(expiry) - as_day(today)).days


def classify(expiry: DateLike, today: Optional[date] = None) -> ExpiryStatus:
    days = days_until(expiry, today)
    if days < 0:
        return ExpiryStatus(tone=Tone.DANGER, days=days)
    if days <= WARNING_WINDOW_DAYS:
        return ExpiryStatus(tone=Tone.WARNING, days=days)
    return ExpiryStatus(tone=Tone.OK, days=days)


def suggested_action(tone: Tone) -> str:
    return _SUGGESTED_ACTION[Tone(tone)]
