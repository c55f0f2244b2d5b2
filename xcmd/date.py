"""Date strings in the fixed formats used for notes and headings."""

from __future__ import annotations

from datetime import datetime

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _now(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now()


def date_min(now: datetime | None = None) -> str:
    """Return the date as ``YYYY/MM/DD``."""
    now = _now(now)
    return f"{now.year:04d}/{now.month:02d}/{now.day:02d}"


def date_full(now: datetime | None = None) -> str:
    """Return the date as ``YYYY Mon DD`` with an English month abbreviation."""
    now = _now(now)
    return f"{now.year:04d} {_MONTHS[now.month - 1][:3]} {now.day:02d}"


def date_time(now: datetime | None = None) -> str:
    """Return date and 12-hour time as ``YYYY/MM/DD hh:mmAM``."""
    now = _now(now)
    hour = now.hour % 12 or 12
    meridiem = "PM" if now.hour >= 12 else "AM"
    return f"{date_min(now)} {hour:02d}:{now.minute:02d}{meridiem}"


def date_head(now: datetime | None = None) -> str:
    """Return the date as ``YYYY Month DD, Weekday`` for headings."""
    now = _now(now)
    return (
        f"{now.year:04d} {_MONTHS[now.month - 1]} {now.day:02d}, "
        f"{_WEEKDAYS[now.weekday()]}"
    )