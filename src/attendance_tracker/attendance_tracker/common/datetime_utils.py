from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core.constants import DATE_FORMAT, PUNCH_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_punch_time(value: Optional[str]) -> Optional[time]:
    """Parse HH:MM string into time; empty values mean no punch."""
    if not value:
        return None
    return datetime.strptime(value, PUNCH_FORMAT).time()


def format_punch_time(value: Optional[time]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime(PUNCH_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def punch_time_of(now: datetime) -> time:
    """Time-of-day as recorded on a punch (minute precision)."""
    return now.time().replace(second=0, microsecond=0)


def week_start(reference: date) -> date:
    """Sunday on or before ``reference``."""
    sunday_index = (reference.weekday() + 1) % 7
    return reference - timedelta(days=sunday_index)


def week_bounds(reference: date) -> tuple[date, date]:
    start = week_start(reference)
    return start, start + timedelta(days=6)
