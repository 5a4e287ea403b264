from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance classification of one employee."""

    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half-day"
    LATE = "late"


class ReportPeriod(str, Enum):
    """Time bucket used to narrow report rows."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
