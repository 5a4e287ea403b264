from __future__ import annotations

from dataclasses import replace
from datetime import time

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import StatusStrategy


class HalfDayStrategy(StatusStrategy):
    """Half day: missing punches are filled, existing ones kept."""

    def apply(self, record: AttendanceRecord, *, punch_time: time) -> AttendanceRecord:
        return replace(
            record,
            punch_in=record.punch_in or punch_time,
            punch_out=record.punch_out or punch_time,
            status=AttendanceStatus.HALF_DAY,
        )
