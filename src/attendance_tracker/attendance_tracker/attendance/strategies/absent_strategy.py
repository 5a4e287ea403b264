from __future__ import annotations

from dataclasses import replace
from datetime import time

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import StatusStrategy


class AbsentStrategy(StatusStrategy):
    """Absent: both punches cleared."""

    def apply(self, record: AttendanceRecord, *, punch_time: time) -> AttendanceRecord:
        return replace(record, punch_in=None, punch_out=None, status=AttendanceStatus.ABSENT)
