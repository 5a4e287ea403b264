from __future__ import annotations

from dataclasses import replace
from datetime import time

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import StatusStrategy


class PresentStrategy(StatusStrategy):
    """Present: punch-in restamped, punch-out untouched."""

    def apply(self, record: AttendanceRecord, *, punch_time: time) -> AttendanceRecord:
        return replace(record, punch_in=punch_time, status=AttendanceStatus.PRESENT)
