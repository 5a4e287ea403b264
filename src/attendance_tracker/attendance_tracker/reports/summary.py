from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceSummary:
    present: int = 0
    absent: int = 0
    late: int = 0
    half_day: int = 0
    total: int = 0

    def as_dict(self) -> dict:
        return {
            "present": self.present,
            "absent": self.absent,
            "late": self.late,
            "halfDay": self.half_day,
            "total": self.total,
        }


def summarize(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    counts = Counter(r.status for r in records)
    return AttendanceSummary(
        present=counts[AttendanceStatus.PRESENT],
        absent=counts[AttendanceStatus.ABSENT],
        late=counts[AttendanceStatus.LATE],
        half_day=counts[AttendanceStatus.HALF_DAY],
        total=sum(counts.values()),
    )
