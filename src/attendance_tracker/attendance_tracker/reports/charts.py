"""Chart-ready projections of a filtered record set (no rendering)."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from ..attendance.model import AttendanceRecord
from .summary import summarize

DISTRIBUTION_LABELS = ("Present", "Absent", "Late", "Half Day")


@dataclass(frozen=True)
class ChartSeries:
    label: str
    labels: list[str]
    data: list[int]

    def as_dict(self) -> dict:
        return {"label": self.label, "labels": list(self.labels), "data": list(self.data)}


def distribution_data(records: Sequence[AttendanceRecord]) -> ChartSeries:
    summary = summarize(records)
    return ChartSeries(
        label="Attendance Distribution",
        labels=list(DISTRIBUTION_LABELS),
        data=[summary.present, summary.absent, summary.late, summary.half_day],
    )


def trend_data(records: Sequence[AttendanceRecord]) -> ChartSeries:
    per_day = Counter(r.work_date.isoformat() for r in records)
    labels = sorted(per_day)
    return ChartSeries(
        label="Attendance Trend",
        labels=labels,
        data=[per_day[d] for d in labels],
    )
