from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import now_local, week_bounds
from ..common.validators import require_iso_date
from ..core.enums import ReportPeriod
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.service import resolve_department, resolve_name


@dataclass(frozen=True)
class ReportFilter:
    """Report configuration: which employees, which department, which period."""

    period: ReportPeriod = ReportPeriod.WEEK
    employee: str = ""
    department: str = ""
    reference_date: date = field(default_factory=lambda: now_local().date())

    @classmethod
    def from_mapping(cls, args: Mapping[str, str], *, today: Optional[date] = None) -> "ReportFilter":
        period_s = (args.get("period") or ReportPeriod.WEEK.value).strip().lower()
        try:
            period = ReportPeriod(period_s)
        except ValueError:
            raise ValidationError(f"Unknown period '{period_s}'") from None

        date_s = args.get("date")
        reference_date = require_iso_date(date_s, "Date") if date_s else (today or now_local().date())

        return cls(
            period=period,
            employee=(args.get("employee") or "").strip(),
            department=(args.get("department") or "").strip(),
            reference_date=reference_date,
        )


def filter_by_period(
    records: Iterable[AttendanceRecord],
    period: ReportPeriod,
    reference_date: date,
) -> list[AttendanceRecord]:
    if period == ReportPeriod.DAY:
        return [r for r in records if r.work_date == reference_date]

    if period == ReportPeriod.WEEK:
        start, end = week_bounds(reference_date)
        return [r for r in records if start <= r.work_date <= end]

    reference = reference_date.isoformat()
    if period == ReportPeriod.MONTH:
        prefix = reference[:7]
    else:
        prefix = reference[:4]
    return [r for r in records if r.work_date.isoformat().startswith(prefix)]


def apply_filter(
    records: Iterable[AttendanceRecord],
    report_filter: ReportFilter,
    employees: Sequence[Employee],
) -> list[AttendanceRecord]:
    """Narrow by employee name, then department, then period."""
    filtered = list(records)

    if report_filter.employee:
        needle = report_filter.employee.lower()
        filtered = [r for r in filtered if needle in resolve_name(employees, r.employee_id).lower()]

    if report_filter.department:
        needle = report_filter.department.lower()
        filtered = [r for r in filtered if needle in resolve_department(employees, r.employee_id).lower()]

    return filter_by_period(filtered, report_filter.period, report_filter.reference_date)
