from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..attendance.model import AttendanceRecord, AttendanceReportRow
from ..common.datetime_utils import format_punch_time
from ..core.constants import DATE_FORMAT, EMPTY_PUNCH
from ..employees.model import Employee
from ..employees.service import resolve_department, resolve_name
from ..storage.store import AttendanceStore
from .charts import ChartSeries, distribution_data, trend_data
from .export import write_report_csv
from .filters import ReportFilter, apply_filter
from .summary import AttendanceSummary, summarize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: AttendanceSummary
    distribution: ChartSeries
    trend: ChartSeries

    def as_dict(self) -> dict:
        return {
            "rows": self.rows,
            "summary": self.summary.as_dict(),
            "distribution": self.distribution.as_dict(),
            "trend": self.trend.as_dict(),
        }


class ReportService:
    def __init__(self, store: AttendanceStore):
        self._store = store

    def filtered_records(self, report_filter: ReportFilter) -> list[AttendanceRecord]:
        return apply_filter(self._store.records, report_filter, self._store.employees)

    def build_report(self, report_filter: ReportFilter) -> ReportData:
        records = self.filtered_records(report_filter)
        employees = self._store.employees
        logger.debug(
            "Report period=%s date=%s employee=%r department=%r -> %d rows",
            report_filter.period.value,
            report_filter.reference_date,
            report_filter.employee,
            report_filter.department,
            len(records),
        )
        return ReportData(
            rows=[r.as_dict() for r in to_report_rows(records, employees)],
            summary=summarize(records),
            distribution=distribution_data(records),
            trend=trend_data(records),
        )

    def export_csv(self) -> str:
        """CSV of every stored record; the report filter does not apply."""
        return write_report_csv(to_report_rows(self._store.records, self._store.employees))


def to_report_rows(records: Iterable[AttendanceRecord], employees: Sequence[Employee]) -> list[AttendanceReportRow]:
    return [
        AttendanceReportRow(
            employee_name=resolve_name(employees, r.employee_id),
            department=resolve_department(employees, r.employee_id),
            work_date=r.work_date.strftime(DATE_FORMAT),
            punch_in=format_punch_time(r.punch_in) or EMPTY_PUNCH,
            punch_out=format_punch_time(r.punch_out) or EMPTY_PUNCH,
            status=r.status.value,
        )
        for r in records
    ]
