from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance on one day."""

    record_id: int
    employee_id: int
    work_date: date
    punch_in: Optional[time]
    punch_out: Optional[time]
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for report tables and file exports."""

    employee_name: str
    department: str
    work_date: str
    punch_in: str
    punch_out: str
    status: str

    def as_dict(self) -> dict:
        return {
            "employee_name": self.employee_name,
            "department": self.department,
            "date": self.work_date,
            "punch_in": self.punch_in,
            "punch_out": self.punch_out,
            "status": self.status,
        }
