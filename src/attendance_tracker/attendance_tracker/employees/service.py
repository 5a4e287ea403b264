from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import now_local
from ..common.validators import require_iso_date, require_non_empty
from ..core.constants import UNKNOWN_LABEL
from ..core.enums import AttendanceStatus
from ..storage.store import AttendanceStore
from .model import Employee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: register employees and resolve their display fields."""

    def __init__(self, store: AttendanceStore):
        self._store = store

    def add_employee(
        self,
        *,
        name: str,
        position: str,
        department: str,
        join_date: date | str,
        now: datetime | None = None,
    ) -> Employee:
        """Create an employee together with an absent record for today."""
        name = require_non_empty(name, "Name")
        position = require_non_empty(position, "Position")
        department = require_non_empty(department, "Department")
        join_date = require_iso_date(join_date, "Join date")

        today = (now or now_local()).date()
        employee = Employee(
            employee_id=self._store.next_employee_id(),
            name=name,
            position=position,
            department=department,
            join_date=join_date,
        )
        record = AttendanceRecord(
            record_id=self._store.next_record_id(),
            employee_id=employee.employee_id,
            work_date=today,
            punch_in=None,
            punch_out=None,
            status=AttendanceStatus.ABSENT,
        )

        self._store.add_employee(employee)
        self._store.add_record(record)
        self._store.flush()

        logger.info("Added employee %s (%s, %s)", employee.employee_id, employee.name, employee.department)
        return employee

    def list_employees(self) -> Sequence[Employee]:
        return self._store.employees

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self._store.get_employee(employee_id)

    def departments(self) -> list[str]:
        seen: list[str] = []
        for employee in self._store.employees:
            if employee.department not in seen:
                seen.append(employee.department)
        return seen

    def employee_name(self, employee_id: int) -> str:
        return resolve_name(self._store.employees, employee_id)

    def employee_department(self, employee_id: int) -> str:
        return resolve_department(self._store.employees, employee_id)


def _find(employees: Sequence[Employee], employee_id: int) -> Optional[Employee]:
    return next((e for e in employees if e.employee_id == employee_id), None)


def resolve_name(employees: Sequence[Employee], employee_id: int) -> str:
    employee = _find(employees, employee_id)
    return (employee.name if employee else "") or UNKNOWN_LABEL


def resolve_department(employees: Sequence[Employee], employee_id: int) -> str:
    employee = _find(employees, employee_id)
    return (employee.department if employee else "") or UNKNOWN_LABEL
