from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import ATTENDANCE_SLOT, EMPLOYEES_SLOT
from ..employees.model import Employee
from .repository import SlotStorage
from .serialization import dump_employees, dump_records, load_employees, load_records

logger = logging.getLogger(__name__)


class AttendanceStore:
    """In-memory employees and attendance records backed by two slots.

    Lifecycle: ``load()`` once at startup, ``flush()`` after every mutation.
    Both collections are rewritten in full on flush.
    """

    def __init__(self, storage: SlotStorage):
        self._storage = storage
        self._employees: list[Employee] = []
        self._records: list[AttendanceRecord] = []

    def load(self) -> "AttendanceStore":
        self._employees = load_employees(self._storage.read_slot(EMPLOYEES_SLOT), slot=EMPLOYEES_SLOT)
        self._records = load_records(self._storage.read_slot(ATTENDANCE_SLOT), slot=ATTENDANCE_SLOT)
        logger.info("Loaded %d employees and %d attendance records", len(self._employees), len(self._records))
        return self

    def flush(self) -> None:
        self._storage.write_slot(EMPLOYEES_SLOT, dump_employees(self._employees))
        self._storage.write_slot(ATTENDANCE_SLOT, dump_records(self._records))
        logger.debug("Flushed %d employees and %d attendance records", len(self._employees), len(self._records))

    @property
    def employees(self) -> Sequence[Employee]:
        return tuple(self._employees)

    @property
    def records(self) -> Sequence[AttendanceRecord]:
        return tuple(self._records)

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        for employee in self._employees:
            if employee.employee_id == employee_id:
                return employee
        return None

    def next_employee_id(self) -> int:
        return max((e.employee_id for e in self._employees), default=0) + 1

    def next_record_id(self) -> int:
        return max((r.record_id for r in self._records), default=0) + 1

    def add_employee(self, employee: Employee) -> None:
        self._employees.append(employee)

    def add_record(self, record: AttendanceRecord) -> None:
        self._records.append(record)

    def replace_records(self, records: Iterable[AttendanceRecord]) -> None:
        self._records = list(records)
