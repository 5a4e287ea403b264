from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

import pytest

from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.container import build_container
from attendance_tracker.core.enums import AttendanceStatus
from attendance_tracker.employees.model import Employee
from attendance_tracker.storage.memory_storage import MemorySlotStorage


@pytest.fixture
def fixed_now() -> datetime:
    # Thursday
    return datetime(2024, 3, 14, 9, 30, 45)


@pytest.fixture
def make_record():
    def _make(
        record_id: int,
        employee_id: int,
        work_date: date,
        *,
        status: AttendanceStatus = AttendanceStatus.ABSENT,
        punch_in: Optional[time] = None,
        punch_out: Optional[time] = None,
    ) -> AttendanceRecord:
        return AttendanceRecord(
            record_id=record_id,
            employee_id=employee_id,
            work_date=work_date,
            punch_in=punch_in,
            punch_out=punch_out,
            status=status,
        )

    return _make


@pytest.fixture
def employees() -> list[Employee]:
    return [
        Employee(employee_id=1, name="Alice Nguyen", position="Engineer", department="IT", join_date=date(2023, 1, 2)),
        Employee(employee_id=2, name="Bao Tran", position="Recruiter", department="HR", join_date=date(2023, 5, 1)),
        Employee(employee_id=3, name="Alina Vo", position="Support", department="IT Support", join_date=date(2024, 2, 1)),
    ]


@pytest.fixture
def storage() -> MemorySlotStorage:
    return MemorySlotStorage()


@pytest.fixture
def container(storage):
    return build_container(storage=storage)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from attendance_tracker import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
