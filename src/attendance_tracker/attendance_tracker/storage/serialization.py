"""JSON documents stored in the ``employees`` and ``attendance`` slots.

Field names follow the stored format (camelCase, dates as YYYY-MM-DD,
punch times as HH:MM or null).
"""
from __future__ import annotations

import json
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_punch_time, parse_iso_date, parse_punch_time
from ..core.enums import AttendanceStatus
from ..core.exceptions import CorruptStateError
from ..employees.model import Employee


def employee_to_dict(employee: Employee) -> dict:
    return {
        "id": employee.employee_id,
        "name": employee.name,
        "position": employee.position,
        "department": employee.department,
        "joinDate": employee.join_date.isoformat(),
    }


def employee_from_dict(data: dict) -> Employee:
    return Employee(
        employee_id=int(data["id"]),
        name=str(data["name"]),
        position=str(data["position"]),
        department=str(data["department"]),
        join_date=parse_iso_date(data["joinDate"]),
    )


def record_to_dict(record: AttendanceRecord) -> dict:
    return {
        "id": record.record_id,
        "employeeId": record.employee_id,
        "date": record.work_date.isoformat(),
        "punchIn": format_punch_time(record.punch_in),
        "punchOut": format_punch_time(record.punch_out),
        "status": record.status.value,
    }


def record_from_dict(data: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(data["id"]),
        employee_id=int(data["employeeId"]),
        work_date=parse_iso_date(data["date"]),
        punch_in=parse_punch_time(data.get("punchIn")),
        punch_out=parse_punch_time(data.get("punchOut")),
        status=AttendanceStatus(data["status"]),
    )


def dump_employees(employees: Iterable[Employee]) -> str:
    return json.dumps([employee_to_dict(e) for e in employees])


def dump_records(records: Iterable[AttendanceRecord]) -> str:
    return json.dumps([record_to_dict(r) for r in records])


def _load_list(slot: str, payload: Optional[str]) -> list:
    if payload is None:
        return []
    try:
        items = json.loads(payload)
    except ValueError as e:
        raise CorruptStateError(f"Slot '{slot}' is not valid JSON: {e}") from e
    if not isinstance(items, list):
        raise CorruptStateError(f"Slot '{slot}' must hold a JSON array")
    return items


def load_employees(payload: Optional[str], *, slot: str = "employees") -> list[Employee]:
    items = _load_list(slot, payload)
    try:
        return [employee_from_dict(item) for item in items]
    except (KeyError, TypeError, ValueError) as e:
        raise CorruptStateError(f"Slot '{slot}' holds a malformed employee: {e}") from e


def load_records(payload: Optional[str], *, slot: str = "attendance") -> list[AttendanceRecord]:
    items = _load_list(slot, payload)
    try:
        return [record_from_dict(item) for item in items]
    except (KeyError, TypeError, ValueError) as e:
        raise CorruptStateError(f"Slot '{slot}' holds a malformed record: {e}") from e
