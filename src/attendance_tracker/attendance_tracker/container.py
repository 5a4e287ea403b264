from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .attendance.factory import StatusStrategyFactory
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.service import EmployeeService
from .reports.service import ReportService
from .storage.json_file_storage import JsonFileSlotStorage
from .storage.memory_storage import MemorySlotStorage
from .storage.mysql_slot_storage import MySQLSlotStorage
from .storage.repository import SlotStorage
from .storage.store import AttendanceStore


@dataclass(frozen=True)
class Container:
    store: AttendanceStore

    employee_service: EmployeeService
    attendance_service: AttendanceService
    report_service: ReportService


def build_storage(settings) -> SlotStorage:
    backend = str(getattr(settings, "STORAGE_BACKEND", "json")).lower()
    if backend == "memory":
        return MemorySlotStorage()
    if backend == "mysql":
        config = DBConfig.from_mapping(getattr(settings, "DB_CONFIG"))
        return MySQLSlotStorage(DatabaseConnection.get_instance(config))
    if backend == "json":
        return JsonFileSlotStorage(Path(getattr(settings, "STORAGE_DIR", "instance")))
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(*, storage: SlotStorage) -> Container:
    store = AttendanceStore(storage).load()

    return Container(
        store=store,
        employee_service=EmployeeService(store),
        attendance_service=AttendanceService(store, strategy_factory=StatusStrategyFactory()),
        report_service=ReportService(store),
    )
