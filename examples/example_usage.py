"""Example: drive the service layer directly (no Flask, no storage backend).

Controllers are a thin layer; the attendance logic lives in the services.
"""

from datetime import date

from attendance_tracker.container import build_container
from attendance_tracker.core.enums import ReportPeriod
from attendance_tracker.reports.filters import ReportFilter
from attendance_tracker.storage.memory_storage import MemorySlotStorage


def main():
    container = build_container(storage=MemorySlotStorage())
    alice = container.employee_service.add_employee(
        name="Alice", position="Engineer", department="IT", join_date="2024-01-01"
    )
    container.attendance_service.mark_present(alice.employee_id)

    report = container.report_service.build_report(ReportFilter(period=ReportPeriod.DAY, reference_date=date.today()))
    print(report.summary)
    print(container.report_service.export_csv())


if __name__ == "__main__":
    main()
