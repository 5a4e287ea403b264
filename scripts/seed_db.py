"""Seed demo employees into the configured storage backend.

Each employee gets today's default (absent) record, like any new hire.
"""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "attendance_tracker"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from attendance_tracker.container import build_container, build_storage

DEMO_EMPLOYEES = [
    {"name": "Alice Nguyen", "position": "Engineer", "department": "IT", "join_date": "2023-02-01"},
    {"name": "Bao Tran", "position": "Recruiter", "department": "HR", "join_date": "2023-06-15"},
    {"name": "Chloe Pham", "position": "Accountant", "department": "Finance", "join_date": "2024-01-08"},
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage=build_storage(settings))

    existing = {e.name for e in container.employee_service.list_employees()}
    added = 0
    for item in DEMO_EMPLOYEES:
        if item["name"] in existing:
            continue
        container.employee_service.add_employee(**item)
        added += 1

    print(f"OK: Seeded {added} employee(s) (total={len(container.employee_service.list_employees())})")


if __name__ == "__main__":
    main()
