from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object, replaced as a whole rather than edited in place.
    """

    employee_id: int
    name: str
    position: str
    department: str
    join_date: date
