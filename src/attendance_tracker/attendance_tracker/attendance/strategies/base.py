from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import time

from ..model import AttendanceRecord


class StatusStrategy(ABC):
    """Strategy Pattern: encapsulate how a status command rewrites a record."""

    @abstractmethod
    def apply(self, record: AttendanceRecord, *, punch_time: time) -> AttendanceRecord:
        raise NotImplementedError
