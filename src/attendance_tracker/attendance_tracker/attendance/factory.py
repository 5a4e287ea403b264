from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import StatusStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class StatusStrategyFactory:
    """Factory Pattern: choose the strategy for a requested status."""

    def for_status(self, status: AttendanceStatus) -> StatusStrategy:
        if status == AttendanceStatus.ABSENT:
            return AbsentStrategy()
        if status == AttendanceStatus.HALF_DAY:
            return HalfDayStrategy()
        if status == AttendanceStatus.PRESENT:
            return PresentStrategy()
        raise ValidationError(f"No manual command for status '{status.value}'")
