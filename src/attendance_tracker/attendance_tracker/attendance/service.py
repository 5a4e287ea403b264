from __future__ import annotations

import logging
from datetime import date, datetime

from ..common.datetime_utils import now_local, punch_time_of
from ..core.enums import AttendanceStatus
from ..storage.store import AttendanceStore
from .factory import StatusStrategyFactory
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: manual status commands against today's records."""

    def __init__(
        self,
        store: AttendanceStore,
        *,
        strategy_factory: StatusStrategyFactory | None = None,
    ):
        self._store = store
        self._factory = strategy_factory or StatusStrategyFactory()

    def mark_absent(self, employee_id: int, *, now: datetime | None = None) -> int:
        return self._apply(employee_id, AttendanceStatus.ABSENT, now=now)

    def mark_half_day(self, employee_id: int, *, now: datetime | None = None) -> int:
        return self._apply(employee_id, AttendanceStatus.HALF_DAY, now=now)

    def mark_present(self, employee_id: int, *, now: datetime | None = None) -> int:
        return self._apply(employee_id, AttendanceStatus.PRESENT, now=now)

    def _apply(self, employee_id: int, status: AttendanceStatus, *, now: datetime | None) -> int:
        """Rewrite every record of ``employee_id`` dated today.

        Returns how many records matched. The whole collection is replaced
        and flushed even when nothing matched.
        """
        now = now or now_local()
        today = now.date()
        punch_time = punch_time_of(now)
        strategy = self._factory.for_status(status)

        updated: list[AttendanceRecord] = []
        matched = 0
        for record in self._store.records:
            if record.employee_id == employee_id and record.work_date == today:
                updated.append(strategy.apply(record, punch_time=punch_time))
                matched += 1
            else:
                updated.append(record)

        self._store.replace_records(updated)
        self._store.flush()

        if matched:
            logger.info("Marked employee %s %s on %s (%d record(s))", employee_id, status.value, today, matched)
        else:
            logger.info("No record for employee %s on %s; %s ignored", employee_id, today, status.value)
        return matched

    def todays_records(self, *, today: date | None = None) -> list[AttendanceRecord]:
        today = today or now_local().date()
        return [r for r in self._store.records if r.work_date == today]

    def records_for(self, employee_id: int) -> list[AttendanceRecord]:
        return [r for r in self._store.records if r.employee_id == employee_id]
