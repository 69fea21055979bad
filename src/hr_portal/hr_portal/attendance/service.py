from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import ensure_aware, load_timezone, local_date, now_utc
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .factory import PunchStrategyFactory
from .model import AttendanceRecord
from .policy import DisconnectionPolicy
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: punches and connectivity drops on today's attendance record."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        strategy_factory: PunchStrategyFactory | None = None,
        policy: DisconnectionPolicy | None = None,
        tz: ZoneInfo | None = None,
    ):
        self._attendance = attendance
        self._factory = strategy_factory or PunchStrategyFactory()
        self._policy = policy or DisconnectionPolicy()
        self._tz = tz or load_timezone(None)

    @staticmethod
    def _employee_id(employee_id) -> str:
        value = require_non_empty(employee_id, "Employee id")
        if ":" in value:
            raise ValidationError("Employee id must not contain ':'")
        return value

    def today(self, now: datetime | None = None) -> date:
        return local_date(now or now_utc(), self._tz)

    def punch(self, employee_id: str, *, now: datetime | None = None) -> AttendanceRecord:
        employee_id = self._employee_id(employee_id)
        now = ensure_aware(now or now_utc(), self._tz)
        today = local_date(now, self._tz)
        applied: list[str] = []

        def _change(rec: AttendanceRecord) -> AttendanceRecord:
            strategy = self._factory.for_punch(rec)
            applied.append(type(strategy).__name__)
            return strategy.apply(rec, now=now)

        rec = self._attendance.mutate(employee_id=employee_id, work_date=today, change=_change)
        logger.info(
            "attendance_punch",
            extra={
                "employee_id": employee_id,
                "work_date": today.isoformat(),
                "transition": applied[-1] if applied else None,
                "status": rec.status.value,
            },
        )
        return rec

    def record_disconnection(self, employee_id: str, *, now: datetime | None = None) -> AttendanceRecord:
        employee_id = self._employee_id(employee_id)
        today = self.today(now)
        previous: list[AttendanceStatus] = []

        def _change(rec: AttendanceRecord) -> AttendanceRecord:
            previous.append(rec.status)
            return self._policy.register(rec)

        rec = self._attendance.mutate(employee_id=employee_id, work_date=today, change=_change)
        extra = {
            "employee_id": employee_id,
            "work_date": today.isoformat(),
            "disconnection_count": rec.disconnection_count,
            "status": rec.status.value,
        }
        if previous and previous[-1] != rec.status:
            logger.warning("attendance_downgraded_half_day", extra=extra)
        else:
            logger.info("attendance_disconnection", extra=extra)
        return rec

    def get_today(self, employee_id: str, *, now: datetime | None = None) -> AttendanceRecord:
        employee_id = self._employee_id(employee_id)
        today = self.today(now)
        rec: Optional[AttendanceRecord] = self._attendance.get_for_employee_and_date(employee_id, today)
        return rec or AttendanceRecord.shell(employee_id, today)
