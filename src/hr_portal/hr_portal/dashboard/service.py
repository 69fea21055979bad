from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import load_timezone, local_date, now_utc
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..requests.service import RequestService
from .model import DashboardStats, EmployeeSummary


class DashboardService:
    """Pure projections over the record store; nothing is cached or written."""

    def __init__(self, attendance: AttendanceRepository, requests: RequestService, *, tz: ZoneInfo | None = None):
        self._attendance = attendance
        self._requests = requests
        self._tz = tz or load_timezone(None)

    def compute_stats(self, total_employees: int, *, now: datetime | None = None) -> DashboardStats:
        if int(total_employees) < 0:
            raise ValidationError("Total employees must be >= 0")
        today = local_date(now or now_utc(), self._tz)

        present = sum(1 for r in self._attendance.list_for_date(today) if r.status == AttendanceStatus.PRESENT)
        return DashboardStats(
            total_employees=int(total_employees),
            present_today=present,
            pending_leaves=len(self._requests.list_pending_leaves()),
            pending_regularizations=len(self._requests.list_pending_regularizations()),
        )

    def employee_summary(self, employee_id: str, *, leave_balance: float = 0, now: datetime | None = None) -> EmployeeSummary:
        today = local_date(now or now_utc(), self._tz)
        month_start = today.replace(day=1)

        records = self._attendance.list_for_employee(str(employee_id), start_date=month_start, end_date=today)
        half_days = sum(1 for r in records if r.status == AttendanceStatus.HALF_DAY)
        todays = next((r for r in records if r.work_date == today), None)

        return EmployeeSummary(
            attendance=todays or AttendanceRecord.shell(str(employee_id), today),
            half_days_this_month=half_days,
            leave_balance=leave_balance,
        )
