from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import AttendanceRecord


@dataclass(frozen=True)
class DashboardStats:
    """Read-model for the reviewer dashboard; recomputed on every read."""

    total_employees: int
    present_today: int
    pending_leaves: int
    pending_regularizations: int


@dataclass(frozen=True)
class EmployeeSummary:
    attendance: AttendanceRecord
    half_days_this_month: int
    leave_balance: float
