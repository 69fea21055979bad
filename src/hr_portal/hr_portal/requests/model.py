from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import IssueType, LeaveType, RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: str
    employee_name: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: RequestStatus
    submitted_at: datetime

    @property
    def days(self) -> int:
        """Number of calendar days covered, both ends included."""
        return (self.end_date - self.start_date).days + 1


@dataclass(frozen=True)
class RegularizationRequest:
    request_id: int
    employee_id: str
    employee_name: str
    for_date: date
    issue_type: IssueType
    reason: str
    status: RequestStatus
    submitted_at: datetime


@dataclass(frozen=True)
class NewLeave:
    """Leave payload as submitted, before validation."""

    leave_type: object
    start_date: object
    end_date: object
    reason: str


@dataclass(frozen=True)
class NewRegularization:
    for_date: object
    issue_type: object
    reason: str
