"""Request kinds plugged into the generic approval workflow.

A kind owns its key prefix, its submission rules and its record mapping; the
Pending/Approved/Rejected lifecycle itself lives in ``ApprovalWorkflow``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Generic, TypeVar

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_choice, require_non_empty
from ..core.constants import DEFAULT_REGULARIZATION_WINDOW_DAYS, LEAVE_KEY_PREFIX, REGULARIZATION_KEY_PREFIX
from ..core.enums import IssueType, LeaveType, RequestStatus
from ..core.exceptions import ValidationError
from .model import LeaveRequest, NewLeave, NewRegularization, RegularizationRequest

R = TypeVar("R", LeaveRequest, RegularizationRequest)
P = TypeVar("P", NewLeave, NewRegularization)


def _as_date(value, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        raise ValidationError(f"{field_name} is required")
    return parse_iso_date(str(value))


class RequestKind(ABC, Generic[R, P]):
    name: str

    @abstractmethod
    def validate(self, payload: P, *, today: date) -> P:
        """Return the normalized payload or raise ValidationError."""

        raise NotImplementedError

    @abstractmethod
    def build(self, *, request_id: int, employee_id: str, employee_name: str, payload: P, submitted_at: datetime) -> R:
        raise NotImplementedError

    @abstractmethod
    def to_payload(self, req: R) -> dict:
        raise NotImplementedError

    @abstractmethod
    def from_payload(self, r: dict) -> R:
        raise NotImplementedError

    def with_status(self, req: R, status: RequestStatus) -> R:
        return replace(req, status=status)


class LeaveKind(RequestKind[LeaveRequest, NewLeave]):
    name = LEAVE_KEY_PREFIX

    def validate(self, payload: NewLeave, *, today: date) -> NewLeave:
        leave_type = require_choice(payload.leave_type, LeaveType, "Leave type")
        start_date = _as_date(payload.start_date, "Start date")
        end_date = _as_date(payload.end_date, "End date")
        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")
        reason = require_non_empty(payload.reason, "Reason")
        return NewLeave(leave_type=leave_type, start_date=start_date, end_date=end_date, reason=reason)

    def build(self, *, request_id, employee_id, employee_name, payload: NewLeave, submitted_at) -> LeaveRequest:
        return LeaveRequest(
            request_id=int(request_id),
            employee_id=employee_id,
            employee_name=employee_name,
            leave_type=payload.leave_type,
            start_date=payload.start_date,
            end_date=payload.end_date,
            reason=payload.reason,
            status=RequestStatus.PENDING,
            submitted_at=submitted_at,
        )

    def to_payload(self, req: LeaveRequest) -> dict:
        return {
            "request_id": req.request_id,
            "employee_id": req.employee_id,
            "employee_name": req.employee_name,
            "leave_type": req.leave_type.value,
            "start_date": req.start_date.isoformat(),
            "end_date": req.end_date.isoformat(),
            "reason": req.reason,
            "status": req.status.value,
            "submitted_at": req.submitted_at.isoformat(),
        }

    def from_payload(self, r: dict) -> LeaveRequest:
        return LeaveRequest(
            request_id=int(r["request_id"]),
            employee_id=str(r["employee_id"]),
            employee_name=r["employee_name"],
            leave_type=LeaveType(r["leave_type"]),
            start_date=date.fromisoformat(r["start_date"]),
            end_date=date.fromisoformat(r["end_date"]),
            reason=r["reason"],
            status=RequestStatus(r["status"]),
            submitted_at=datetime.fromisoformat(r["submitted_at"]),
        )


class RegularizationKind(RequestKind[RegularizationRequest, NewRegularization]):
    name = REGULARIZATION_KEY_PREFIX

    def __init__(self, window_days: int = DEFAULT_REGULARIZATION_WINDOW_DAYS):
        self._window_days = int(window_days)

    def validate(self, payload: NewRegularization, *, today: date) -> NewRegularization:
        for_date = _as_date(payload.for_date, "Date")
        if for_date > today:
            raise ValidationError("Cannot regularize future dates")
        if for_date < today - timedelta(days=self._window_days):
            raise ValidationError(f"Cannot regularize dates older than {self._window_days} days")
        issue_type = require_choice(payload.issue_type, IssueType, "Issue type")
        reason = require_non_empty(payload.reason, "Reason")
        return NewRegularization(for_date=for_date, issue_type=issue_type, reason=reason)

    def build(self, *, request_id, employee_id, employee_name, payload: NewRegularization, submitted_at) -> RegularizationRequest:
        return RegularizationRequest(
            request_id=int(request_id),
            employee_id=employee_id,
            employee_name=employee_name,
            for_date=payload.for_date,
            issue_type=payload.issue_type,
            reason=payload.reason,
            status=RequestStatus.PENDING,
            submitted_at=submitted_at,
        )

    def to_payload(self, req: RegularizationRequest) -> dict:
        return {
            "request_id": req.request_id,
            "employee_id": req.employee_id,
            "employee_name": req.employee_name,
            "for_date": req.for_date.isoformat(),
            "issue_type": req.issue_type.value,
            "reason": req.reason,
            "status": req.status.value,
            "submitted_at": req.submitted_at.isoformat(),
        }

    def from_payload(self, r: dict) -> RegularizationRequest:
        return RegularizationRequest(
            request_id=int(r["request_id"]),
            employee_id=str(r["employee_id"]),
            employee_name=r["employee_name"],
            for_date=date.fromisoformat(r["for_date"]),
            issue_type=IssueType(r["issue_type"]),
            reason=r["reason"],
            status=RequestStatus(r["status"]),
            submitted_at=datetime.fromisoformat(r["submitted_at"]),
        )
