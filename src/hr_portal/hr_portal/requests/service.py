from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Generic, Iterator, Optional, Sequence
from zoneinfo import ZoneInfo

from ..common.datetime_utils import ensure_aware, load_timezone, local_date, now_utc
from ..common.validators import require_choice, require_non_empty
from ..core.constants import DEFAULT_REGULARIZATION_WINDOW_DAYS
from ..core.enums import RequestStatus
from ..core.exceptions import InvalidStateError, NotFoundError, ValidationError
from .kinds import LeaveKind, P, R, RegularizationKind, RequestKind
from .model import LeaveRequest, NewLeave, NewRegularization, RegularizationRequest
from .repository import RequestRepository

logger = logging.getLogger(__name__)


class PendingRequests(Generic[R]):
    """Pending requests of one kind, oldest submission first.

    Re-scans the store on every iteration, so the same object can be iterated
    again to get a fresh view.
    """

    def __init__(self, requests: RequestRepository, kind: RequestKind[R, object]):
        self._requests = requests
        self._kind = kind

    def __iter__(self) -> Iterator[R]:
        pending = [r for r in self._requests.list_all(self._kind) if r.status == RequestStatus.PENDING]
        pending.sort(key=lambda r: (r.submitted_at, r.request_id))
        return iter(pending)

    def __len__(self) -> int:
        return sum(1 for _ in self)


class ApprovalWorkflow(Generic[R, P]):
    """Pending -> Approved | Rejected lifecycle shared by every request kind."""

    def __init__(self, requests: RequestRepository, kind: RequestKind[R, P], *, tz: ZoneInfo | None = None):
        self._requests = requests
        self._kind = kind
        self._tz = tz or load_timezone(None)

    @property
    def kind(self) -> RequestKind[R, P]:
        return self._kind

    def submit(self, *, employee_id: str, employee_name: str, payload: P, now: datetime | None = None) -> int:
        now = ensure_aware(now or now_utc(), self._tz)
        employee_id = require_non_empty(employee_id, "Employee id")
        employee_name = require_non_empty(employee_name, "Employee name")
        clean = self._kind.validate(payload, today=local_date(now, self._tz))

        request_id = self._requests.next_id(self._kind)
        req = self._kind.build(
            request_id=request_id,
            employee_id=employee_id,
            employee_name=employee_name,
            payload=clean,
            submitted_at=now,
        )
        self._requests.add(self._kind, req)
        logger.info(
            "request_submitted",
            extra={"kind": self._kind.name, "request_id": request_id, "employee_id": employee_id},
        )
        return request_id

    def resolve(self, request_id: int, decision) -> R:
        decision = require_choice(decision, RequestStatus, "Decision")
        if decision == RequestStatus.PENDING:
            raise ValidationError("Decision must be Approved or Rejected")
        try:
            request_id = int(request_id)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid request id: {request_id!r}")

        def _decide(req: Optional[R]) -> R:
            if req is None:
                raise NotFoundError(f"{self._kind.name} request {request_id} not found")
            if req.status != RequestStatus.PENDING:
                raise InvalidStateError(f"{self._kind.name} request {request_id} is already {req.status.value}")
            return self._kind.with_status(req, decision)

        resolved = self._requests.transition(self._kind, request_id, _decide)
        logger.info(
            "request_resolved",
            extra={"kind": self._kind.name, "request_id": request_id, "status": resolved.status.value},
        )
        return resolved

    def get(self, request_id: int) -> R:
        req = self._requests.get(self._kind, int(request_id))
        if not req:
            raise NotFoundError(f"{self._kind.name} request {request_id} not found")
        return req

    def list_pending(self) -> PendingRequests[R]:
        return PendingRequests(self._requests, self._kind)

    def list_for_employee(self, employee_id: str) -> Sequence[R]:
        items = [r for r in self._requests.list_all(self._kind) if r.employee_id == str(employee_id)]
        items.sort(key=lambda r: (r.submitted_at, r.request_id), reverse=True)
        return items


class RequestService:
    """Use cases: submit, review and list leave / regularization requests."""

    def __init__(
        self,
        requests: RequestRepository,
        *,
        tz: ZoneInfo | None = None,
        regularization_window_days: int = DEFAULT_REGULARIZATION_WINDOW_DAYS,
    ):
        self.leaves: ApprovalWorkflow[LeaveRequest, NewLeave] = ApprovalWorkflow(requests, LeaveKind(), tz=tz)
        self.regularizations: ApprovalWorkflow[RegularizationRequest, NewRegularization] = ApprovalWorkflow(
            requests,
            RegularizationKind(regularization_window_days),
            tz=tz,
        )

    def submit_leave(
        self,
        *,
        employee_id: str,
        employee_name: str,
        leave_type,
        start_date: date | str,
        end_date: date | str,
        reason: str,
        now: datetime | None = None,
    ) -> int:
        return self.leaves.submit(
            employee_id=employee_id,
            employee_name=employee_name,
            payload=NewLeave(leave_type=leave_type, start_date=start_date, end_date=end_date, reason=reason),
            now=now,
        )

    def submit_regularization(
        self,
        *,
        employee_id: str,
        employee_name: str,
        for_date: date | str,
        issue_type,
        reason: str,
        now: datetime | None = None,
    ) -> int:
        return self.regularizations.submit(
            employee_id=employee_id,
            employee_name=employee_name,
            payload=NewRegularization(for_date=for_date, issue_type=issue_type, reason=reason),
            now=now,
        )

    def list_pending_leaves(self) -> PendingRequests[LeaveRequest]:
        return self.leaves.list_pending()

    def list_pending_regularizations(self) -> PendingRequests[RegularizationRequest]:
        return self.regularizations.list_pending()

    def resolve_leave(self, request_id: int, decision) -> None:
        self.leaves.resolve(request_id, decision)

    def resolve_regularization(self, request_id: int, decision) -> None:
        self.regularizations.resolve(request_id, decision)
