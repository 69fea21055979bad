from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def mutate(
        self,
        *,
        employee_id: str,
        work_date: date,
        change: Callable[[AttendanceRecord], AttendanceRecord],
    ) -> AttendanceRecord:
        """Atomically apply ``change`` to the stored record (or a fresh shell) and persist it."""

        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
