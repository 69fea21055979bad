from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar date."""

    employee_id: str
    work_date: date
    status: AttendanceStatus = AttendanceStatus.ABSENT
    disconnection_count: int = 0
    punch_in_time: Optional[datetime] = None
    punch_out_time: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.punch_out_time is not None and self.punch_in_time is None:
            raise ValueError("punch_out_time requires punch_in_time")
        if self.disconnection_count < 0:
            raise ValueError("disconnection_count must be >= 0")

    @classmethod
    def shell(cls, employee_id: str, work_date: date) -> "AttendanceRecord":
        """Untouched day: Absent, no punches, no disconnections."""
        return cls(employee_id=employee_id, work_date=work_date)

    @property
    def is_punched_in(self) -> bool:
        return self.punch_in_time is not None

    @property
    def is_complete(self) -> bool:
        return self.punch_in_time is not None and self.punch_out_time is not None
