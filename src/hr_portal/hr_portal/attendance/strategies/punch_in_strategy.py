from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import PunchStrategy


class PunchInStrategy(PunchStrategy):
    """First punch of the day: employee becomes Present.

    Drops seen before the punch do not carry over; the count restarts at zero.
    """

    def apply(self, record: AttendanceRecord, *, now: datetime) -> AttendanceRecord:
        return replace(record, punch_in_time=now, status=AttendanceStatus.PRESENT, disconnection_count=0)
