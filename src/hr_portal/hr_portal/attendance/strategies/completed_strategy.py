from __future__ import annotations

from datetime import datetime

from ..model import AttendanceRecord
from .base import PunchStrategy


class CompletedDayStrategy(PunchStrategy):
    """Both punches already recorded; a redundant punch leaves the record as is."""

    def apply(self, record: AttendanceRecord, *, now: datetime) -> AttendanceRecord:
        return record
