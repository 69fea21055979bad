from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from ..model import AttendanceRecord
from .base import PunchStrategy


class PunchOutStrategy(PunchStrategy):
    """Second punch: closes the day, status unchanged."""

    def apply(self, record: AttendanceRecord, *, now: datetime) -> AttendanceRecord:
        return replace(record, punch_out_time=now)
