from __future__ import annotations

from dataclasses import dataclass

from .model import AttendanceRecord
from .strategies.base import PunchStrategy
from .strategies.completed_strategy import CompletedDayStrategy
from .strategies.punch_in_strategy import PunchInStrategy
from .strategies.punch_out_strategy import PunchOutStrategy


@dataclass
class PunchStrategyFactory:
    """Factory Pattern: choose the punch transition from the record's punch state."""

    def for_punch(self, record: AttendanceRecord) -> PunchStrategy:
        if not record.is_punched_in:
            return PunchInStrategy()
        if not record.is_complete:
            return PunchOutStrategy()
        return CompletedDayStrategy()
