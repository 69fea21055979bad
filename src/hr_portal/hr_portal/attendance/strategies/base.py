from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ..model import AttendanceRecord


class PunchStrategy(ABC):
    """Strategy Pattern: encapsulate what a punch does to today's record."""

    @abstractmethod
    def apply(self, record: AttendanceRecord, *, now: datetime) -> AttendanceRecord:
        raise NotImplementedError
