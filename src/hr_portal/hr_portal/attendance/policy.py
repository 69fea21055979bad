from __future__ import annotations

from dataclasses import dataclass, replace

from ..core.constants import DEFAULT_DISCONNECTION_THRESHOLD
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


@dataclass(frozen=True)
class DisconnectionPolicy:
    """Counts network drops and demotes a Present day to Half-day past the threshold.

    The demotion only fires while Present; it never upgrades back.
    """

    threshold: int = DEFAULT_DISCONNECTION_THRESHOLD

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise ValueError("threshold must be >= 0")

    def register(self, record: AttendanceRecord) -> AttendanceRecord:
        count = record.disconnection_count + 1
        status = record.status
        if count > self.threshold and status == AttendanceStatus.PRESENT:
            status = AttendanceStatus.HALF_DAY
        return replace(record, disconnection_count=count, status=status)
