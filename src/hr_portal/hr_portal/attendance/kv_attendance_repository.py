from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import format_iso_datetime, parse_iso_datetime
from ..core.constants import ATTENDANCE_KEY_PREFIX
from ..core.enums import AttendanceStatus
from ..core.exceptions import StorageError
from ..store.repository import RecordStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


def attendance_key(employee_id: str, work_date: date) -> str:
    return f"{ATTENDANCE_KEY_PREFIX}:{employee_id}:{work_date.isoformat()}"


def _to_payload(rec: AttendanceRecord) -> dict:
    return {
        "employee_id": rec.employee_id,
        "date": rec.work_date.isoformat(),
        "punch_in_time": format_iso_datetime(rec.punch_in_time),
        "punch_out_time": format_iso_datetime(rec.punch_out_time),
        "status": rec.status.value,
        "disconnection_count": int(rec.disconnection_count),
    }


def _from_payload(key: str, r: dict) -> AttendanceRecord:
    try:
        return AttendanceRecord(
            employee_id=str(r["employee_id"]),
            work_date=date.fromisoformat(r["date"]),
            status=AttendanceStatus(r["status"]),
            disconnection_count=int(r.get("disconnection_count") or 0),
            punch_in_time=parse_iso_datetime(r.get("punch_in_time")),
            punch_out_time=parse_iso_datetime(r.get("punch_out_time")),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise StorageError(f"Corrupt attendance record {key!r}") from exc


class KVAttendanceRepository(AttendanceRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        key = attendance_key(employee_id, work_date)
        r = self._store.get(key)
        if r is None:
            return None
        return _from_payload(key, r)

    def mutate(
        self,
        *,
        employee_id: str,
        work_date: date,
        change: Callable[[AttendanceRecord], AttendanceRecord],
    ) -> AttendanceRecord:
        key = attendance_key(employee_id, work_date)

        def _apply(current: Optional[dict]) -> dict:
            rec = _from_payload(key, current) if current is not None else AttendanceRecord.shell(employee_id, work_date)
            return _to_payload(change(rec))

        return _from_payload(key, self._store.update(key, _apply))

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        day = work_date.isoformat()
        out: list[AttendanceRecord] = []
        for key, r in self._store.scan(f"{ATTENDANCE_KEY_PREFIX}:"):
            if r.get("date") != day:
                continue
            out.append(_from_payload(key, r))
        return out

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        out: list[AttendanceRecord] = []
        for key, r in self._store.scan(f"{ATTENDANCE_KEY_PREFIX}:{employee_id}:"):
            rec = _from_payload(key, r)
            if start_date <= rec.work_date <= end_date:
                out.append(rec)
        out.sort(key=lambda rec: rec.work_date)
        return out
