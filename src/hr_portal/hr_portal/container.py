from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from .attendance.factory import PunchStrategyFactory
from .attendance.kv_attendance_repository import KVAttendanceRepository
from .attendance.policy import DisconnectionPolicy
from .attendance.service import AttendanceService
from .common.datetime_utils import load_timezone
from .core.constants import (
    DEFAULT_ATTENDANCE_TIMEZONE,
    DEFAULT_DISCONNECTION_THRESHOLD,
    DEFAULT_REGULARIZATION_WINDOW_DAYS,
)
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .requests.kv_request_repository import KVRequestRepository
from .requests.service import RequestService
from .store.memory_store import InMemoryRecordStore
from .store.mysql_store import MySQLRecordStore
from .store.repository import RecordStore
from .users.static_roster import StaticRoster


@dataclass(frozen=True)
class Container:
    store: RecordStore

    attendance_repo: KVAttendanceRepository
    requests_repo: KVRequestRepository
    roster: StaticRoster

    attendance_service: AttendanceService
    request_service: RequestService
    dashboard_service: DashboardService


def build_store(*, backend: str, db_config: Optional[dict] = None) -> RecordStore:
    backend = (backend or "memory").strip().lower()
    if backend == "memory":
        return InMemoryRecordStore()
    if backend == "mysql":
        if not db_config:
            raise ValueError("STORE_BACKEND=mysql requires DB_CONFIG")
        return MySQLRecordStore(DatabaseConnection.get_instance(DBConfig.from_settings(db_config)))
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")


def build_container(
    *,
    store: RecordStore,
    employees: Iterable[Mapping] = (),
    timezone: str = DEFAULT_ATTENDANCE_TIMEZONE,
    disconnection_threshold: int = DEFAULT_DISCONNECTION_THRESHOLD,
    regularization_window_days: int = DEFAULT_REGULARIZATION_WINDOW_DAYS,
) -> Container:
    tz = load_timezone(timezone)

    attendance_repo = KVAttendanceRepository(store)
    requests_repo = KVRequestRepository(store)
    roster = StaticRoster.from_settings(employees)

    attendance_service = AttendanceService(
        attendance_repo,
        strategy_factory=PunchStrategyFactory(),
        policy=DisconnectionPolicy(threshold=int(disconnection_threshold)),
        tz=tz,
    )
    request_service = RequestService(
        requests_repo,
        tz=tz,
        regularization_window_days=int(regularization_window_days),
    )
    dashboard_service = DashboardService(attendance_repo, request_service, tz=tz)

    return Container(
        store=store,
        attendance_repo=attendance_repo,
        requests_repo=requests_repo,
        roster=roster,
        attendance_service=attendance_service,
        request_service=request_service,
        dashboard_service=dashboard_service,
    )
