"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the attendance and approval rules live in the
services built by the container.
"""

import importlib

from config import get_settings_module

from src.hr_portal.hr_portal.container import build_container, build_store
from src.hr_portal.hr_portal.core.enums import RequestStatus


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        store=build_store(backend=settings.STORE_BACKEND, db_config=settings.DB_CONFIG),
        employees=settings.EMPLOYEES,
        timezone=settings.ATTENDANCE_TIMEZONE,
    )

    print(container.attendance_service.punch("1"))
    for _ in range(3):
        print(container.attendance_service.record_disconnection("1"))

    today = container.attendance_service.today()
    rid = container.request_service.submit_regularization(
        employee_id="1",
        employee_name="John Employee",
        for_date=today,
        issue_type="System Error",
        reason="Office WiFi kept dropping",
    )
    print(list(container.request_service.list_pending_regularizations()))

    container.request_service.resolve_regularization(rid, RequestStatus.APPROVED)
    print(container.dashboard_service.compute_stats(container.roster.count()))


if __name__ == "__main__":
    main()
