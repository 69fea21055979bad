from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from src.hr_portal.hr_portal.attendance.kv_attendance_repository import KVAttendanceRepository
from src.hr_portal.hr_portal.attendance.service import AttendanceService
from src.hr_portal.hr_portal.core.enums import AttendanceStatus, RequestStatus
from src.hr_portal.hr_portal.dashboard.service import DashboardService
from src.hr_portal.hr_portal.requests.kv_request_repository import KVRequestRepository
from src.hr_portal.hr_portal.requests.service import RequestService


def _wire(store):
    attendance_repo = KVAttendanceRepository(store)
    attendance = AttendanceService(attendance_repo)
    requests = RequestService(KVRequestRepository(store))
    return attendance, requests, DashboardService(attendance_repo, requests)


def test_stats_count_only_present_today(store, fixed_now):
    attendance, requests, dashboard = _wire(store)

    attendance.punch("1", now=fixed_now)
    attendance.punch("2", now=fixed_now)
    attendance.punch("3", now=fixed_now)
    for _ in range(3):
        attendance.record_disconnection("3", now=fixed_now)
    attendance.record_disconnection("4", now=fixed_now)
    attendance.punch("5", now=fixed_now - timedelta(days=1))

    stats = dashboard.compute_stats(25, now=fixed_now)

    assert stats.total_employees == 25
    assert stats.present_today == 2


def test_stats_count_pending_requests_of_both_kinds(store, fixed_now):
    _, requests, dashboard = _wire(store)

    approved = requests.submit_leave(
        employee_id="1",
        employee_name="John Employee",
        leave_type="Annual Leave",
        start_date=date(2026, 3, 1),
        end_date=date(2026, 3, 2),
        reason="Trip",
        now=fixed_now,
    )
    requests.submit_leave(
        employee_id="3",
        employee_name="Mike Developer",
        leave_type="Personal Leave",
        start_date=date(2026, 3, 5),
        end_date=date(2026, 3, 5),
        reason="Errand",
        now=fixed_now,
    )
    requests.submit_regularization(
        employee_id="1",
        employee_name="John Employee",
        for_date=fixed_now.date(),
        issue_type="Late Arrival",
        reason="Train delay",
        now=fixed_now,
    )
    requests.resolve_leave(approved, RequestStatus.APPROVED)

    stats = dashboard.compute_stats(3, now=fixed_now)

    assert stats.pending_leaves == 1
    assert stats.pending_regularizations == 1
    assert stats.present_today == 0


def test_stats_are_recomputed_on_every_call(store, fixed_now):
    attendance, _, dashboard = _wire(store)

    assert dashboard.compute_stats(3, now=fixed_now).present_today == 0
    attendance.punch("1", now=fixed_now)
    assert dashboard.compute_stats(3, now=fixed_now).present_today == 1


def test_employee_summary_counts_half_days_in_current_month(store):
    attendance, _, dashboard = _wire(store)
    jan_31 = datetime(2026, 1, 31, 9, 0, tzinfo=timezone.utc)
    feb_01 = datetime(2026, 2, 1, 9, 0, tzinfo=timezone.utc)
    feb_02 = datetime(2026, 2, 2, 9, 0, tzinfo=timezone.utc)

    for moment in (jan_31, feb_01):
        attendance.punch("1", now=moment)
        for _ in range(3):
            attendance.record_disconnection("1", now=moment)
    attendance.punch("1", now=feb_02)

    summary = dashboard.employee_summary("1", leave_balance=15, now=feb_02)

    assert summary.half_days_this_month == 1
    assert summary.leave_balance == 15
    assert summary.attendance.status == AttendanceStatus.PRESENT
    assert summary.attendance.work_date == date(2026, 2, 2)


def test_employee_summary_for_untouched_day(store, fixed_now):
    _, _, dashboard = _wire(store)

    summary = dashboard.employee_summary("9", now=fixed_now)

    assert summary.attendance.status == AttendanceStatus.ABSENT
    assert summary.half_days_this_month == 0
