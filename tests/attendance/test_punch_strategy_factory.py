from datetime import date, datetime, timezone

from src.hr_portal.hr_portal.attendance.factory import PunchStrategyFactory
from src.hr_portal.hr_portal.attendance.model import AttendanceRecord
from src.hr_portal.hr_portal.attendance.strategies.completed_strategy import CompletedDayStrategy
from src.hr_portal.hr_portal.attendance.strategies.punch_in_strategy import PunchInStrategy
from src.hr_portal.hr_portal.attendance.strategies.punch_out_strategy import PunchOutStrategy
from src.hr_portal.hr_portal.core.enums import AttendanceStatus


def test_factory_picks_punch_in_for_untouched_day():
    rec = AttendanceRecord.shell("1", date(2026, 2, 2))

    assert isinstance(PunchStrategyFactory().for_punch(rec), PunchInStrategy)


def test_factory_picks_punch_out_after_punch_in():
    rec = AttendanceRecord(
        employee_id="1",
        work_date=date(2026, 2, 2),
        status=AttendanceStatus.PRESENT,
        punch_in_time=datetime(2026, 2, 2, 9, 0, tzinfo=timezone.utc),
    )

    assert isinstance(PunchStrategyFactory().for_punch(rec), PunchOutStrategy)


def test_factory_picks_completed_when_both_punches_exist():
    rec = AttendanceRecord(
        employee_id="1",
        work_date=date(2026, 2, 2),
        status=AttendanceStatus.HALF_DAY,
        punch_in_time=datetime(2026, 2, 2, 9, 0, tzinfo=timezone.utc),
        punch_out_time=datetime(2026, 2, 2, 18, 0, tzinfo=timezone.utc),
    )

    strategy = PunchStrategyFactory().for_punch(rec)

    assert isinstance(strategy, CompletedDayStrategy)
    assert strategy.apply(rec, now=datetime(2026, 2, 2, 19, 0, tzinfo=timezone.utc)) == rec


def test_punch_in_restarts_the_disconnection_count():
    rec = AttendanceRecord(employee_id="1", work_date=date(2026, 2, 2), disconnection_count=5)
    now = datetime(2026, 2, 2, 9, 0, tzinfo=timezone.utc)

    punched = PunchInStrategy().apply(rec, now=now)

    assert punched.status == AttendanceStatus.PRESENT
    assert punched.disconnection_count == 0
    assert punched.punch_in_time == now
