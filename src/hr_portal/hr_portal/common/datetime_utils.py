from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import DEFAULT_ATTENDANCE_TIMEZONE, ISO_DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), ISO_DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"Invalid date (expected YYYY-MM-DD): {value!r}")


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)


def format_iso_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def now_utc() -> datetime:
    """Current time, timezone-aware.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def load_timezone(name: Optional[str]) -> ZoneInfo:
    raw_name = (name or "").strip() or DEFAULT_ATTENDANCE_TIMEZONE
    try:
        return ZoneInfo(raw_name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown timezone: {raw_name!r}")


def local_date(moment: datetime, tz: ZoneInfo) -> date:
    """Calendar date of ``moment`` in the reference timezone.

    Naive datetimes are taken as already expressed in the reference timezone.
    """
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(tz).date()


def ensure_aware(moment: datetime, tz: ZoneInfo) -> datetime:
    """Attach the reference timezone to naive datetimes; aware ones pass through."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment
