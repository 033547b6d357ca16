"""Time utilities for the configured notification time zone."""

from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo

from app.config import settings


def get_zone(name: str | None = None) -> tzinfo:
    """Resolve an IANA zone name, defaulting to the configured TIMEZONE."""
    return ZoneInfo(name or settings.TIMEZONE)


def now_local(zone: tzinfo | None = None) -> datetime:
    """Current time as an aware datetime in the notification zone."""
    return datetime.now(zone or get_zone())


def local_date(dt: datetime, zone: tzinfo) -> date:
    """
    Calendar date of ``dt`` at midnight in ``zone``.

    Naive datetimes are assumed to already be local to ``zone``.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=zone)
    return dt.astimezone(zone).date()
