"""Date and time utility functions"""
from datetime import date, datetime, timedelta
from typing import Optional
import pytz
from dateutil import parser

from customer_app.config import config


def get_timezone(name: Optional[str] = None):
    """Configured local timezone (the app's market runs on UTC+7)"""
    return pytz.timezone(name or config.timezone)


def get_local_now() -> datetime:
    """Get current datetime in the local timezone"""
    return datetime.now(get_timezone())


def localize(value: datetime, tz=None) -> datetime:
    """Attach the local timezone to a naive datetime, convert an aware one"""
    tz = tz or get_timezone()
    if value.tzinfo is None:
        return tz.localize(value)
    return value.astimezone(tz)


def to_iso_offset(value: datetime, tz=None) -> str:
    """Format as ISO-8601 with offset, e.g. 2026-01-27T09:00:00+07:00"""
    return localize(value, tz).isoformat()


def booking_window(
    start: datetime,
    end: Optional[datetime] = None,
    duration_minutes: Optional[int] = None,
    tz=None,
):
    """
    Resolve the start/end strings of a booking.

    A missing end falls back to start + duration, and a missing duration to
    the configured default booking length.
    """
    start_local = localize(start, tz)
    if end is not None:
        end_local = localize(end, tz)
    else:
        minutes = duration_minutes or config.default_booking_minutes
        end_local = start_local + timedelta(minutes=minutes)
    return start_local.isoformat(), end_local.isoformat()


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a backend timestamp string; None when absent or malformed"""
    if not value:
        return None
    try:
        # Postgres trims fractional seconds, e.g. 10:00:00.12+00
        return parser.isoparse(value)
    except (ValueError, OverflowError):
        return None


def local_date(value: Optional[str], tz=None) -> Optional[date]:
    """Calendar date of a backend timestamp in the local timezone"""
    parsed = parse_timestamp(value)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        return parsed.date()
    return parsed.astimezone(tz or get_timezone()).date()
