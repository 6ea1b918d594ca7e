"""Timezone-aware date/time helpers for the inventory service."""

from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

from flask import current_app


def get_timezone() -> ZoneInfo:
    """Get the configured timezone."""
    tz_name = current_app.config.get('TIMEZONE', 'UTC')
    return ZoneInfo(tz_name)


def get_today() -> date:
    """Get today's date in the configured timezone."""
    return datetime.now(get_timezone()).date()


def utc_timestamp() -> str:
    """Current UTC time as stored in deleted_at/updated_at columns."""
    return datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S')


def parse_iso_instant(value: str) -> datetime:
    """
    Parse a 'YYYY-MM-DDTHH:mm:ss.sssZ' string into an aware UTC datetime.

    Raises:
        ValueError: if the string is not a real instant
    """
    return datetime.strptime(value, '%Y-%m-%dT%H:%M:%S.%fZ').replace(tzinfo=timezone.utc)


def to_calendar_day(value: str) -> date:
    """
    Normalize an ISO instant to the calendar day it falls on locally.

    The time-of-day is dropped, which is the same as setting hours,
    minutes, seconds and milliseconds to zero in the configured timezone.
    """
    return parse_iso_instant(value).astimezone(get_timezone()).date()


def midnight_iso(day: date | str) -> str:
    """
    Serialize a calendar day as the UTC instant of its local midnight.

    Args:
        day: date or 'YYYY-MM-DD' string

    Returns:
        'YYYY-MM-DDTHH:MM:SS.000Z'
    """
    if isinstance(day, str):
        day = date.fromisoformat(day)
    local_midnight = datetime.combine(day, time.min, tzinfo=get_timezone())
    return local_midnight.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.000Z')
