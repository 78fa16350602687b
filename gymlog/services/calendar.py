"""Local-time helpers: every calendar day and week is decided in the viewer's time zone."""

from datetime import date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from gymlog.core.constants import DAY_ORDER

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def resolve_timezone(name: str | None) -> tzinfo:
    """ZoneInfo for an IANA name ("UTC" when empty). Raises ValueError for unknown names."""
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown time zone: {name}") from e


def to_local(moment: datetime, tz: tzinfo) -> datetime:
    """Convert to tz. Naive timestamps (e.g. read back from SQLite) are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz)


def local_date(moment: datetime, tz: tzinfo) -> date:
    return to_local(moment, tz).date()


def week_start(day: date) -> date:
    """Monday of the week containing day (Sunday belongs to the week that began 6 days earlier)."""
    return day - timedelta(days=day.weekday())


def weekday_name(day: date) -> str:
    return DAY_ORDER[day.weekday()]


def short_date(day: date) -> str:
    """Short label such as "Jan 8"."""
    return f"{_MONTHS[day.month - 1]} {day.day}"


def long_date(day: date) -> str:
    """Long label such as "Mon Jan 08 2024"."""
    return f"{weekday_name(day)[:3]} {_MONTHS[day.month - 1]} {day.day:02d} {day.year}"
