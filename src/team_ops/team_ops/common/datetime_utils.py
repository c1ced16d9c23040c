from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from ..core.constants import HOURS_PRECISION, WEEK_START_DAY

DateLike = Union[date, datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_day(value: DateLike) -> datetime:
    return datetime.combine(as_date(value), time.min)


def end_of_day(value: DateLike) -> datetime:
    return datetime.combine(as_date(value), time.max)


def start_of_week(value: DateLike) -> datetime:
    """First instant of the Sunday-based week containing ``value``."""
    d = as_date(value)
    offset = (d.weekday() - WEEK_START_DAY) % 7
    return start_of_day(d - timedelta(days=offset))


def end_of_week(value: DateLike) -> datetime:
    """Last instant of the Sunday-based week containing ``value``."""
    return end_of_day(start_of_week(value) + timedelta(days=6))


def start_of_month(value: DateLike) -> datetime:
    d = as_date(value)
    return start_of_day(d.replace(day=1))


def end_of_month(value: DateLike) -> datetime:
    d = as_date(value)
    last_day = calendar.monthrange(d.year, d.month)[1]
    return end_of_day(d.replace(day=last_day))


def is_today(value: DateLike, *, now: Optional[datetime] = None) -> bool:
    now = now or now_local()
    return as_date(value) == now.date()


def is_this_week(value: DateLike, *, now: Optional[datetime] = None) -> bool:
    now = now or now_local()
    return start_of_week(now) <= as_datetime(value) <= end_of_week(now)


def in_window(value: DateLike, start: DateLike, end: DateLike) -> bool:
    """Inclusive window check, mixing dates and datetimes freely."""
    return as_datetime(start) <= as_datetime(value) <= as_datetime(end)


def minutes_of_day(value: datetime) -> int:
    return value.hour * 60 + value.minute


def hours_between(start: datetime, end: datetime) -> float:
    return round((end - start).total_seconds() / 3600, HOURS_PRECISION)
