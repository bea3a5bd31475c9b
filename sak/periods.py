"""Period windows derived from a reference instant.

Every window runs from 00:00:00 of its first day to 23:59:59 of its last day.
Weeks start on Sunday. Nothing here reads the clock; callers pass ``now``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterable

from sak.errors import NoDataError
from sak.schema import Record

_END_OF_DAY = time(23, 59, 59)

_QUARTER_MONTHS = {
    1: (1, 3),
    2: (4, 6),
    3: (7, 9),
    4: (10, 12),
}

# (year offset, quarter) of the quarter before each quarter
_PREVIOUS_QUARTER = {
    1: (-1, 4),
    2: (0, 1),
    3: (0, 2),
    4: (0, 3),
}


@dataclass(frozen=True)
class PeriodWindow:
    """A closed window of whole days."""

    key: str
    label: str
    start: datetime
    end: datetime

    @property
    def days(self) -> tuple[date, date]:
        return self.start.date(), self.end.date()


def day_start(value: date) -> datetime:
    if isinstance(value, datetime):
        value = value.date()
    return datetime.combine(value, time.min)


def day_end(value: date) -> datetime:
    if isinstance(value, datetime):
        value = value.date()
    return datetime.combine(value, _END_OF_DAY)


def week_start(now: datetime) -> datetime:
    """Midnight of the most recent Sunday on or before ``now``."""

    days_since_sunday = (now.weekday() + 1) % 7
    return day_start(now - timedelta(days=days_since_sunday))


def month_start(year: int, month: int) -> datetime:
    return datetime(year, month, 1)


def quarter_of(month: int) -> int:
    return (month - 1) // 3 + 1


def quarter_range(year: int, quarter: int) -> tuple[datetime, datetime]:
    """First instant and last second of a quarter."""

    if quarter not in _QUARTER_MONTHS:
        raise ValueError(f"quarter must be 1-4, got {quarter}")

    first_month, last_month = _QUARTER_MONTHS[quarter]
    start = month_start(year, first_month)
    if last_month == 12:
        end = month_start(year + 1, 1) - timedelta(seconds=1)
    else:
        end = month_start(year, last_month + 1) - timedelta(seconds=1)
    return start, end


def previous_quarter(year: int, quarter: int) -> tuple[int, int]:
    if quarter not in _PREVIOUS_QUARTER:
        raise ValueError(f"quarter must be 1-4, got {quarter}")
    offset, previous = _PREVIOUS_QUARTER[quarter]
    return year + offset, previous


def today(now: datetime) -> PeriodWindow:
    return PeriodWindow("today", "Day", day_start(now), day_end(now))


def yesterday(now: datetime) -> PeriodWindow:
    previous = now - timedelta(days=1)
    return PeriodWindow("yesterday", "Day", day_start(previous), day_end(previous))


def this_week(now: datetime) -> PeriodWindow:
    return PeriodWindow("this-week", "Week", week_start(now), day_end(now))


def last_week(now: datetime) -> PeriodWindow:
    start_of_this_week = week_start(now)
    start = start_of_this_week - timedelta(days=7)
    return PeriodWindow("last-week", "Week", start, start_of_this_week - timedelta(seconds=1))


def this_month(now: datetime) -> PeriodWindow:
    return PeriodWindow("this-month", "Month", month_start(now.year, now.month), day_end(now))


def last_month(now: datetime) -> PeriodWindow:
    start_of_this_month = month_start(now.year, now.month)
    if now.month == 1:
        start = month_start(now.year - 1, 12)
    else:
        start = month_start(now.year, now.month - 1)
    return PeriodWindow("last-month", "Month", start, start_of_this_month - timedelta(seconds=1))


def this_quarter(now: datetime) -> PeriodWindow:
    start, end = quarter_range(now.year, quarter_of(now.month))
    return PeriodWindow("this-quarter", "Quarter", start, day_end(min(end, now)))


def last_quarter(now: datetime) -> PeriodWindow:
    year, quarter = previous_quarter(now.year, quarter_of(now.month))
    start, end = quarter_range(year, quarter)
    return PeriodWindow("last-quarter", "Quarter", start, end)


def this_year(now: datetime) -> PeriodWindow:
    return PeriodWindow("this-year", "Year", datetime(now.year, 1, 1), day_end(now))


def last_year(now: datetime) -> PeriodWindow:
    return PeriodWindow(
        "last-year",
        "Year",
        datetime(now.year - 1, 1, 1),
        datetime.combine(date(now.year - 1, 12, 31), _END_OF_DAY),
    )


def past_days(now: datetime, days: int) -> PeriodWindow:
    """The ``days`` most recent days, today included."""

    if days < 1:
        raise ValueError(f"number of days must be at least 1, got {days}")
    start = day_start(now - timedelta(days=days - 1))
    return PeriodWindow(f"past-{days}-days", f"Past {days}d", start, day_end(now))


def all_time(records: Iterable[Record]) -> PeriodWindow:
    """Window spanning the earliest to the latest record."""

    days = [record.date for record in records]
    if not days:
        raise NoDataError()
    return PeriodWindow("all-time", "All", day_start(min(days)), day_end(max(days)))


CURRENT = {
    "today": today,
    "this-week": this_week,
    "this-month": this_month,
    "this-quarter": this_quarter,
    "this-year": this_year,
}

PREVIOUS = {
    "today": yesterday,
    "this-week": last_week,
    "this-month": last_month,
    "this-quarter": last_quarter,
    "this-year": last_year,
}
