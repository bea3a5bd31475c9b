"""Parsing of single worktime rows and the leave-day rule."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta

from sak.errors import ParseError
from sak.schema import Record

AFTERNOON_START_HOUR = 12
EARLY_END_HOUR = 17
MIN_WORK_HOURS = 9

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_COMPONENT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_COMPONENT_NAMES = ("hour", "minute", "second")


def parse_date(date_str: str) -> date:
    """Parse ``"2025-07-16"`` or ``"2025-07-16 Wednesday"`` into a date.

    Only the first whitespace-delimited token is read; the weekday name that
    usually follows it is not checked.
    """

    parts = date_str.split()
    if not parts:
        raise ParseError(f"invalid date format: '{date_str}'", text=date_str)

    token = parts[0]
    if not _DATE_PATTERN.fullmatch(token):
        raise ParseError(f"failed to parse date '{token}': expected YYYY-MM-DD", text=token)
    try:
        return date.fromisoformat(token)
    except ValueError as exc:
        raise ParseError(f"failed to parse date '{token}': {exc}", text=token) from exc


def parse_time_on_date(day: date, time_str: str) -> datetime:
    """Return midnight of ``day`` plus the ``HH:MM:SS`` offset in ``time_str``.

    Components are not range checked: ``25:30:00`` lands on the next day at
    01:30 and ``09:70:00`` is 10:10.
    """

    parts = time_str.strip().split(":")
    if len(parts) != 3:
        raise ParseError(f"invalid time format: '{time_str}'", text=time_str)

    values = []
    for name, part in zip(_COMPONENT_NAMES, parts):
        if not _COMPONENT_PATTERN.fullmatch(part):
            raise ParseError(f"invalid {name}: '{part}'", text=part)
        values.append(int(part))

    hours, minutes, seconds = values
    midnight = datetime.combine(day, time.min)
    try:
        return midnight + timedelta(hours=hours, minutes=minutes, seconds=seconds)
    except OverflowError as exc:
        raise ParseError(f"time out of range: '{time_str}'", text=time_str) from exc


def has_leave(start: datetime, end: datetime) -> bool:
    """Return True when the start/end pair does not look like a full workday.

    Leave cases:
    - start after 12:00 of its day
    - end before 17:00 of its day
    - less than 9 hours between start and end
    """

    afternoon_start = datetime.combine(start.date(), time(AFTERNOON_START_HOUR))
    early_end = datetime.combine(end.date(), time(EARLY_END_HOUR))

    return start > afternoon_start or end < early_end or end - start < timedelta(hours=MIN_WORK_HOURS)


def parse_record(date_str: str, start_str: str, end_str: str) -> Record:
    """Parse one ``Date,Start,End`` triple into a :class:`Record`."""

    day = parse_date(date_str)

    try:
        start = parse_time_on_date(day, start_str)
    except ParseError as exc:
        raise ParseError(f"failed to parse start time '{start_str}': {exc}", text=start_str) from exc

    try:
        end = parse_time_on_date(day, end_str)
    except ParseError as exc:
        raise ParseError(f"failed to parse end time '{end_str}': {exc}", text=end_str) from exc

    if end < start:
        # overnight shift, end belongs to the next day
        end += timedelta(hours=24)
    if end < start:
        raise ParseError(
            f"end time '{end_str}' is more than a day before start time '{start_str}'",
            text=end_str,
        )

    return Record(
        date=day,
        start=start,
        end=end,
        duration=end - start,
        normal=not has_leave(start, end),
    )
