"""Average work time over a window of days."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Union

import numpy as np

from sak.errors import NoDataError
from sak.formatting import format_duration
from sak.record import MIN_WORK_HOURS
from sak.schema import Record

LEAVE_DAY_DURATION = timedelta(hours=MIN_WORK_HOURS)

_ONE_MICROSECOND = timedelta(microseconds=1)

logger = logging.getLogger(__name__)

Bound = Union[date, datetime]


def as_day(value: Bound) -> date:
    """Drop the time of day from a window bound."""

    if isinstance(value, datetime):
        return value.date()
    return value


def contribution(record: Record) -> timedelta:
    """Duration a record adds to an average: leave days count as 9 hours."""

    return record.duration if record.normal else LEAVE_DAY_DURATION


def select(records: Iterable[Record], window_start: Bound, window_end: Bound) -> list[Record]:
    """Records whose day lies in ``[window_start, window_end]``, both inclusive."""

    first, last = as_day(window_start), as_day(window_end)
    return [record for record in records if first <= record.date <= last]


def aggregate(
    records: Iterable[Record],
    window_start: Bound,
    window_end: Bound,
    log: Optional[logging.Logger] = None,
) -> tuple[timedelta, int]:
    """Return ``(average, count)`` for the records inside the window.

    Every selected record is logged at DEBUG level on ``log``. Raises
    :class:`NoDataError` when the window holds no record.
    """

    log = log or logger
    selected = select(records, window_start, window_end)
    if not selected:
        raise NoDataError(as_day(window_start), as_day(window_end))

    for index, record in enumerate(selected, start=1):
        log.debug("%2d %s: %s", index, record.date.isoformat(), format_duration(record.duration))

    # object dtype keeps Python ints, which cannot wrap around on large spans
    micros = np.fromiter(
        (contribution(record) // _ONE_MICROSECOND for record in selected),
        dtype=object,
        count=len(selected),
    )
    # contributions are never negative, so floor division truncates
    count = len(selected)
    return timedelta(microseconds=int(micros.sum()) // count), count
