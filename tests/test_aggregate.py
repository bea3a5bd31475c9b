import logging
from datetime import date, datetime, time, timedelta

import pytest

from sak.aggregate import LEAVE_DAY_DURATION, aggregate, select
from sak.errors import NoDataError
from sak.schema import Record


def make_record(day, duration, normal=True):
    start = datetime.combine(day, time(9))
    end = start + duration
    return Record(date=day, start=start, end=end, duration=end - start, normal=normal)


def sample_records():
    return [
        make_record(date(2025, 7, 14), timedelta(hours=8)),
        make_record(date(2025, 7, 15), timedelta(hours=7, minutes=30)),
        make_record(date(2025, 7, 16), timedelta(hours=8, minutes=30)),
        make_record(date(2025, 7, 17), timedelta(hours=9)),
        make_record(date(2025, 7, 20), timedelta(hours=6)),
    ]


def test_aggregate_all_records_in_range():
    average, count = aggregate(sample_records(), date(2025, 7, 14), date(2025, 7, 20))
    assert count == 5
    assert average == timedelta(hours=7, minutes=48)


def test_aggregate_partial_range():
    average, count = aggregate(sample_records(), date(2025, 7, 15), date(2025, 7, 16))
    assert count == 2
    assert average == timedelta(hours=8)


def test_aggregate_single_day_window():
    average, count = aggregate(sample_records()[:1], date(2025, 7, 14), date(2025, 7, 14))
    assert (average, count) == (timedelta(hours=8), 1)


def test_aggregate_ignores_time_of_day_on_bounds():
    average, count = aggregate(
        sample_records(),
        datetime(2025, 7, 15, 23, 0, 0),
        datetime(2025, 7, 16, 0, 0, 0),
    )
    assert count == 2
    assert average == timedelta(hours=8)


def test_aggregate_substitutes_leave_days():
    records = [
        make_record(date(2025, 7, 14), timedelta(hours=9)),
        make_record(date(2025, 7, 15), timedelta(hours=5), normal=False),
    ]
    average, count = aggregate(records, date(2025, 7, 14), date(2025, 7, 15))
    assert count == 2
    assert average == LEAVE_DAY_DURATION == timedelta(hours=9)


def test_aggregate_truncates_average():
    records = [
        make_record(date(2025, 7, 14), timedelta(hours=10, seconds=1)),
        make_record(date(2025, 7, 15), timedelta(hours=9)),
    ]
    average, _ = aggregate(records, date(2025, 7, 14), date(2025, 7, 15))
    assert average == timedelta(hours=9, minutes=30, microseconds=500000)

    records.append(make_record(date(2025, 7, 16), timedelta(hours=9)))
    average, _ = aggregate(records, date(2025, 7, 14), date(2025, 7, 16))
    assert average == timedelta(hours=9, minutes=20, seconds=0, microseconds=333333)


def test_aggregate_sums_large_spans_exactly():
    span = timedelta(hours=78000018)
    records = [make_record(date(1, 1, day), span) for day in range(1, 32)]
    records += [make_record(date(1, 2, day), span) for day in range(1, 10)]
    average, count = aggregate(records, date(1, 1, 1), date(1, 12, 31))
    assert count == 40
    assert average == span


def test_aggregate_no_records_in_range():
    with pytest.raises(NoDataError) as excinfo:
        aggregate(sample_records(), date(2025, 8, 1), date(2025, 8, 31))
    assert excinfo.value.start == date(2025, 8, 1)
    assert excinfo.value.end == date(2025, 8, 31)
    assert "2025-08-01" in str(excinfo.value)
    assert "2025-08-31" in str(excinfo.value)


def test_aggregate_empty_records():
    with pytest.raises(NoDataError):
        aggregate([], date(2025, 7, 14), date(2025, 7, 20))


def test_aggregate_logs_each_day_on_injected_logger(caplog):
    log = logging.getLogger("tests.aggregate")
    with caplog.at_level(logging.DEBUG, logger="tests.aggregate"):
        aggregate(sample_records(), date(2025, 7, 14), date(2025, 7, 15), log=log)

    assert caplog.messages == [
        " 1 2025-07-14:  8h  0m",
        " 2 2025-07-15:  7h 30m",
    ]
    assert all(record.name == "tests.aggregate" for record in caplog.records)


def test_select_is_inclusive():
    selected = select(sample_records(), date(2025, 7, 14), date(2025, 7, 17))
    assert [record.date.day for record in selected] == [14, 15, 16, 17]
