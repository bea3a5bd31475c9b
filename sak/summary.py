"""Per-period work time report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Optional

from sak.aggregate import aggregate
from sak.errors import NoDataError
from sak.formatting import format_duration
from sak.periods import CURRENT, PREVIOUS, PeriodWindow, all_time, past_days
from sak.schema import Record

logger = logging.getLogger(__name__)

_PLACEHOLDER = "-"


@dataclass
class WorktimeSummary:
    """Aggregation result for one window. ``error`` is set when it had no data."""

    period: str
    label: str
    start: datetime
    end: datetime
    average: Optional[timedelta] = None
    count: int = 0
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class WorktimeComparison:
    current: WorktimeSummary
    previous: Optional[WorktimeSummary] = None


def summarize(records: list[Record], window: PeriodWindow, log: Optional[logging.Logger] = None) -> WorktimeSummary:
    """Aggregate one window, keeping a missing-data error on the result."""

    log = log or logger
    summary = WorktimeSummary(period=window.key, label=window.label, start=window.start, end=window.end)
    log.debug("%s: %s to %s", window.key, window.start.date().isoformat(), window.end.date().isoformat())
    try:
        summary.average, summary.count = aggregate(records, window.start, window.end, log=log)
    except NoDataError as exc:
        summary.error = exc
    return summary


def build_report(
    records: list[Record],
    now: datetime,
    include_comparison: bool = False,
    past_days_count: Optional[int] = None,
    include_all_time: bool = False,
    log: Optional[logging.Logger] = None,
) -> list[WorktimeComparison]:
    """Summaries for day, week, month, quarter and year, plus optional extras."""

    comparisons = []
    for key, window_for in CURRENT.items():
        comparison = WorktimeComparison(current=summarize(records, window_for(now), log))
        if include_comparison:
            comparison.previous = summarize(records, PREVIOUS[key](now), log)
        comparisons.append(comparison)

    if past_days_count is not None:
        comparisons.append(WorktimeComparison(current=summarize(records, past_days(now, past_days_count), log)))

    if include_all_time and records:
        comparisons.append(WorktimeComparison(current=summarize(records, all_time(records), log)))

    return comparisons


def _cells(summary: Optional[WorktimeSummary], log: logging.Logger, which: str) -> tuple[str, str]:
    if summary is None:
        return "", ""
    if not summary.ok:
        log.error("failed to format %s period duration: %s", which, summary.error)
        return _PLACEHOLDER, _PLACEHOLDER
    return str(summary.count), format_duration(summary.average)


def format_table(
    comparisons: list[WorktimeComparison],
    include_comparison: bool = False,
    log: Optional[logging.Logger] = None,
) -> str:
    """Render the report as a plain text table."""

    log = log or logger
    if include_comparison:
        lines = [f"{'Period':<8} {'Days':>4} {'This Period':<12} {'Days':>4} Last Period"]
    else:
        lines = [f"{'Period':<8} {'Days':>4} Duration"]

    for comparison in comparisons:
        count, duration = _cells(comparison.current, log, "current")
        if include_comparison:
            previous_count, previous_duration = _cells(comparison.previous, log, "previous")
            lines.append(f"{comparison.current.label:<8} {count:>4} {duration:<12} {previous_count:>4} {previous_duration}".rstrip())
        else:
            lines.append(f"{comparison.current.label:<8} {count:>4} {duration}")

    return "\n".join(lines) + "\n"


def _summary_to_dict(summary: WorktimeSummary) -> dict[str, Any]:
    return {
        "period": summary.period,
        "label": summary.label,
        "start": summary.start.isoformat(),
        "end": summary.end.isoformat(),
        "count": summary.count,
        "average_seconds": summary.average.total_seconds() if summary.ok else None,
        "average": format_duration(summary.average).strip() if summary.ok else None,
        "error": str(summary.error) if summary.error else None,
    }


def report_to_dict(comparisons: list[WorktimeComparison], now: datetime) -> dict[str, Any]:
    """JSON-serializable form of the report."""

    periods = []
    for comparison in comparisons:
        entry = _summary_to_dict(comparison.current)
        if comparison.previous is not None:
            entry["previous"] = _summary_to_dict(comparison.previous)
        periods.append(entry)

    return {
        "generated_at": now.isoformat(),
        "periods": periods,
    }
