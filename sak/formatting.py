"""Human readable rendering of durations."""

from __future__ import annotations

from datetime import timedelta

_MICROSECONDS_PER_MINUTE = 60 * 1_000_000


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def format_duration(value: timedelta) -> str:
    """Format a span as ``"%2dh %2dm"``.

    Hours and minutes are each truncated toward zero, so a negative span
    carries the sign on both fields: ``-1h -30m``.
    """

    total_minutes = _trunc_div(value // timedelta(microseconds=1), _MICROSECONDS_PER_MINUTE)
    hours = _trunc_div(total_minutes, 60)
    minutes = total_minutes - hours * 60
    return f"{hours:2d}h {minutes:2d}m"
