"""Core data schema for work-time records."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta


@dataclass(frozen=True)
class Record:
    """One parsed worktime row. ``normal`` is False on leave days."""

    date: date
    start: datetime
    end: datetime
    duration: timedelta
    normal: bool

    @property
    def leave(self) -> bool:
        return not self.normal
