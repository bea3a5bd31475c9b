"""Exception types raised by sak."""

from __future__ import annotations

from datetime import date
from typing import Optional


class SakError(Exception):
    """Base class for errors reported by the command line."""


class ParseError(SakError, ValueError):
    """A worktime row or file could not be parsed."""

    def __init__(self, message: str, row: Optional[int] = None, text: Optional[str] = None) -> None:
        if row is not None:
            message = f"row {row}: {message}"
        super().__init__(message)
        self.row = row
        self.text = text

    def at_row(self, row: int) -> ParseError:
        """Return a copy of this error tagged with the CSV row number."""

        if self.row is not None:
            return self
        return ParseError(str(self), row=row, text=self.text)


class NoDataError(SakError, LookupError):
    """No record falls inside the requested window."""

    def __init__(self, start: Optional[date] = None, end: Optional[date] = None) -> None:
        if start is None or end is None:
            message = "no work time records"
        else:
            message = f"no work time data found between {start.isoformat()} and {end.isoformat()}"
        super().__init__(message)
        self.start = start
        self.end = end


class EditorError(SakError):
    """The editor could not be started or exited with an error."""
