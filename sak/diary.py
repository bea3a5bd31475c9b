"""Markdown diary files named ``YYYY-MM-DD.md``."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Optional, Union

from sak import config
from sak.periods import month_start, week_start

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_TEMPLATE = """# Diary - {date}

## Morning Thoughts


## Daily Log


## Evening Reflection


---
"""

_FILE_PATTERN = "????-??-??.md"


def _base(base_dir: Optional[PathLike]) -> Path:
    return Path(base_dir) if base_dir else Path(".")


def diary_path(day: date, base_dir: Optional[PathLike] = None) -> Path:
    """Location of the diary file for ``day``."""

    return _base(base_dir) / f"{day.strftime('%Y-%m-%d')}.md"


def create_or_append_entry(
    day: date,
    content: str = "",
    base_dir: Optional[PathLike] = None,
    now: Optional[datetime] = None,
) -> Path:
    """Create the day's file from the template if needed, then append ``content``.

    The entry is prefixed with the current time as ``**HH:MM**``.
    """

    path = diary_path(day, base_dir)
    if not path.exists():
        path.write_text(DEFAULT_TEMPLATE.format(date=day.strftime("%Y-%m-%d")), encoding="utf-8")
        logger.debug("created diary file %s", path)

    if content:
        timestamp = (now or datetime.now()).strftime(config.DIARY_TIMESTAMP_FORMAT)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(f"\n**{timestamp}** - {content}\n")

    return path


def find_diary_files(base_dir: Optional[PathLike] = None) -> list[Path]:
    return sorted(_base(base_dir).glob(_FILE_PATTERN))


def filter_diaries_by_date(base_dir: Optional[PathLike], start: date, end: date) -> list[Path]:
    """Diary files whose date lies in ``[start, end]``."""

    if isinstance(start, datetime):
        start = start.date()
    if isinstance(end, datetime):
        end = end.date()

    filtered = []
    for path in find_diary_files(base_dir):
        try:
            day = date.fromisoformat(path.stem)
        except ValueError:
            logger.debug("skipping %s: name is not a date", path.name)
            continue
        if start <= day <= end:
            filtered.append(path)
    return filtered


def diaries_for_today(base_dir: Optional[PathLike] = None, now: Optional[datetime] = None) -> list[Path]:
    day = (now or datetime.now()).date()
    return filter_diaries_by_date(base_dir, day, day)


def diaries_for_this_week(base_dir: Optional[PathLike] = None, now: Optional[datetime] = None) -> list[Path]:
    """Sunday to Saturday of the current week."""

    start = week_start(now or datetime.now())
    return filter_diaries_by_date(base_dir, start, start + timedelta(days=6))


def diaries_for_this_month(base_dir: Optional[PathLike] = None, now: Optional[datetime] = None) -> list[Path]:
    now = now or datetime.now()
    start = month_start(now.year, now.month)
    if now.month == 12:
        following = month_start(now.year + 1, 1)
    else:
        following = month_start(now.year, now.month + 1)
    return filter_diaries_by_date(base_dir, start, following - timedelta(days=1))


def read_diary(path: PathLike) -> str:
    return Path(path).read_text(encoding="utf-8")
