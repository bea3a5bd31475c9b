"""Demo script for sak worktime statistics."""

import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from sak.adapters.csv_adapter import parse
from sak.summary import build_report, format_table


def main() -> None:
    records = parse(str(Path(__file__).with_name("worktime.csv")))
    now = datetime(2025, 7, 22, 20, 0, 0)
    for record in records:
        kind = "normal" if record.normal else "leave"
        print(record.date, record.start.time(), record.end.time(), record.duration, kind)
    print()
    print(format_table(build_report(records, now, include_comparison=True), include_comparison=True), end="")


if __name__ == "__main__":
    main()
