"""CSV adapter for worktime records."""

from __future__ import annotations

import csv
from typing import Iterable, Sequence

from sak.errors import ParseError
from sak.record import parse_record
from sak.schema import Record

_EXPECTED_COLUMNS = 3


def _parse_row(row: Sequence[str], row_number: int) -> Record:
    if len(row) != _EXPECTED_COLUMNS:
        raise ParseError(
            f"invalid CSV format: expected {_EXPECTED_COLUMNS} columns, got {len(row)}",
            row=row_number,
            text=",".join(row),
        )

    try:
        return parse_record(row[0], row[1], row[2])
    except ParseError as exc:
        raise exc.at_row(row_number) from exc


def parse_all(rows: Iterable[Sequence[str]]) -> list[Record]:
    """Parse ``Date,Start,End`` rows (header first) into records.

    Blank rows are ignored. Any bad row fails the whole batch; the error
    carries the 1-based row number, counting the header as row 1.
    """

    non_blank = [row for row in rows if row]
    if len(non_blank) < 2:
        raise ParseError("CSV file must have at least a header and one data row")

    records: list[Record] = []
    for row_number, row in enumerate(non_blank[1:], start=2):
        records.append(_parse_row(row, row_number))
    return records


def parse(file_path: str) -> list[Record]:
    """Parse a worktime CSV file into a list of records."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        try:
            rows = list(csv.reader(handle))
        except csv.Error as exc:
            raise ParseError(f"malformed CSV in {file_path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ParseError(f"{file_path} is not valid UTF-8: {exc}") from exc

    return parse_all(rows)
