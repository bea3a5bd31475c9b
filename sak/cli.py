"""Command line entry point for sak."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from datetime import date, datetime
from typing import Optional, Sequence

from sak import config
from sak.adapters import csv_adapter
from sak.diary import (
    create_or_append_entry,
    diaries_for_this_month,
    diaries_for_this_week,
    diaries_for_today,
    diary_path,
    read_diary,
)
from sak.editor import open_in_editor
from sak.errors import SakError
from sak.log import setup_logging
from sak.summary import build_report, format_table, report_to_dict
from sak.version import format_build_info, get_build_info

logger = logging.getLogger(__name__)


def _reference_day(value: str) -> datetime:
    try:
        return datetime.combine(date.fromisoformat(value), datetime.now().time())
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date format: {value}. Use YYYY-MM-DD")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a number of days >= 1, got {number}")
    return number


def _add_dir_option(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument("--dir", dest="base_dir", default=config.DIARY_DIR, help=help_text)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sak",
        description="My tool set: work time statistics and a plain text diary.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output, e.g. every matched day")
    parser.add_argument("--no-color", action="store_true", help="Disable colored log output")

    commands = parser.add_subparsers(dest="command", metavar="<command>")

    worktime = commands.add_parser(
        "worktime",
        help=f"Analyze work time data from {config.WORKTIME_FILE!r}",
        description="Show average work time for today, this week, month, quarter and year.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sak worktime                      # current periods
  sak worktime -c                   # current periods next to the previous ones
  sak worktime --past-days 30 --all # add a 30 day window and the whole file
""",
    )
    worktime.add_argument(
        "-c", "--include-comparison", action="store_true", help="Include the previous period for comparison"
    )
    worktime.add_argument("--file", default=config.WORKTIME_FILE, help="Worktime CSV file (default: %(default)s)")
    worktime.add_argument("--past-days", type=_positive_int, metavar="N", help="Also report the last N days")
    worktime.add_argument("--all", dest="all_time", action="store_true", help="Also report every record in the file")
    worktime.add_argument("--json", action="store_true", help="Print the report as JSON")
    worktime.add_argument("--now", type=_reference_day, metavar="YYYY-MM-DD", help="Report as if today were this day")
    worktime.set_defaults(handler=run_worktime)

    diary = commands.add_parser("diary", help="Manage diary entries")
    diary_commands = diary.add_subparsers(dest="diary_command", metavar="<action>")

    create = diary_commands.add_parser("create", help="Create today's diary entry")
    create.add_argument("content", nargs="?", default="", help="Text to append with a timestamp")
    _add_dir_option(create, "Directory to store diary files (default: current directory)")
    create.set_defaults(handler=run_diary_create)

    view = diary_commands.add_parser("view", help="View diary entries")
    scope = view.add_mutually_exclusive_group(required=True)
    scope.add_argument("--today", action="store_const", dest="scope", const="today", help="View today's diary")
    scope.add_argument("--this-week", action="store_const", dest="scope", const="week", help="View this week's diaries")
    scope.add_argument(
        "--this-month", action="store_const", dest="scope", const="month", help="View this month's diaries"
    )
    _add_dir_option(view, "Directory to search for diary files (default: current directory)")
    view.set_defaults(handler=run_diary_view)

    edit = diary_commands.add_parser("edit", help="Edit today's diary entry")
    edit.add_argument("--editor", help="Editor to use (default: $EDITOR or vim)")
    _add_dir_option(edit, "Directory to store diary files (default: current directory)")
    edit.set_defaults(handler=run_diary_edit)

    diary.set_defaults(handler=lambda args: _print_help(diary))

    version = commands.add_parser("version", help="Show the sak version information")
    output = version.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Output version information in JSON format")
    output.add_argument("--short", action="store_true", help="Output only the version number")
    version.set_defaults(handler=run_version)

    parser.set_defaults(handler=lambda args: _print_help(parser))
    return parser


def _print_help(parser: argparse.ArgumentParser) -> int:
    parser.print_help()
    return 0


def run_worktime(args: argparse.Namespace) -> int:
    if not os.path.exists(args.file):
        if args.file == config.WORKTIME_FILE and not os.path.isabs(args.file):
            raise FileNotFoundError(f"{args.file!r} not found in current directory")
        raise FileNotFoundError(f"{os.path.abspath(args.file)!r} not found")

    records = csv_adapter.parse(args.file)
    now = args.now or datetime.now()
    logger.info("Today: %s", now.date().isoformat())

    comparisons = build_report(
        records,
        now,
        include_comparison=args.include_comparison,
        past_days_count=args.past_days,
        include_all_time=args.all_time,
    )

    if args.json:
        print(json.dumps(report_to_dict(comparisons, now), indent=2))
    else:
        print(format_table(comparisons, include_comparison=args.include_comparison), end="")
    return 0


def run_diary_create(args: argparse.Namespace) -> int:
    today = date.today()
    path = create_or_append_entry(today, args.content, args.base_dir)
    if args.content:
        print(f"Added entry to diary: {path}")
    else:
        print(f"Created diary file: {path}")
    return 0


def run_diary_view(args: argparse.Namespace) -> int:
    if args.scope == "today":
        files = diaries_for_today(args.base_dir)
        print("Today's diary:")
    elif args.scope == "week":
        files = diaries_for_this_week(args.base_dir)
        print("This week's diaries:")
    else:
        files = diaries_for_this_month(args.base_dir)
        print("This month's diaries:")

    if not files:
        print("No diary files found.")
        return 0

    for path in files:
        print(f"\n--- {path.name} ---")
        print(read_diary(path), end="")
    return 0


def run_diary_edit(args: argparse.Namespace) -> int:
    today = date.today()
    path = diary_path(today, args.base_dir)
    if not path.exists():
        create_or_append_entry(today, "", args.base_dir)
        print(f"Created diary file: {path}")

    open_in_editor(path, args.editor)
    return 0


def run_version(args: argparse.Namespace) -> int:
    info = get_build_info()
    if args.short:
        print(info.version)
    elif args.json:
        print(json.dumps(info.to_dict(), indent=2))
    else:
        print(format_build_info(info), end="")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # --help exits 0, usage errors exit 2
        return e.code
    setup_logging(verbose=args.verbose, colors=False if args.no_color else None)

    try:
        return args.handler(args)
    except FileNotFoundError as e:
        logger.error("File Error: %s", e)
        return 1
    except SakError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("I/O Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
