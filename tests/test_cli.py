import json
from datetime import date
from pathlib import Path

from sak.cli import main

SAMPLE = Path(__file__).resolve().parents[1] / "examples" / "worktime.csv"


def test_worktime_table(capsys):
    assert main(["--no-color", "worktime", "--file", str(SAMPLE), "--now", "2025-07-22"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "[INFO] Today: 2025-07-22"
    assert out[1] == "Period   Days Duration"
    assert out[2] == "Day         1  9h  0m"
    assert out[3] == "Week        2  9h 30m"


def test_worktime_verbose_lists_days(capsys):
    assert main(["--no-color", "-v", "worktime", "--file", str(SAMPLE), "--now", "2025-07-22"]) == 0
    out = capsys.readouterr().out
    assert "[DEBUG]  1 2025-07-21: 10h  0m" in out


def test_worktime_comparison_json(capsys):
    argv = ["--no-color", "worktime", "--file", str(SAMPLE), "--now", "2025-07-22", "-c", "--json", "--past-days", "7"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    payload = json.loads(out[out.index("{"):])
    assert [p["period"] for p in payload["periods"]] == [
        "today",
        "this-week",
        "this-month",
        "this-quarter",
        "this-year",
        "past-7-days",
    ]
    assert payload["periods"][1]["previous"]["count"] == 5
    assert payload["periods"][5]["count"] == 5


def test_worktime_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--no-color", "worktime"]) == 1
    assert "'worktime.csv' not found in current directory" in capsys.readouterr().out


def test_worktime_missing_explicit_file(tmp_path, capsys):
    missing = tmp_path / "elsewhere" / "hours.csv"
    assert main(["--no-color", "worktime", "--file", str(missing)]) == 1
    out = capsys.readouterr().out
    assert f"[ERROR] File Error: '{missing}' not found" in out
    assert "current directory" not in out


def test_worktime_parse_error(tmp_path, capsys):
    path = tmp_path / "worktime.csv"
    path.write_text("Date,Start,End\n2025-07-16,09:00,18:00:00\n", encoding="utf-8")
    assert main(["--no-color", "worktime", "--file", str(path)]) == 1
    assert "[ERROR] row 2: failed to parse start time '09:00'" in capsys.readouterr().out


def test_worktime_rejects_zero_days(capsys):
    assert main(["worktime", "--past-days", "0"]) == 2
    assert "expected a number of days >= 1" in capsys.readouterr().err


def test_help_returns_zero(capsys):
    assert main(["--help"]) == 0
    assert "usage: sak" in capsys.readouterr().out


def test_diary_create_view_and_edit(tmp_path, monkeypatch, capsys):
    today = date.today().isoformat()

    assert main(["diary", "create", "--dir", str(tmp_path)]) == 0
    assert main(["diary", "create", "First entry", "--dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert f"Created diary file: {tmp_path / (today + '.md')}" in out
    assert "Added entry to diary:" in out

    assert main(["diary", "view", "--today", "--dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Today's diary:\n")
    assert f"--- {today}.md ---" in out
    assert "- First entry" in out

    opened = []
    monkeypatch.setattr("sak.cli.open_in_editor", lambda path, editor: opened.append((path, editor)))
    assert main(["diary", "edit", "--editor", "code", "--dir", str(tmp_path)]) == 0
    assert opened == [(tmp_path / f"{today}.md", "code")]


def test_diary_view_empty(tmp_path, capsys):
    assert main(["diary", "view", "--this-month", "--dir", str(tmp_path)]) == 0
    assert capsys.readouterr().out == "This month's diaries:\nNo diary files found.\n"


def test_diary_view_requires_one_scope(tmp_path):
    assert main(["diary", "view", "--dir", str(tmp_path)]) == 2
    assert main(["diary", "view", "--today", "--this-week", "--dir", str(tmp_path)]) == 2


def test_version_outputs(capsys, monkeypatch):
    monkeypatch.setattr("sak.version.BUILD_METADATA", "")
    assert main(["version", "--short"]) == 0
    assert capsys.readouterr().out == "0.0.1\n"

    assert main(["version", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["version"] == "0.0.1"

    assert main(["version"]) == 0
    assert capsys.readouterr().out.startswith("Version")


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage: sak" in capsys.readouterr().out
