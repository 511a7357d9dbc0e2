import json
from datetime import datetime, timezone

from reposcan import stdout
from reposcan.report import RepoState, ScanReport


def sample_report():
    return ScanReport(
        version=1,
        generated_at=datetime(2025, 8, 31, 22, 0, 0, tzinfo=timezone.utc),
        repo_states=[
            RepoState(repo="clean", branch="main", path="/tmp/clean"),
            RepoState(repo="dirty", branch="dev", path="/tmp/dirty", uncommitted_files=["a.txt"]),
        ],
        warnings=["test warning"],
    )


def test_render_scan_report_as_json_outputs_valid_json(capsys):
    stdout.render_scan_report_as_json(sample_report())
    out = capsys.readouterr().out
    data = json.loads(out)
    assert data["version"] == 1
    assert len(data["repoStates"]) == 2


def test_render_scan_report_as_table_prints_header_and_details(capsys):
    stdout.render_scan_report_as_table(sample_report())
    out = capsys.readouterr().out
    assert "Repo Scan Report" in out
    assert "Details:" in out
    assert "dirty" in out and "/tmp/dirty" in out
    assert "test warning" in out
    assert "- a.txt" in out


def test_table_without_dirty_repos_has_no_details(capsys):
    report = ScanReport(
        version=1,
        generated_at=datetime(2025, 8, 31, 22, 0, 0, tzinfo=timezone.utc),
        repo_states=[RepoState(repo="clean", branch="main", path="/tmp/clean")],
    )
    stdout.render_scan_report_as_table(report)
    out = capsys.readouterr().out
    assert "Details:" not in out
    assert "2025-08-31T22:00:00Z" in out


def test_repos_table_truncates_long_names(capsys):
    report = ScanReport(repo_states=[RepoState(repo="r" * 40, branch="main")])
    stdout.render_repos_table(report)
    out = capsys.readouterr().out
    assert "r" * 21 + "..." in out
    assert "r" * 22 not in out
    assert "⏳0" in out


def test_warning_and_error_prefixes(capsys):
    stdout.print_warning("careful")
    stdout.print_error("broken")
    stdout.print_warnings(["one", "two"])
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Warning: careful", "Error: broken", "Warning: one", "Warning: two"]


def test_truncate_runes():
    assert stdout.truncate_runes("hello", 0) == ""
    assert stdout.truncate_runes("hello", 10) == "hello"
    assert stdout.truncate_runes("hello", 3) == "hel"
    assert stdout.truncate_runes("abcdefgh", 6) == "abc..."
    assert stdout.truncate_runes("ééééééé", 5) == "éé..."