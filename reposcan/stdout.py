"""Plain terminal output: warnings, errors, JSON and table views of a report."""

from __future__ import annotations

import os
import sys
from datetime import datetime

from .report import RepoState, ScanReport

REPO_W = 24
BRANCH_W = 30
UNCOMM_W = 3
AHEAD_W = 3
BEHIND_W = 3
REMOTE_STATE_W = UNCOMM_W + AHEAD_W + BEHIND_W + 4


def _colors_enabled() -> bool:
    if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _styler(*codes: int):
    sequence = "\x1b[" + ";".join(str(c) for c in codes) + "m"

    def apply(text: str) -> str:
        if not _colors_enabled():
            return text
        return f"{sequence}{text}\x1b[0m"

    return apply


bold = _styler(1)
dim = _styler(2)
gray = _styler(90)
cyan_bold = _styler(36, 1)
magenta_bold = _styler(35, 1)
blue = _styler(34)
red = _styler(31)
red_bold = _styler(31, 1)
green = _styler(32)
yellow = _styler(33)


def _rfc3339(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    offset = moment.utcoffset()
    if not offset:
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    total = abs(total)
    return f"{text}{sign}{total // 3600:02d}:{total % 3600 // 60:02d}"


def print_warnings(warnings: list[str]) -> None:
    for warning in warnings:
        print_warning(warning)


def print_warning(warning: str) -> None:
    print(f"{yellow('Warning:')} {warning}")


def print_error(msg: str) -> None:
    print(f"{red_bold('Error:')} {msg}")


def render_scan_report_as_json(report: ScanReport) -> None:
    """Print the report to stdout as indented JSON."""
    print(report.to_json())


def render_scan_report_as_table(report: ScanReport) -> None:
    """Print a human-readable summary, table and details of dirty repos."""
    total = len(report.repo_states)
    dirty = report.dirty_repos_count()

    print_warnings(report.warnings)
    _render_header(report, total, dirty)
    if report.repo_states:
        render_repos_table(report)
    if dirty > 0:
        _render_dirty_details(report)


def _render_header(report: ScanReport, total: int, dirty: int) -> None:
    print("\n")
    print(bold("Repo Scan Report"))
    print(f"{dim('Generated at:')} {gray(_rfc3339(report.generated_at))}")
    dirty_text = red(str(dirty)) if dirty > 0 else green(str(dirty))
    print(f"Total repositories: {bold(str(total))}  |  Dirty: {dirty_text}\n")


def _render_dirty_details(report: ScanReport) -> None:
    print(f"\n{cyan_bold('Details:')}")
    for rs in report.repo_states:
        if not rs.uncommitted_files:
            continue
        print(f"\n{magenta_bold('Repo:')} {rs.repo}\n{magenta_bold('Path:')} {rs.path}")
        for name in rs.uncommitted_files:
            print(f"  {gray(f'- {name}')}")


def render_repos_table(report: ScanReport) -> None:
    """Print one row per repository with repo, branch and state columns."""
    print(
        f"{cyan_bold('Repo'.ljust(REPO_W))} "
        f"{cyan_bold('Branch'.ljust(BRANCH_W))} "
        f"{cyan_bold('State'.ljust(REMOTE_STATE_W))}"
    )
    print("─" * (REPO_W + 1 + BRANCH_W + REMOTE_STATE_W + 1))
    for rs in report.repo_states:
        _render_repo_state(rs)


def _render_repo_state(rs: RepoState) -> None:
    repo_cell = truncate_runes(rs.repo, REPO_W).ljust(REPO_W)
    branch_cell = blue(truncate_runes(rs.branch, BRANCH_W).ljust(BRANCH_W))
    print(f"{repo_cell} {branch_cell} {_state_column(rs)}")


def _state_column(rs: RepoState) -> str:
    count = len(rs.uncommitted_files)
    text = f"⏳{count:<{UNCOMM_W}d}"
    return red(text) if count > 0 else gray(text)


def truncate_runes(s: str, n: int) -> str:
    """Truncate s to at most n characters, ending in '...' when there is room."""
    if n <= 0:
        return ""
    if len(s) <= n:
        return s
    if n <= 3:
        return s[:n]
    return s[: n - 3] + "..."