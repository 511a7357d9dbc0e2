import os
import subprocess
from unittest import mock

from reposcan.config import Config, OnlyFilter
from reposcan.generator import filter_repo_state, generate_scan_report
from reposcan.report import RemoteStatus, RepoState


def make_repo_state(uncommitted, unpushed, unpulled):
    rs = RepoState()
    if uncommitted:
        rs.uncommitted_files = ["file.txt"]
    status = RemoteStatus(remote="something", ahead=-1, behind=-1)
    if unpushed:
        status.ahead = 1
    if unpulled:
        status.behind = 1
    rs.remote_status.append(status)
    return rs


CLEAN = make_repo_state(False, False, False)
DIRTY1 = make_repo_state(True, False, False)
DIRTY2 = make_repo_state(False, True, False)
DIRTY3 = make_repo_state(False, False, True)


def test_only_all_allows_any_repo():
    assert filter_repo_state(OnlyFilter.ALL, CLEAN) is True
    assert filter_repo_state(OnlyFilter.ALL, DIRTY1) is True


def test_only_uncommitted():
    assert filter_repo_state(OnlyFilter.UNCOMMITTED, CLEAN) is False
    assert filter_repo_state(OnlyFilter.UNCOMMITTED, DIRTY1) is True
    assert filter_repo_state(OnlyFilter.UNCOMMITTED, DIRTY2) is False
    assert filter_repo_state(OnlyFilter.UNCOMMITTED, DIRTY3) is False


def test_only_unpushed():
    assert filter_repo_state(OnlyFilter.UNPUSHED, CLEAN) is False
    assert filter_repo_state(OnlyFilter.UNPUSHED, DIRTY1) is False
    assert filter_repo_state(OnlyFilter.UNPUSHED, DIRTY2) is True
    assert filter_repo_state(OnlyFilter.UNPUSHED, DIRTY3) is False


def test_only_unpulled():
    assert filter_repo_state(OnlyFilter.UNPULLED, CLEAN) is False
    assert filter_repo_state(OnlyFilter.UNPULLED, DIRTY1) is False
    assert filter_repo_state(OnlyFilter.UNPULLED, DIRTY2) is False
    assert filter_repo_state(OnlyFilter.UNPULLED, DIRTY3) is True


def test_only_dirty():
    assert filter_repo_state(OnlyFilter.DIRTY, CLEAN) is False
    assert filter_repo_state(OnlyFilter.DIRTY, DIRTY1) is True
    assert filter_repo_state(OnlyFilter.DIRTY, DIRTY2) is True
    assert filter_repo_state(OnlyFilter.DIRTY, DIRTY3) is True


def test_plain_strings_and_unknown_filter():
    assert filter_repo_state("unpulled", DIRTY3) is True
    assert filter_repo_state("bogus", DIRTY1) is False


CLEAN_GIT = {
    ("branch", "--show-current"): "main\n",
    ("remote",): "origin\n",
    ("rev-parse", "--verify", "origin/main"): "abc\n",
    ("rev-list", "--left-right", "--count", "origin/main...HEAD"): "0\t0\n",
    ("remote", "get-url", "origin"): "https://example.com/org/repo.git\n",
    ("status", "--porcelain=v1", "-uall"): "",
}


def fake_git(cmd, **kwargs):
    out = CLEAN_GIT.get(tuple(cmd[3:]))
    if out is None:
        return subprocess.CompletedProcess(cmd, 128, "", "fatal")
    return subprocess.CompletedProcess(cmd, 0, out, "")


def make_config(root, only):
    return Config(roots=[str(root)], dir_ignore=[], only=only, max_workers=2, version=1)


def test_generate_scan_report_includes_repo_with_all(tmp_path):
    os.makedirs(tmp_path / "repo" / ".git")
    with mock.patch("reposcan.git.subprocess.run", side_effect=fake_git):
        report = generate_scan_report(make_config(tmp_path, OnlyFilter.ALL))

    assert report.version == 1
    assert report.warnings == []
    assert [rs.path for rs in report.repo_states] == [str(tmp_path / "repo")]
    assert report.repo_states[0].repo == "repo"


def test_generate_scan_report_filters_clean_repo_when_dirty(tmp_path):
    os.makedirs(tmp_path / "repo" / ".git")
    with mock.patch("reposcan.git.subprocess.run", side_effect=fake_git):
        report = generate_scan_report(make_config(tmp_path, OnlyFilter.DIRTY))

    assert report.repo_states == []
    assert report.dirty_repos_count() == 0


def test_generate_scan_report_keeps_scan_warnings(tmp_path):
    missing = tmp_path / "missing"
    report = generate_scan_report(make_config(missing, OnlyFilter.ALL))

    assert report.repo_states == []
    assert len(report.warnings) == 1
    assert str(missing) in report.warnings[0]