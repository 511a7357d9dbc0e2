import subprocess
from unittest import mock

from reposcan.report import RemoteStatus
from reposcan.repostate import check_repo_state, get_repo_states_concurrent
from reposcan.utils import hash_string

FULL = {
    ("branch", "--show-current"): "main\n",
    ("remote",): "origin\n",
    ("rev-parse", "--verify", "origin/main"): "abc\n",
    ("rev-list", "--left-right", "--count", "origin/main...HEAD"): "1\t2\n",
    ("remote", "get-url", "origin"): "git@example.com:team/widget.git\n",
    ("status", "--porcelain=v1", "-uall"): " M a.txt\n?? b.txt\n",
}


def fake_git(responses):
    def run(cmd, **kwargs):
        out = responses.get(tuple(cmd[3:]))
        if out is None:
            return subprocess.CompletedProcess(cmd, 128, "", "fatal")
        return subprocess.CompletedProcess(cmd, 0, out, "")

    return run


def patched(responses):
    return mock.patch("reposcan.git.subprocess.run", side_effect=fake_git(responses))


def test_check_repo_state_collects_everything():
    with patched(FULL):
        state, warnings = check_repo_state("/work/widget")

    assert warnings == []
    assert state.id == hash_string("/work/widget")
    assert state.path == "/work/widget"
    assert state.repo == "widget"
    assert state.branch == "main"
    assert state.uncommitted_files == [" M a.txt", "?? b.txt"]
    assert state.remote_status == [RemoteStatus("origin", ahead=2, behind=1)]


def test_no_remotes_gives_placeholder_status():
    responses = dict(FULL)
    responses[("remote",)] = ""
    with patched(responses):
        state, _ = check_repo_state("/work/widget")
    assert state.remote_status == [RemoteStatus("", -1, -1)]


def test_failing_remote_is_marked_and_warned():
    responses = dict(FULL)
    del responses[("rev-parse", "--verify", "origin/main")]
    with patched(responses):
        state, warnings = check_repo_state("/work/widget")
    assert state.remote_status == [RemoteStatus("origin", -1, -1)]
    assert warnings == ["Failed to get upstream status for remote=origin, path=/work/widget"]


def test_everything_failing_still_returns_state():
    with patched({}):
        state, warnings = check_repo_state("/nowhere")
    assert state.branch == "-"
    assert state.repo == ""
    assert state.uncommitted_files == []
    assert state.remote_status == [RemoteStatus("", -1, -1)]
    assert len(warnings) == 4
    assert warnings[0] == "Failed to get branch name, path=/nowhere"


def test_concurrent_states_sorted_by_path():
    paths = ["/r/b", "/r/a", "/r/c"]
    with patched(FULL):
        states, warnings = get_repo_states_concurrent(paths, 2)
    assert [s.path for s in states] == sorted(paths)
    assert [s.id for s in states] == [hash_string(p) for p in sorted(paths)]
    assert warnings == []


def test_concurrent_with_non_positive_workers():
    with patched({}):
        states, warnings = get_repo_states_concurrent(["/x", "/y"], 0)
    assert [s.path for s in states] == ["/x", "/y"]
    assert len(warnings) == 8


def test_concurrent_empty_input():
    assert get_repo_states_concurrent([], 4) == ([], [])