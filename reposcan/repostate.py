"""Collect the state of Git repositories, one at a time or in parallel."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from .git import (
    GitError,
    get_git_remotes,
    get_remote_status,
    get_repo_branch,
    get_repo_name,
    get_uncommitted_files,
)
from .report import RemoteStatus, RepoState
from .utils import hash_string


def check_repo_state(path: str) -> tuple[RepoState, list[str]]:
    """Inspect the repository at path; return its state and non-fatal warnings."""
    warnings: list[str] = []

    try:
        branch = get_repo_branch(path)
    except GitError:
        branch = "-"
        warnings.append(f"Failed to get branch name, path={path}")

    try:
        remotes = get_git_remotes(path)
    except GitError:
        remotes = []
        warnings.append(f"Failed to get git remotes, path={path}")

    statuses: list[RemoteStatus] = []
    if not remotes:
        statuses.append(RemoteStatus(remote="", ahead=-1, behind=-1))
    for remote in remotes:
        try:
            statuses.append(get_remote_status(path, remote, branch))
        except GitError:
            warnings.append(f"Failed to get upstream status for remote={remote}, path={path}")
            statuses.append(RemoteStatus(remote=remote, ahead=-1, behind=-1))

    try:
        repo_name = get_repo_name(path)
    except GitError:
        repo_name = ""
        warnings.append(f"Failed to get repo name, path={path}")

    try:
        uncommitted = get_uncommitted_files(path)
    except GitError:
        uncommitted = []
        warnings.append(f"Failed to get uncommited files, path={path}")

    state = RepoState(
        id=hash_string(path),
        path=path,
        repo=repo_name,
        branch=branch,
        uncommitted_files=uncommitted,
        remote_status=statuses,
    )
    return state, warnings


def get_repo_states_concurrent(
    paths: list[str], max_workers: int
) -> tuple[list[RepoState], list[str]]:
    """Check every path using up to max_workers threads; states are sorted by path."""
    workers = max(1, max_workers)
    states: list[RepoState] = []
    warnings: list[str] = []
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for state, state_warnings in pool.map(check_repo_state, paths):
            states.append(state)
            warnings.extend(state_warnings)
    states.sort(key=lambda s: s.path)
    return states, warnings