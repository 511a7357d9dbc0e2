"""Produce a scan report from a configuration."""

from __future__ import annotations

from datetime import datetime

from .config import Config, OnlyFilter
from .report import RepoState, ScanReport
from .repostate import get_repo_states_concurrent
from .scanner import find_git_repos


def filter_repo_state(only: OnlyFilter | str, repo_state: RepoState) -> bool:
    """Whether repo_state belongs in the output under the given filter."""
    if only == OnlyFilter.ALL:
        return True
    if only == OnlyFilter.DIRTY:
        return repo_state.is_dirty()
    if only == OnlyFilter.UNCOMMITTED:
        return bool(repo_state.uncommitted_files)
    if only == OnlyFilter.UNPUSHED:
        return repo_state.have_unpushed_commits()
    if only == OnlyFilter.UNPULLED:
        return repo_state.have_unpulled_commits()
    return False


def generate_scan_report(configs: Config) -> ScanReport:
    """Find repositories under the configured roots, inspect them, and filter the results."""
    paths, warnings = find_git_repos(configs.roots, configs.dir_ignore)
    states, state_warnings = get_repo_states_concurrent(paths, configs.max_workers)
    return ScanReport(
        version=configs.version,
        generated_at=datetime.now().astimezone(),
        repo_states=[rs for rs in states if filter_repo_state(configs.only, rs)],
        warnings=[*warnings, *state_warnings],
    )