"""Discovery of Git working trees below a set of root directories."""

from __future__ import annotations

import os
import stat

from .ignore import IgnoreMatcher
from .validation import _expand_env


def is_git_repo(path: str) -> bool:
    """A directory is a repo if it holds a .git directory, or a .git file with 'gitdir:'."""
    git_path = os.path.join(path, ".git")
    try:
        info = os.lstat(git_path)
    except OSError:
        return False
    if stat.S_ISDIR(info.st_mode):
        return True
    try:
        with open(git_path, "rb") as handle:
            content = handle.read()
    except OSError:
        return False
    return b"gitdir:" in content


def _child_dirs(path: str) -> list[str]:
    with os.scandir(path) as entries:
        return sorted(e.name for e in entries if e.is_dir(follow_symlinks=False))


def find_git_repos(
    roots: list[str], dir_ignore: list[str] | None
) -> tuple[list[str], list[str]]:
    """Walk each root and return (repository paths, warnings).

    Ignored directories and repositories themselves are not descended into.
    """
    matcher = IgnoreMatcher(roots, dir_ignore or [])
    visited: set[str] = set()
    repos: list[str] = []
    warnings: list[str] = []

    for raw_root in roots:
        root = _expand_env(raw_root)
        try:
            info = os.lstat(root)
        except OSError as exc:
            warnings.append(str(exc))
            continue
        if not stat.S_ISDIR(info.st_mode):
            continue

        stack = [root]
        while stack:
            path = stack.pop()
            if matcher.should_ignore(path) or path in visited:
                continue
            visited.add(path)

            if is_git_repo(path):
                repos.append(path)
                continue

            try:
                children = _child_dirs(path)
            except OSError as exc:
                warnings.append(str(exc))
                continue
            stack.extend(os.path.join(path, name) for name in reversed(children))

    return list(dict.fromkeys(repos)), warnings