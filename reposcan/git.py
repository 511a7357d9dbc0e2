"""Thin wrappers around the git command line."""

from __future__ import annotations

import os
import re
import subprocess
from urllib.parse import unquote

from .report import RemoteStatus

_SCHEME = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_REPO_TAIL = re.compile(r"([^/\\]+?)(?:\.git)?[/\\]?$")


class GitError(RuntimeError):
    """A git command could not be run or exited with a non-zero status."""


def run_git_command(directory: str, *args: str) -> str:
    """Run git with args inside directory and return its stdout."""
    command = ["git", "-C", str(directory), *args]
    try:
        completed = subprocess.run(
            command,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise GitError(f"failed to run git: {exc}") from exc
    if completed.returncode != 0:
        raise GitError(f"exit status {completed.returncode}")
    return completed.stdout


def git_push(path: str) -> str:
    return run_git_command(path, "push", "--porcelain")


def git_pull(path: str) -> str:
    return run_git_command(path, "pull")


def git_fetch(path: str) -> str:
    return run_git_command(path, "fetch", "--porcelain")


def get_git_remotes(path: str) -> list[str]:
    """Names of the repository's remotes."""
    text = run_git_command(path, "remote").strip()
    if not text:
        return []
    return text.split("\n")


def get_repo_branch(path: str) -> str:
    """Current branch name; empty for a detached HEAD."""
    return run_git_command(path, "branch", "--show-current").strip()


def get_uncommitted_files(path: str) -> list[str]:
    """Porcelain status lines for changed and untracked files."""
    output = run_git_command(path, "status", "--porcelain=v1", "-uall")
    return [line for line in output.rstrip("\n").split("\n") if line.strip()]


def _atoi_safe(text: str) -> int:
    digits = re.match(r"\d*", text).group(0)
    return int(digits) if digits else 0


def _parse_left_right(output: str) -> tuple[int, int]:
    """Return (ahead, behind) from `rev-list --left-right --count` output."""
    parts = output.split()
    if len(parts) != 2:
        return 0, 0
    return _atoi_safe(parts[1]), _atoi_safe(parts[0])


def get_upstream_status(path: str) -> tuple[int, int]:
    """(ahead, behind) relative to the upstream tracking branch."""
    output = run_git_command(path, "rev-list", "--left-right", "--count", "@{u}...HEAD")
    return _parse_left_right(output)


def get_remote_status(path: str, remote: str, current_branch: str) -> RemoteStatus:
    """Ahead/behind of HEAD against the same branch on remote."""
    ref = f"{remote}/{current_branch}"
    run_git_command(path, "rev-parse", "--verify", ref)
    output = run_git_command(path, "rev-list", "--left-right", "--count", f"{ref}...HEAD")
    ahead, behind = _parse_left_right(output)
    return RemoteStatus(remote=remote, ahead=ahead, behind=behind)


def _url_path(raw: str) -> str:
    """The path component of raw read as a URL, or '' if there is none."""
    raw = raw.split("#", 1)[0]
    if raw.startswith(":"):
        return ""
    match = _SCHEME.match(raw)
    scheme = match.group(1) if match else ""
    rest = raw[match.end():] if match else raw
    rest = rest.split("?", 1)[0]
    if scheme and not rest.startswith("/"):
        return ""
    if rest.startswith("//") and (scheme or not rest.startswith("///")):
        _, slash, remainder = rest[2:].partition("/")
        rest = slash + remainder
    elif not scheme and ":" in rest.split("/", 1)[0]:
        return ""
    return unquote(rest)


def _path_base(path: str) -> str:
    if not path:
        return "."
    trimmed = path.rstrip("/")
    if not trimmed:
        return "/"
    return trimmed.rsplit("/", 1)[-1]


def parse_repo_name(remote: str) -> str | None:
    """Repository name from a remote URL, scp-style address or path; None if not found."""
    if ":" in remote and "@" in remote and "://" not in remote:
        host, _, rest = remote.partition(":")
        remote = f"ssh://{host}/{rest}"

    url_path = _url_path(remote)
    if url_path:
        return _path_base(url_path).removesuffix(".git")

    match = _REPO_TAIL.search(remote)
    if match:
        return match.group(1)
    return None


def get_repo_name(repo_path: str) -> str:
    """Name from the origin (or first) remote URL, else the work-tree folder name."""
    remote = ""
    try:
        remote = run_git_command(repo_path, "remote", "get-url", "origin")
    except GitError:
        try:
            names = run_git_command(repo_path, "remote").split()
        except GitError:
            names = []
        if names:
            try:
                remote = run_git_command(repo_path, "remote", "get-url", names[0])
            except GitError:
                remote = ""

    remote = remote.strip()
    if remote:
        name = parse_repo_name(remote)
        if name is not None:
            return name

    try:
        top = run_git_command(repo_path, "rev-parse", "--show-toplevel")
    except GitError:
        raise GitError("could not determine repo name") from None
    top = top.strip().rstrip("/\\")
    return os.path.basename(top) or "."