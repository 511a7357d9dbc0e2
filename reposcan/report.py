"""Data types describing the result of a repository scan."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


def _format_timestamp(moment: datetime) -> str:
    """Format a datetime as RFC 3339 with trimmed fractional seconds."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset()
    if not offset:
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    total = abs(total)
    return f"{text}{sign}{total // 3600:02d}:{total % 3600 // 60:02d}"


@dataclass
class RemoteStatus:
    """Ahead/behind counts of the current branch against one remote."""

    remote: str = ""
    ahead: int = 0
    behind: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"remote": self.remote, "ahead": self.ahead, "behind": self.behind}


@dataclass
class RepoState:
    """State of a single Git repository discovered during a scan."""

    id: str = ""
    path: str = ""
    repo: str = ""
    branch: str = ""
    uncommitted_files: list[str] = field(default_factory=list)
    remote_status: list[RemoteStatus] = field(default_factory=list)

    def is_dirty(self) -> bool:
        """True if there are uncommitted changes or any remote is ahead/behind."""
        dirty_remote = any(s.ahead > 0 or s.behind > 0 for s in self.remote_status)
        return bool(self.uncommitted_files) or dirty_remote

    def have_unpushed_commits(self) -> bool:
        return any(s.ahead > 0 for s in self.remote_status)

    def have_unpulled_commits(self) -> bool:
        return any(s.behind > 0 for s in self.remote_status)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "path": self.path,
            "repo": self.repo,
            "branch": self.branch,
            "uncommitedFiles": list(self.uncommitted_files),
            "remoteStatus": [s.to_dict() for s in self.remote_status],
        }


@dataclass
class ScanReport:
    """Aggregated results of scanning one or more roots."""

    version: int = 0
    repo_states: list[RepoState] = field(default_factory=list)
    generated_at: datetime = field(default_factory=lambda: datetime.now().astimezone())
    warnings: list[str] = field(default_factory=list)

    def dirty_repos_count(self) -> int:
        return sum(1 for rs in self.repo_states if rs.is_dirty())

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "repoStates": [rs.to_dict() for rs in self.repo_states],
            "generatedAt": _format_timestamp(self.generated_at),
            "warnings": list(self.warnings),
        }

    def to_json(self) -> str:
        """Pretty-printed JSON with four-space indentation."""
        return json.dumps(self.to_dict(), indent=4, ensure_ascii=False)