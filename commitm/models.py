from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Commit:
    message: str
    repo: str
    repo_url: str
    sha1: str
    commit_url: str

    def to_dict(self) -> dict[str, str]:
        return {
            "repo": self.repo,
            "repo_url": self.repo_url,
            "sha1": self.sha1,
            "commit_url": self.commit_url,
            "message": self.message,
        }


@dataclass(frozen=True)
class QueryResult:
    commits: list[Commit] = field(default_factory=list)
    result_count: str = ""
    total_pages: str = "1"
    skipped_rows: int = 0


@dataclass(frozen=True)
class JsonFormat:
    commits: list[Commit] = field(default_factory=list)
    error: str = ""

    @classmethod
    def from_error(cls, message: str) -> JsonFormat:
        return cls(commits=[], error=message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "commits": [commit.to_dict() for commit in self.commits],
            "error": self.error,
        }
