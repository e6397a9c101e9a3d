"""Data models for repository history."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommitEvent:
    author: str  # raw author email, as recorded in the commit
    timestamp: int  # unix seconds; 0 when the commit carries no date
    repository: str  # resolved repository path
    sha: str = ""
