"""Repository history: read commit events from local git repositories."""

from .git_reader import GitHistoryReader, HistoryReader
from .models import CommitEvent

__all__ = [
    "CommitEvent",
    "GitHistoryReader",
    "HistoryReader",
]
