"""Repository exceptions: opening, HEAD resolution, history walking.

These are recoverable. The engine records them per repository and keeps
going with the rest.
"""

from .base import TopOwnersError


class RepositoryError(TopOwnersError):
    """Base class for errors reading a single repository."""

    _summary = "Cannot read repository"

    def __init__(self, repository: str, reason: str):
        super().__init__(
            f"{self._summary}: {repository}",
            details={"repository": repository, "reason": reason},
        )
        self.repository = repository
        self.reason = reason


class RepositoryOpenError(RepositoryError):
    """Raised when a path is not a readable git repository."""

    _summary = "Cannot open repository"


class HeadResolutionError(RepositoryError):
    """Raised when HEAD does not point at a commit (e.g. empty repository)."""

    _summary = "Cannot resolve HEAD"


class HistoryWalkError(RepositoryError):
    """Raised when the commit log cannot be enumerated."""

    _summary = "Cannot walk history"
