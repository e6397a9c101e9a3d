"""Exception hierarchy for top-owners."""

from .base import TopOwnersError
from .config import (
    AliasFileError,
    ConfigurationError,
    InvalidConfigError,
)
from .repository import (
    HeadResolutionError,
    HistoryWalkError,
    RepositoryError,
    RepositoryOpenError,
)

__all__ = [
    "TopOwnersError",
    "ConfigurationError",
    "InvalidConfigError",
    "AliasFileError",
    "RepositoryError",
    "RepositoryOpenError",
    "HeadResolutionError",
    "HistoryWalkError",
]
