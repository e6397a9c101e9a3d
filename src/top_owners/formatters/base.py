"""Base formatter interface for ownership reports."""

from abc import ABC, abstractmethod

from ..models import OwnershipReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: OwnershipReport) -> None:
        """Print the report to stdout."""

    @abstractmethod
    def format(self, report: OwnershipReport) -> str:
        """Return formatted string representation of the report."""
