"""Output formatters for top-owners."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .plain_formatter import PlainFormatter
from .rich_formatter import RichFormatter

FORMATTERS = {
    "rich": RichFormatter,
    "json": JsonFormatter,
    "plain": PlainFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json", "plain"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    cls = FORMATTERS.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(FORMATTERS))}"
        )
    return cls()


__all__ = [
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "PlainFormatter",
    "FORMATTERS",
    "get_formatter",
]
