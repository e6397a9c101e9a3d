"""Public API for top-owners.

Example:
    >>> from top_owners import find_owners
    >>>
    >>> report = find_owners(["/path/to/repo"])
    >>> for owner in report.owners:
    ...     print(owner.canonical_id, round(owner.final_score, 2))
    >>>
    >>> # With customization
    >>> report = find_owners(
    ...     ["/path/to/service", "/path/to/library"],
    ...     tau=180,
    ...     count=5,
    ...     aliases_file="aliases.toml",
    ... )
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from .config import load_config
from .engine import OwnershipEngine
from .history import HistoryReader
from .logging_config import get_logger
from .models import OwnershipReport

logger = get_logger(__name__)


def find_owners(
    repositories: Sequence[str],
    config_file: Optional[Path] = None,
    reader: Optional[HistoryReader] = None,
    observed_at: Optional[float] = None,
    **overrides,
) -> OwnershipReport:
    """Rank the likely owners of one or more local git repositories.

    This is the main entry point. It:
    1. Loads configuration (auto-discovered TOML + env + overrides)
    2. Loads the alias table, if one is configured
    3. Reads every repository and scores its commits with time decay
    4. Returns the ranked owners

    Args:
        repositories: Paths to local git repositories
        config_file: Optional explicit config file path
        reader: Optional history source (defaults to the git CLI)
        observed_at: Unix time to measure commit age against (default: now)
        **overrides: Configuration overrides (e.g., tau=180, count=5)

    Returns:
        OwnershipReport with the ranked owners and per-repository outcome

    Raises:
        ConfigurationError: If configuration or the alias file is invalid
    """
    config = load_config(config_file=config_file, **overrides)
    logger.debug("Resolved configuration: %s", config)
    engine = OwnershipEngine(config, reader=reader)
    return engine.run(repositories, observed_at=observed_at)
