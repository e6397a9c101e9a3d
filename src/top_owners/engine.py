"""Ownership engine: read repositories, fold their history, rank owners.

Pipeline:
    1. Validate parameters and load the alias table (before any git work)
    2. Read each repository's history on a worker thread
    3. Fold each successful history into the run's ledger, in input order
    4. Rank the ledger into an OwnershipReport

A repository that cannot be read is logged, recorded as a failure and
skipped. Its events never reach the ledger.
"""

from __future__ import annotations

import concurrent.futures
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from .config import OwnersConfig
from .exceptions import InvalidConfigError, RepositoryError
from .history import CommitEvent, GitHistoryReader, HistoryReader
from .identity import AliasTable, load_alias_table
from .logging_config import get_logger
from .models import OwnershipReport, RepositoryFailure, RunParameters
from .scoring import OwnershipLedger, rank_owners

logger = get_logger(__name__)

MAX_DEFAULT_WORKERS = 8


class OwnershipEngine:
    """Runs one ownership computation per call to :meth:`run`.

    Args:
        config: Validated run parameters.
        reader: History source; defaults to the git CLI reader.
        alias_table: Pre-built alias table. When omitted the table is loaded
            from ``config.aliases_file`` at the start of each run.
    """

    def __init__(
        self,
        config: OwnersConfig,
        reader: Optional[HistoryReader] = None,
        alias_table: Optional[AliasTable] = None,
    ):
        self.config = config
        self.reader = reader or GitHistoryReader(timeout_seconds=config.git_timeout_seconds)
        self.alias_table = alias_table

    def run(
        self, repositories: Sequence[str], observed_at: Optional[float] = None
    ) -> OwnershipReport:
        """Rank the owners of ``repositories``.

        Raises:
            InvalidConfigError: If no repositories are given.
            AliasFileError: If the configured alias file cannot be parsed.
        """
        repositories = self._dedupe(repositories)
        if not repositories:
            raise InvalidConfigError("repositories", 0, "at least one repository is required")

        table = self.alias_table
        if table is None:
            table = load_alias_table(self.config.aliases_file)

        if observed_at is None:
            observed_at = time.time()

        logger.info(
            "Analyzing %d repositories with tau=%.1f days",
            len(repositories),
            self.config.tau,
        )

        ledger = OwnershipLedger()
        analyzed: list[str] = []
        failures: list[RepositoryFailure] = []

        for repository, outcome in self._read_all(repositories):
            if isinstance(outcome, RepositoryError):
                logger.warning("Skipping repository %s due to error: %s", repository, outcome)
                failures.append(RepositoryFailure(repository=repository, reason=str(outcome)))
                continue
            applied = ledger.fold(outcome, table, observed_at, self.config.tau)
            analyzed.append(repository)
            logger.info("Folded %d commits from %s", applied, repository)

        owners = rank_owners(
            ledger.accumulators,
            bonus_per_repo=self.config.bonus_per_repo,
            limit=self.config.count,
        )

        if ledger.total_events == 0:
            logger.info("No commit data found in any repository")

        return OwnershipReport(
            owners=tuple(owners),
            repositories=tuple(repositories),
            analyzed=tuple(analyzed),
            failures=tuple(failures),
            parameters=RunParameters(
                tau=self.config.tau,
                count=self.config.count,
                bonus_per_repo=self.config.bonus_per_repo,
            ),
            observed_at=observed_at,
            events_scored=ledger.total_events,
            alias_table=table,
        )

    def _read_all(self, repositories: list[str]):
        """Yield ``(repository, events | RepositoryError)`` in input order."""
        workers = self.config.workers or min(MAX_DEFAULT_WORKERS, len(repositories))

        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [(repo, executor.submit(self.reader.read, repo)) for repo in repositories]
            for repository, future in futures:
                yield repository, self._outcome(future)

    @staticmethod
    def _outcome(
        future: concurrent.futures.Future,
    ) -> list[CommitEvent] | RepositoryError:
        try:
            return list(future.result())
        except RepositoryError as e:
            return e

    @staticmethod
    def _dedupe(repositories: Sequence[str]) -> list[str]:
        seen: set[str] = set()
        unique = []
        for repository in repositories:
            key = str(Path(repository).resolve())
            if key in seen:
                logger.warning("Repository %s given more than once; reading it once", repository)
                continue
            seen.add(key)
            unique.append(repository)
        return unique
