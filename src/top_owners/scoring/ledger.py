"""Per-run accumulation of decay-weighted commit activity.

One OwnershipLedger is created per run and passed explicitly to every fold,
so two runs in the same process never share scores. Each repository's events
are scored outside the lock and applied in a single critical section.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..history.models import CommitEvent
from ..identity.aliases import AliasTable, normalize_identifier, resolve
from ..logging_config import get_logger
from .decay import decay_weight, is_scorable

logger = get_logger(__name__)


@dataclass
class Accumulator:
    """Running totals for one canonical identity."""

    canonical_id: str
    raw_score: float = 0.0
    repositories: set[str] = field(default_factory=set)
    aliases: set[str] = field(default_factory=set)  # raw ids other than canonical_id

    @property
    def repository_count(self) -> int:
        return len(self.repositories)


@dataclass(frozen=True)
class _Observation:
    canonical_id: str
    raw_id: str
    repository: str
    weight: float


class OwnershipLedger:
    """Canonical id -> Accumulator for a single run."""

    def __init__(self) -> None:
        self._accumulators: dict[str, Accumulator] = {}
        self._lock = threading.Lock()
        self._total_events = 0

    def fold(
        self,
        events: Iterable[CommitEvent],
        table: AliasTable,
        observed_at: float,
        tau: float,
    ) -> int:
        """Score ``events`` and add them to the ledger.

        Events without a timestamp or author are skipped. Returns the number
        of events applied.
        """
        observations = list(self._observe(events, table, observed_at, tau))

        with self._lock:
            for obs in observations:
                acc = self._accumulators.get(obs.canonical_id)
                if acc is None:
                    acc = Accumulator(canonical_id=obs.canonical_id)
                    self._accumulators[obs.canonical_id] = acc
                acc.raw_score += obs.weight
                acc.repositories.add(obs.repository)
                if obs.raw_id != obs.canonical_id:
                    acc.aliases.add(obs.raw_id)
            self._total_events += len(observations)

        return len(observations)

    @staticmethod
    def _observe(
        events: Iterable[CommitEvent],
        table: AliasTable,
        observed_at: float,
        tau: float,
    ) -> Iterator[_Observation]:
        for event in events:
            if not is_scorable(event):
                logger.debug(
                    "Skipping commit %s in %s: missing author or timestamp",
                    event.sha or "?",
                    event.repository,
                )
                continue
            yield _Observation(
                canonical_id=resolve(event.author, table),
                raw_id=normalize_identifier(event.author),
                repository=event.repository,
                weight=decay_weight(event.timestamp, observed_at, tau),
            )

    @property
    def accumulators(self) -> Mapping[str, Accumulator]:
        return MappingProxyType(self._accumulators)

    @property
    def total_events(self) -> int:
        return self._total_events

    def __len__(self) -> int:
        return len(self._accumulators)

    def __contains__(self, canonical_id: object) -> bool:
        return canonical_id in self._accumulators

    def __getitem__(self, canonical_id: str) -> Accumulator:
        return self._accumulators[canonical_id]
