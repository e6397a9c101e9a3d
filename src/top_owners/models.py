"""Result models for ownership runs."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from .identity.aliases import EMPTY_ALIAS_TABLE, AliasTable


@dataclass(frozen=True)
class RankedOwner:
    """One ranked contributor. Derived from an Accumulator, never mutated."""

    canonical_id: str
    final_score: float
    raw_score: float
    repository_count: int
    aliases: tuple[str, ...] = ()  # sorted
    bonus_multiplier: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["aliases"] = list(self.aliases)
        return data


@dataclass(frozen=True)
class RepositoryFailure:
    repository: str
    reason: str


@dataclass(frozen=True)
class RunParameters:
    tau: float
    count: int
    bonus_per_repo: float


@dataclass(frozen=True)
class OwnershipReport:
    """Everything a presenter needs to show the outcome of one run.

    Attributes:
        owners: Ranked owners, best first, already truncated to ``count``.
        repositories: Repositories requested, in input order (deduplicated).
        analyzed: Repositories whose history was folded into the scores.
        failures: Repositories skipped because they could not be read.
        alias_table: Alias table used to merge identities.
        parameters: Scoring parameters of the run.
        observed_at: Unix time the decay weights were computed against.
        events_scored: Number of commits that contributed to a score.
    """

    owners: tuple[RankedOwner, ...]
    repositories: tuple[str, ...]
    analyzed: tuple[str, ...]
    failures: tuple[RepositoryFailure, ...]
    parameters: RunParameters
    observed_at: float
    events_scored: int = 0
    alias_table: AliasTable = field(default=EMPTY_ALIAS_TABLE)

    @property
    def is_empty(self) -> bool:
        return self.events_scored == 0

    @property
    def aliases_source(self) -> Optional[str]:
        return self.alias_table.source

    def to_dict(self) -> dict[str, Any]:
        return {
            "parameters": asdict(self.parameters),
            "observed_at": self.observed_at,
            "repositories": list(self.repositories),
            "analyzed": list(self.analyzed),
            "failures": [asdict(f) for f in self.failures],
            "aliases_source": self.aliases_source,
            "alias_mappings": len(self.alias_table),
            "alias_warnings": list(self.alias_table.warnings),
            "events_scored": self.events_scored,
            "owners": [owner.to_dict() for owner in self.owners],
        }
