"""Multi-repository bonus and deterministic ranking.

    multiplier  = 1                                   if repos <= 1
                = 1 + (repos - 1) * bonus_per_repo    otherwise
    final_score = raw_score * multiplier

Owners are ordered by final score (descending), then repository count
(descending), then canonical id (ascending), which is a total order: the
result never depends on dict iteration order.
"""

from __future__ import annotations

from collections.abc import Mapping

from ..config import validate_bonus_per_repo, validate_count
from ..models import RankedOwner
from .ledger import Accumulator


def bonus_multiplier(repository_count: int, bonus_per_repo: float) -> float:
    """Reward breadth linearly; a single repository is never penalized.

    Raises:
        InvalidConfigError: If bonus_per_repo is negative.
    """
    validate_bonus_per_repo(bonus_per_repo)
    if repository_count <= 1:
        return 1.0
    return 1.0 + (repository_count - 1) * bonus_per_repo


def _sort_key(owner: RankedOwner) -> tuple[float, int, str]:
    return (-owner.final_score, -owner.repository_count, owner.canonical_id)


def rank_owners(
    accumulators: Mapping[str, Accumulator],
    bonus_per_repo: float,
    limit: int,
) -> list[RankedOwner]:
    """Apply the bonus, sort, and keep the first ``limit`` owners.

    ``limit == 0`` returns an empty list.

    Raises:
        InvalidConfigError: If bonus_per_repo or limit is negative.
    """
    validate_bonus_per_repo(bonus_per_repo)
    validate_count(limit)

    owners = []
    for canonical_id, acc in accumulators.items():
        multiplier = bonus_multiplier(acc.repository_count, bonus_per_repo)
        owners.append(
            RankedOwner(
                canonical_id=canonical_id,
                final_score=acc.raw_score * multiplier,
                raw_score=acc.raw_score,
                repository_count=acc.repository_count,
                aliases=tuple(sorted(acc.aliases)),
                bonus_multiplier=multiplier,
            )
        )

    owners.sort(key=_sort_key)
    return owners[:limit]
