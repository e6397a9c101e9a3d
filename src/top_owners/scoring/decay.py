"""Exponential time decay for commit weights.

    weight = exp(-age_days / tau)

A commit made at observation time weighs 1.0; one ``tau`` days old weighs
1/e. Weights approach 0 with age but never reach it. Future-dated commits
(clock skew) are clamped to age 0 rather than weighing more than 1.
"""

import math

from ..config import validate_tau
from ..history.models import CommitEvent
from ..identity.aliases import normalize_identifier

SECONDS_PER_DAY = 86400.0


def age_in_days(commit_ts: float, observed_at: float) -> float:
    return max(0.0, (observed_at - commit_ts) / SECONDS_PER_DAY)


def decay_weight(commit_ts: float, observed_at: float, tau: float) -> float:
    """Weight in (0, 1] for a commit at ``commit_ts`` seen at ``observed_at``.

    Both times are unix seconds; ``tau`` is in days.

    Raises:
        InvalidConfigError: If tau is not strictly positive.
    """
    validate_tau(tau)
    return math.exp(-age_in_days(commit_ts, observed_at) / tau)


def is_scorable(event: CommitEvent) -> bool:
    """Commits without a date or an author are not scored at all."""
    return bool(event.timestamp) and bool(normalize_identifier(event.author))
