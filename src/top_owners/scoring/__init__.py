"""Scoring: time decay, per-identity accumulation, bonus and ranking."""

from .decay import age_in_days, decay_weight, is_scorable
from .ledger import Accumulator, OwnershipLedger
from .ranking import bonus_multiplier, rank_owners

__all__ = [
    "Accumulator",
    "OwnershipLedger",
    "age_in_days",
    "bonus_multiplier",
    "decay_weight",
    "is_scorable",
    "rank_owners",
]
