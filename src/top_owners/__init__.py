"""
top-owners - find the likely owners of git repositories

Scores every contributor's commits with exponential time decay, merges
identities through an explicit alias file, rewards contributors active in
several repositories, and ranks them deterministically.
"""

__version__ = "0.3.0"

from .api import find_owners
from .engine import OwnershipEngine
from .models import OwnershipReport, RankedOwner, RepositoryFailure

__all__ = [
    "find_owners",  # Main entry point
    "OwnershipEngine",  # Advanced usage (custom readers, pre-built alias tables)
    "OwnershipReport",
    "RankedOwner",
    "RepositoryFailure",
]
