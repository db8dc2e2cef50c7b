"""
Repository layer - Data access abstractions.

One in-memory repository per collection, all sharing the contract
defined in ``base``.
"""

from .base import InMemoryRepository, IRepository
from .match_repository import MatchRepository
from .session_repository import SessionRepository
from .skill_repository import SkillRepository
from .transaction_repository import TransactionRepository
from .user_repository import UserRepository

__all__ = [
    "IRepository",
    "InMemoryRepository",
    "MatchRepository",
    "SessionRepository",
    "SkillRepository",
    "TransactionRepository",
    "UserRepository",
]
