"""
Repository wiring.

Builds explicitly owned repository instances instead of process-wide
singletons; whoever calls ``create_repositories`` owns their lifetime.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

import structlog

from .config import Settings
from .config import settings as default_settings
from .repositories import (MatchRepository, SessionRepository, SkillRepository,
                           TransactionRepository, UserRepository)
from .repositories.base import new_record_id
from .seed import load_seed

logger = structlog.get_logger(__name__)


@dataclass
class RepositoryContainer:
    """One instance of each repository."""

    skills: SkillRepository
    users: UserRepository
    matches: MatchRepository
    sessions: SessionRepository
    transactions: TransactionRepository


def create_repositories(
    settings: Optional[Settings] = None,
    seed_dir: Optional[Union[str, Path]] = None,
    id_factory: Callable[[], str] = new_record_id,
) -> RepositoryContainer:
    """
    Build fresh repositories seeded from the static datasets.

    Args:
        settings: Settings to use (default: module-level settings)
        seed_dir: Directory with the seed JSON files (default: SEED_DATA_DIR
            setting, then the bundled datasets)
        id_factory: Id generator shared by all repositories

    Returns:
        Container with independent repositories
    """
    settings = settings or default_settings
    seed_dir = seed_dir or settings.SEED_DATA_DIR

    def build(repository_class, collection):
        return repository_class(
            load_seed(collection, seed_dir), settings=settings, id_factory=id_factory
        )

    container = RepositoryContainer(
        skills=build(SkillRepository, "skills"),
        users=build(UserRepository, "users"),
        matches=build(MatchRepository, "matches"),
        sessions=build(SessionRepository, "sessions"),
        transactions=build(TransactionRepository, "transactions"),
    )
    logger.info("Repositories initialized", seed_dir=str(seed_dir or "bundled"))
    return container
