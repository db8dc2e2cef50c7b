"""
Match repository with a read-through participant lookup cache.

``get_by_user_id`` results are cached per user for
``MATCH_CACHE_TTL_SECONDS``. By default writes leave the cache alone, so a
lookup repeated within the TTL can miss matches created, changed or deleted
since the first lookup. Set ``MATCH_CACHE_INVALIDATE_ON_WRITE`` to drop the
participant entries on every write instead.
"""

from typing import Any, Callable, List, Optional

import structlog

from app.cache import QueryCache, build_cache_key
from app.domain.entities import Match, MatchCreate, MatchUpdate

from .base import InMemoryRepository

logger = structlog.get_logger(__name__)


class MatchRepository(InMemoryRepository[Match]):
    """
    Repository for skill matches.

    Attributes:
        cache: Query cache for participant lookups
    """

    entity_name = "Match"
    entity_model = Match
    create_model = MatchCreate
    update_model = MatchUpdate

    def __init__(
        self,
        *args: Any,
        cache: Optional[QueryCache] = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize repository.

        Args:
            cache: Query cache to use (default: built from settings)
            *args, **kwargs: Passed to InMemoryRepository
        """
        super().__init__(*args, **kwargs)
        self.cache = cache or QueryCache(
            ttl_seconds=self.settings.MATCH_CACHE_TTL_SECONDS,
            max_size=self.settings.MATCH_CACHE_MAX_SIZE,
        )

    async def get_by_user_id(self, user_id: str) -> List[Match]:
        """
        Get matches where the user is teacher or learner.

        Served from the cache while the entry is younger than the TTL.

        Args:
            user_id: Participant id

        Returns:
            Matching records in collection order (empty if none)
        """
        return await self._cached(
            "get_by_user_id",
            lambda: self._filter(
                lambda match: match.teacher_id == user_id or match.learner_id == user_id
            ),
            user_id,
        )

    async def _cached(self, operation: str, compute: Callable, *args: Any) -> List[Match]:
        key = build_cache_key(operation, *args)
        cached = self.cache.get(key)
        if cached is not None:
            return [self._copy(match) for match in cached]

        result = await compute()
        self.cache.set(key, [self._copy(match) for match in result])
        return result

    def _on_write(self, *records: Match) -> None:
        if not self.settings.MATCH_CACHE_INVALIDATE_ON_WRITE:
            return
        for record in records:
            for user_id in (record.teacher_id, record.learner_id):
                self.cache.delete(build_cache_key("get_by_user_id", user_id))
