"""Scheduled session repository."""

from typing import List

from app.domain.entities import Session, SessionCreate, SessionUpdate

from .base import InMemoryRepository


class SessionRepository(InMemoryRepository[Session]):
    """Repository for sessions scheduled against matches."""

    entity_name = "Session"
    entity_model = Session
    create_model = SessionCreate
    update_model = SessionUpdate

    async def get_by_match_id(self, match_id: str) -> List[Session]:
        """Get sessions scheduled for a match, in collection order."""
        return await self._filter(lambda session: session.match_id == match_id)
