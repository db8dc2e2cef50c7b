"""Service layer - orchestrates repositories into skill exchange flows."""

from .exchange_service import MatchDetails, SessionWithParticipant, SkillExchangeService

__all__ = ["MatchDetails", "SessionWithParticipant", "SkillExchangeService"]
