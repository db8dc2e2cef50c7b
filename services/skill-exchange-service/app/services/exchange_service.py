"""
Business logic service layer.

Composes the independent repositories into the skill exchange flows:
requesting and answering matches, resolving match details, managing
sessions and moving credits between users.
"""

import asyncio
import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import structlog

from ..config import Settings
from ..config import settings as default_settings
from ..dependencies import RepositoryContainer
from ..domain.entities import (Match, MatchStatus, Session, SessionStatus, Skill,
                               SkillType, Transaction, TransactionType, User)
from ..domain.exceptions import EntityNotFoundException, ValidationException

logger = structlog.get_logger(__name__)


@dataclass
class MatchDetails:
    """A match with its skill and teacher, either of which may be unknown."""

    match: Match
    skill: Optional[Skill]
    teacher: Optional[User]


@dataclass
class SessionWithParticipant:
    """A session with its participant, or None if the user no longer exists."""

    session: Session
    participant: Optional[User]


class SkillExchangeService:
    """
    Skill exchange orchestration over the repositories.

    Repositories enforce no references between collections, so lookups of
    related records treat a missing record as unknown rather than failing.
    """

    def __init__(
        self,
        repositories: RepositoryContainer,
        settings: Optional[Settings] = None,
        scorer: Optional[Callable[[Skill, str], int]] = None,
    ):
        """
        Initialize service.

        Args:
            repositories: Repository container
            settings: Settings (default: module-level settings)
            scorer: Compatibility scorer for new matches (default: random
                placeholder within the configured range)
        """
        self.repositories = repositories
        self.settings = settings or default_settings
        self.scorer = scorer or self._placeholder_score
        self._transfer_lock = asyncio.Lock()

    # Matches

    async def request_match(self, skill_id: str, learner_id: str) -> Match:
        """
        Request a match against a listed skill.

        Args:
            skill_id: Skill being requested
            learner_id: User asking to learn it

        Returns:
            The new pending match

        Raises:
            EntityNotFoundException: If the skill does not exist
        """
        skill = await self.repositories.skills.get_by_id(skill_id)

        match = await self.repositories.matches.create(
            {
                "skill_id": skill.id,
                "teacher_id": skill.user_id,
                "learner_id": learner_id,
                "status": MatchStatus.PENDING,
                "compatibility_score": self.scorer(skill, learner_id),
            }
        )
        logger.info(
            "Match requested",
            match_id=match.id,
            skill_id=skill_id,
            learner_id=learner_id,
            score=match.compatibility_score,
        )
        return match

    async def respond_to_match(self, match_id: str, accept: bool) -> Match:
        """Accept or decline a match."""
        status = MatchStatus.ACCEPTED if accept else MatchStatus.DECLINED
        return await self.repositories.matches.update(match_id, {"status": status})

    async def get_match_details(self, match_id: str) -> MatchDetails:
        """
        Get a match with its skill and teacher.

        Raises:
            EntityNotFoundException: If the match itself does not exist
        """
        match = await self.repositories.matches.get_by_id(match_id)
        skill, teacher = await asyncio.gather(
            self._lookup_or_none(self.repositories.skills.get_by_id, match.skill_id),
            self._lookup_or_none(self.repositories.users.get_by_id, match.teacher_id),
        )
        return MatchDetails(match=match, skill=skill, teacher=teacher)

    # Sessions

    async def get_sessions_with_participants(self) -> List[SessionWithParticipant]:
        """Get every session paired with its participant."""
        sessions = await self.repositories.sessions.get_all()
        participants = await asyncio.gather(
            *(
                self._lookup_or_none(self.repositories.users.get_by_id, session.participant_id)
                for session in sessions
            )
        )
        return [
            SessionWithParticipant(session=session, participant=participant)
            for session, participant in zip(sessions, participants)
        ]

    async def confirm_session(self, session_id: str) -> Session:
        return await self.repositories.sessions.update(
            session_id, {"status": SessionStatus.CONFIRMED}
        )

    async def cancel_session(self, session_id: str) -> Session:
        return await self.repositories.sessions.update(
            session_id, {"status": SessionStatus.CANCELLED}
        )

    # Credits

    async def transfer_credits(
        self, from_user_id: str, to_user_id: str, amount: int, description: str = ""
    ) -> List[Transaction]:
        """
        Move credits from one user to another.

        Records a ``spent`` entry and an ``earned`` entry and adjusts both
        balances. Balances may go negative.

        Transfers through the same service run one at a time, so concurrent
        transfers cannot overwrite each other's balance changes. Direct
        writes to the user repository are not coordinated with them.

        Args:
            from_user_id: Paying user
            to_user_id: Receiving user
            amount: Credits to move (must be positive)
            description: Ledger description

        Returns:
            The spent and earned ledger entries, in that order

        Raises:
            ValidationException: If amount is not positive or both users are the same
            EntityNotFoundException: If either user does not exist
        """
        if amount <= 0:
            raise ValidationException("amount", amount, "Amount must be positive")
        if from_user_id == to_user_id:
            raise ValidationException("to_user_id", to_user_id, "Cannot transfer to self")

        async with self._transfer_lock:
            payer, payee = await asyncio.gather(
                self.repositories.users.get_by_id(from_user_id),
                self.repositories.users.get_by_id(to_user_id),
            )

            await self.repositories.users.update(
                payer.id, {"credit_balance": payer.credit_balance - amount}
            )
            await self.repositories.users.update(
                payee.id, {"credit_balance": payee.credit_balance + amount}
            )

            entries = []
            for entry_type in (TransactionType.SPENT, TransactionType.EARNED):
                entries.append(
                    await self.repositories.transactions.create(
                        {
                            "type": entry_type,
                            "amount": amount,
                            "from_user_id": from_user_id,
                            "to_user_id": to_user_id,
                            "description": description,
                        }
                    )
                )

        logger.info(
            "Credits transferred",
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            amount=amount,
        )
        return entries

    # Overview

    async def get_overview(self, recent_limit: int = 3) -> Dict[str, Any]:
        """
        Summarize the skill listings.

        Returns:
            Total count, per-type counts and the first ``recent_limit`` skills
        """
        skills = await self.repositories.skills.get_all()
        return {
            "total_skills": len(skills),
            "offers": sum(1 for skill in skills if skill.type == SkillType.OFFER),
            "requests": sum(1 for skill in skills if skill.type == SkillType.REQUEST),
            "recent_skills": skills[:recent_limit],
        }

    # Helpers

    def _placeholder_score(self, skill: Skill, learner_id: str) -> int:
        # Placeholder: not derived from the skill or the learner.
        return random.randint(
            self.settings.COMPATIBILITY_SCORE_MIN, self.settings.COMPATIBILITY_SCORE_MAX
        )

    @staticmethod
    async def _lookup_or_none(lookup: Callable, record_id: str) -> Optional[Any]:
        try:
            return await lookup(record_id)
        except EntityNotFoundException as e:
            logger.warning("Dangling reference", entity=e.entity, id=record_id)
            return None
