"""Skill listings repository."""

from typing import List

from app.domain.entities import Skill, SkillCreate, SkillUpdate

from .base import InMemoryRepository


class SkillRepository(InMemoryRepository[Skill]):
    """Repository for skill offers and requests."""

    entity_name = "Skill"
    entity_model = Skill
    create_model = SkillCreate
    update_model = SkillUpdate

    async def get_by_category(self, category: str) -> List[Skill]:
        """
        Get skills in a category.

        Args:
            category: Category name, e.g. "Music"

        Returns:
            Matching skills in collection order (empty if none)
        """
        return await self._filter(lambda skill: skill.category == category)

    async def get_by_user_id(self, user_id: str) -> List[Skill]:
        """Get skills owned by a user, in collection order."""
        return await self._filter(lambda skill: skill.user_id == user_id)
