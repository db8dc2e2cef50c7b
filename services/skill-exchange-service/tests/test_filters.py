"""
Tests for collection-specific filter operations.
"""

import pytest

from app.repositories import (SessionRepository, SkillRepository,
                              TransactionRepository)


@pytest.fixture
def skill_repo(test_settings, three_skills):
    return SkillRepository(three_skills, settings=test_settings)


class TestSkillFilters:
    """Test skill filters."""

    @pytest.mark.asyncio
    async def test_get_by_category_single_match(self, skill_repo):
        """Test only the Music skill is returned out of three."""
        result = await skill_repo.get_by_category("Music")

        assert [s.id for s in result] == ["s2"]

    @pytest.mark.asyncio
    async def test_get_by_category_no_match(self, skill_repo):
        """Test empty list when no skill is in the category."""
        assert await skill_repo.get_by_category("Sports") == []

    @pytest.mark.asyncio
    async def test_get_by_category_unknown_category(self, skill_repo):
        """Test a category outside the enum matches nothing instead of failing."""
        assert await skill_repo.get_by_category("Juggling") == []

    @pytest.mark.asyncio
    async def test_get_by_user_id_preserves_order(self, skill_repo):
        """Test owner filter keeps collection order."""
        result = await skill_repo.get_by_user_id("u1")

        assert [s.id for s in result] == ["s1", "s3"]

    @pytest.mark.asyncio
    async def test_filter_sees_new_records(self, skill_repo, sample_skill_payload):
        """Test filters read the live collection."""
        created = await skill_repo.create(sample_skill_payload)

        result = await skill_repo.get_by_category("Music")

        assert [s.id for s in result] == ["s2", created.id]

    @pytest.mark.asyncio
    async def test_seed_category_counts(self, repositories):
        """Test category filter over the bundled skills."""
        music = await repositories.skills.get_by_category("Music")

        assert [s.title for s in music] == ["Guitar Basics"]


class TestSessionFilters:
    """Test session filters."""

    @pytest.mark.asyncio
    async def test_get_by_match_id(self, repositories):
        """Test sessions for a match are returned in order."""
        result = await repositories.sessions.get_by_match_id("1")

        assert [s.id for s in result] == ["1", "4"]

    @pytest.mark.asyncio
    async def test_get_by_match_id_empty(self, test_settings):
        """Test empty repository yields empty list."""
        repo = SessionRepository(settings=test_settings)

        assert await repo.get_by_match_id("1") == []


class TestTransactionFilters:
    """Test ledger filters."""

    @pytest.mark.asyncio
    async def test_get_by_user_id_payer_or_payee(self, repositories):
        """Test entries where the user pays or receives are returned."""
        assert [t.id for t in await repositories.transactions.get_by_user_id("u1")] == ["1", "2"]
        assert [t.id for t in await repositories.transactions.get_by_user_id("u4")] == ["3"]

    @pytest.mark.asyncio
    async def test_get_by_user_id_no_entries(self, test_settings):
        """Test unknown user yields empty list."""
        repo = TransactionRepository(settings=test_settings)

        assert await repo.get_by_user_id("u1") == []
