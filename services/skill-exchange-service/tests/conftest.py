"""
Test configuration and fixtures
"""

import itertools
from datetime import datetime, timezone

import pytest

from app.config import Settings
from app.dependencies import create_repositories
from app.services.exchange_service import SkillExchangeService


@pytest.fixture
def test_settings():
    """Settings with simulated latency switched off"""
    return Settings(SIMULATED_LATENCY_ENABLED=False)


@pytest.fixture
def id_factory():
    """Deterministic id generator: new-1, new-2, ..."""
    counter = itertools.count(1)
    return lambda: f"new-{next(counter)}"


@pytest.fixture
def repositories(test_settings, id_factory):
    """Fresh repositories seeded from the bundled datasets"""
    return create_repositories(settings=test_settings, id_factory=id_factory)


@pytest.fixture
def exchange_service(repositories, test_settings):
    """Exchange service with a fixed compatibility score"""
    return SkillExchangeService(
        repositories, settings=test_settings, scorer=lambda skill, learner_id: 88
    )


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same instant"""
    instant = datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc)
    return lambda: instant


@pytest.fixture
def sample_skill_payload():
    """Payload for a new guitar offer"""
    return {
        "user_id": "u1",
        "type": "offer",
        "title": "Guitar",
        "description": "Fingerstyle for beginners",
        "category": "Music",
        "level": "Intermediate",
        "availability": ["Weekday evenings"],
    }


@pytest.fixture
def three_skills():
    """Three skill records, exactly one in the Music category"""
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        {
            "id": "s1",
            "user_id": "u1",
            "type": "offer",
            "title": "Python",
            "category": "Technology",
            "level": "Advanced",
            "created_at": created,
        },
        {
            "id": "s2",
            "user_id": "u2",
            "type": "offer",
            "title": "Piano",
            "category": "Music",
            "level": "Expert",
            "created_at": created,
        },
        {
            "id": "s3",
            "user_id": "u1",
            "type": "request",
            "title": "Pasta",
            "category": "Cooking",
            "level": "Beginner",
            "created_at": created,
        },
    ]
