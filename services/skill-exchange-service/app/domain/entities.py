"""
Domain entities for the skill exchange.

Each collection has three models:
- ``<Entity>Create``: the fields a caller supplies when creating a record
- ``<Entity>``: the stored record (create fields plus id and creation timestamp)
- ``<Entity>Update``: every mutable field optional, only explicitly set
  fields are merged onto the stored record
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SkillType(str, Enum):
    """Direction of a skill listing."""

    OFFER = "offer"
    REQUEST = "request"


class SkillCategory(str, Enum):
    """Browseable skill categories."""

    TECHNOLOGY = "Technology"
    MUSIC = "Music"
    COOKING = "Cooking"
    LANGUAGE = "Language"
    ARTS = "Arts"
    SPORTS = "Sports"
    OTHER = "Other"


class SkillLevel(str, Enum):
    """Proficiency levels."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class MatchStatus(str, Enum):
    """Match states. Any state may be set from any other."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class SessionStatus(str, Enum):
    """Session states. Any state may be set from any other."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class TransactionType(str, Enum):
    """Ledger entry direction from the point of view of the entry's owner."""

    EARNED = "earned"
    SPENT = "spent"


class _Payload(BaseModel):
    """Base for create/update payloads: unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


# Skills


class SkillCreate(_Payload):
    """Fields supplied when listing a skill."""

    user_id: str
    type: SkillType
    title: str = Field(..., min_length=1)
    description: str = ""
    category: SkillCategory = SkillCategory.OTHER
    level: SkillLevel = SkillLevel.BEGINNER
    availability: List[str] = Field(default_factory=list)


class Skill(SkillCreate):
    """A teachable or learnable capability listed by a user."""

    model_config = ConfigDict(extra="ignore")

    id: str
    created_at: datetime


class SkillUpdate(_Payload):
    user_id: Optional[str] = None
    type: Optional[SkillType] = None
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[SkillCategory] = None
    level: Optional[SkillLevel] = None
    availability: Optional[List[str]] = None


# Users


class UserCreate(_Payload):
    """
    Fields supplied when registering a user profile.

    ``rating`` and ``credit_balance`` are accepted but replaced by the
    starting values when the user is created.
    """

    name: str = Field(..., min_length=1)
    email: str
    location: str = ""
    bio: str = ""
    rating: Optional[float] = None
    credit_balance: Optional[int] = None


class User(UserCreate):
    """
    A community member.

    ``credit_balance`` has no floor and may go negative.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    rating: float = Field(default=5.0, ge=0, le=5)
    credit_balance: int = 0
    joined_date: datetime


class UserUpdate(_Payload):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    credit_balance: Optional[int] = None


# Matches


class MatchCreate(_Payload):
    """Fields supplied when proposing a match between a skill and a learner."""

    skill_id: str
    teacher_id: str
    learner_id: str
    status: MatchStatus = MatchStatus.PENDING
    compatibility_score: int = Field(..., ge=0, le=100)


class Match(MatchCreate):
    """
    A proposed pairing of a skill offer with a learner.

    skill_id, teacher_id and learner_id are not checked against the other
    collections and may dangle.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    created_at: datetime


class MatchUpdate(_Payload):
    skill_id: Optional[str] = None
    teacher_id: Optional[str] = None
    learner_id: Optional[str] = None
    status: Optional[MatchStatus] = None
    compatibility_score: Optional[int] = Field(None, ge=0, le=100)


# Sessions


class SessionCreate(_Payload):
    """Fields supplied when scheduling a session."""

    match_id: str
    participant_id: str
    scheduled_at: datetime
    duration: int = Field(..., gt=0, description="Length in minutes")
    title: str = ""
    location: str = ""
    status: SessionStatus = SessionStatus.PENDING


class Session(SessionCreate):
    """A scheduled meeting for a match."""

    model_config = ConfigDict(extra="ignore")

    id: str
    created_at: datetime


class SessionUpdate(_Payload):
    match_id: Optional[str] = None
    participant_id: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    duration: Optional[int] = Field(None, gt=0)
    title: Optional[str] = None
    location: Optional[str] = None
    status: Optional[SessionStatus] = None


# Transactions


class TransactionCreate(_Payload):
    """
    Fields supplied when recording a ledger entry.

    An entry names either both parties (from_user_id and to_user_id) or a
    direction and amount (type and amount), or both.
    """

    type: Optional[TransactionType] = None
    amount: Optional[int] = Field(None, gt=0)
    from_user_id: Optional[str] = None
    to_user_id: Optional[str] = None
    description: str = ""

    @model_validator(mode="after")
    def check_shape(self):
        has_parties = self.from_user_id is not None and self.to_user_id is not None
        has_amount = self.type is not None and self.amount is not None
        if not (has_parties or has_amount):
            raise ValueError(
                "Transaction needs from_user_id and to_user_id, or type and amount"
            )
        return self


class Transaction(TransactionCreate):
    """A credit-ledger entry recording value exchanged between users."""

    model_config = ConfigDict(extra="ignore")

    id: str
    timestamp: datetime


class TransactionUpdate(_Payload):
    type: Optional[TransactionType] = None
    amount: Optional[int] = Field(None, gt=0)
    from_user_id: Optional[str] = None
    to_user_id: Optional[str] = None
    description: Optional[str] = None
