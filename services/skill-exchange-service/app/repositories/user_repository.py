"""User profile repository."""

from app.domain.entities import User, UserCreate, UserUpdate

from .base import InMemoryRepository


class UserRepository(InMemoryRepository[User]):
    """
    Repository for user profiles.

    New users start with a 5.0 rating and a zero credit balance, and
    ``joined_date`` is their creation timestamp.
    """

    entity_name = "User"
    entity_model = User
    create_model = UserCreate
    update_model = UserUpdate
    timestamp_field = "joined_date"
    create_defaults = {"rating": 5.0, "credit_balance": 0}
