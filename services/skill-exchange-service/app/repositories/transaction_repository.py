"""Credit ledger repository."""

from typing import List

from app.domain.entities import Transaction, TransactionCreate, TransactionUpdate

from .base import InMemoryRepository


class TransactionRepository(InMemoryRepository[Transaction]):
    """Repository for credit ledger entries. ``timestamp`` is set on create."""

    entity_name = "Transaction"
    entity_model = Transaction
    create_model = TransactionCreate
    update_model = TransactionUpdate
    timestamp_field = "timestamp"

    async def get_by_user_id(self, user_id: str) -> List[Transaction]:
        """Get entries where the user is payer or payee, in collection order."""
        return await self._filter(
            lambda entry: entry.from_user_id == user_id or entry.to_user_id == user_id
        )
