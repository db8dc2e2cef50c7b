"""
Custom exceptions for the skill exchange domain.

These exceptions represent domain-level errors and are independent
of whatever layer ends up reporting them to a user.
"""

from typing import Any, Optional


class SkillExchangeException(Exception):
    """Base exception for all skill exchange errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundException(SkillExchangeException):
    """Raised when a record cannot be located by its id."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            message=f"{entity} not found: {entity_id}",
            details={"entity": entity, "id": entity_id},
        )


class ValidationException(SkillExchangeException):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )
