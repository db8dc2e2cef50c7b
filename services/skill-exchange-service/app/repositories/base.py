"""
Repository interface and the shared in-memory implementation.

Every collection exposes the same contract: get_all, get_by_id, create,
update and delete, plus collection-specific filters. Each repository owns
its own ordered list of records; nothing is shared between repositories
and no references across collections are checked.
"""

import asyncio
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import (Any, Callable, ClassVar, Dict, Generic, Iterable, List, Mapping,
                    Optional, Type, TypeVar, Union)

import structlog
from pydantic import BaseModel

from app.config import Settings
from app.config import settings as default_settings
from app.domain.exceptions import EntityNotFoundException

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

Payload = Union[BaseModel, Mapping[str, Any]]


def new_record_id() -> str:
    """Generate a collision-resistant record id."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class IRepository(ABC, Generic[T]):
    """
    Abstract repository interface for a single entity collection.

    Enables consumers to depend on the contract rather than on the
    in-memory implementation.
    """

    @abstractmethod
    async def get_all(self) -> List[T]:
        """
        Get every record in collection order.

        Returns:
            Copies of all records
        """
        pass

    @abstractmethod
    async def get_by_id(self, record_id: str) -> T:
        """
        Get a record by id.

        Raises:
            EntityNotFoundException: If no record has this id
        """
        pass

    @abstractmethod
    async def create(self, payload: Payload) -> T:
        """
        Create a record with a fresh id and creation timestamp.

        Returns:
            Copy of the stored record
        """
        pass

    @abstractmethod
    async def update(self, record_id: str, changes: Payload) -> T:
        """
        Merge the supplied fields onto an existing record.

        Raises:
            EntityNotFoundException: If no record has this id
        """
        pass

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """
        Remove a record.

        Raises:
            EntityNotFoundException: If no record has this id
        """
        pass


class InMemoryRepository(IRepository[T]):
    """
    List-backed repository with simulated network latency.

    Subclasses set the model classes and entity name, and add their
    filter operations on top of ``_filter``.

    Attributes:
        settings: Service settings (latency profile, cache options)
    """

    entity_name: ClassVar[str] = "Record"
    entity_model: ClassVar[Type[BaseModel]]
    create_model: ClassVar[Type[BaseModel]]
    update_model: ClassVar[Type[BaseModel]]
    timestamp_field: ClassVar[str] = "created_at"
    create_defaults: ClassVar[Dict[str, Any]] = {}

    def __init__(
        self,
        records: Optional[Iterable[Payload]] = None,
        settings: Optional[Settings] = None,
        id_factory: Callable[[], str] = new_record_id,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialize repository.

        Args:
            records: Initial records (entity models or mappings), in order.
                Each is parsed through the entity model: malformed records
                raise ValidationError and unknown fields are dropped.
            settings: Settings to use instead of the module-level defaults
            id_factory: Callable producing ids for new records
            clock: Callable producing creation timestamps
        """
        self.settings = settings or default_settings
        self._id_factory = id_factory
        self._clock = clock
        self._records: List[T] = [
            self._copy(self._to_entity(record)) for record in records or []
        ]

    # Contract

    async def get_all(self) -> List[T]:
        await self._simulate_latency("get_all")
        return [self._copy(record) for record in self._records]

    async def get_by_id(self, record_id: str) -> T:
        await self._simulate_latency("get_by_id")
        index = self._index_of(record_id)
        return self._copy(self._records[index])

    async def create(self, payload: Payload) -> T:
        await self._simulate_latency("create")
        data = self._validate(self.create_model, payload).model_dump()
        data.update(self.create_defaults)
        data["id"] = self._id_factory()
        data[self.timestamp_field] = self._clock()

        record = self._to_entity(data)
        self._records.append(record)
        logger.info(f"{self.entity_name} created", id=data["id"])

        self._on_write(record)
        return self._copy(record)

    async def update(self, record_id: str, changes: Payload) -> T:
        await self._simulate_latency("update")
        index = self._index_of(record_id)
        fields = self._validate(self.update_model, changes).model_dump(exclude_unset=True)

        current = self._records[index]
        record = self._to_entity({**current.model_dump(), **fields})
        self._records[index] = record
        logger.info(f"{self.entity_name} updated", id=record_id, fields=sorted(fields))

        self._on_write(current, record)
        return self._copy(record)

    async def delete(self, record_id: str) -> bool:
        await self._simulate_latency("delete")
        index = self._index_of(record_id)
        record = self._records.pop(index)
        logger.info(f"{self.entity_name} deleted", id=record_id)

        self._on_write(record)
        return True

    # Helpers

    async def _filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Linear scan returning copies of matching records in collection order."""
        await self._simulate_latency("filter")
        return [self._copy(record) for record in self._records if predicate(record)]

    def _on_write(self, *records: T) -> None:
        """Hook called after every create, update and delete."""

    async def _simulate_latency(self, operation: str) -> None:
        if not self.settings.SIMULATED_LATENCY_ENABLED:
            return
        delay_ms = self.settings.latency_profile.get(operation, 0)
        if delay_ms:
            await asyncio.sleep(delay_ms / 1000)

    def _index_of(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:  # type: ignore[attr-defined]
                return index
        logger.warning(f"{self.entity_name} not found", id=record_id)
        raise EntityNotFoundException(self.entity_name, record_id)

    def _to_entity(self, record: Payload) -> T:
        return self._validate(self.entity_model, record)  # type: ignore[return-value]

    @staticmethod
    def _validate(model: Type[BaseModel], payload: Payload) -> BaseModel:
        if isinstance(payload, model):
            return payload
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(exclude_unset=True)
        return model.model_validate(payload)

    @staticmethod
    def _copy(record: T) -> T:
        return record.model_copy(deep=True)
