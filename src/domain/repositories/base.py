"""Generic repository base interface.

Repository[T, C, V] is the root abstraction for all data-access interfaces in
this domain layer.  Concrete implementations live in
src/infrastructure/persistence/ and are wired at the application boundary via
dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the domain model type (never an ORM row or DTO), C the create/update
    payload type and V the identifier type.
  - Every method takes the acting Actor, even where an implementation ignores
    it, so authorization layers compose with a uniform signature.  The
    contract itself never enforces access control; see access.check_access.
  - update() replaces every mutable field from the payload; it is not a patch.
  - Append-only entity kinds raise NotImplementedError from update().
  - page() is derived from list() and count() and is never overridden.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.domain.models.base import resource_type_of
from src.domain.models.enums import ResourceType
from src.domain.models.identity import Actor
from src.domain.models.page import Page

T = TypeVar("T")
C = TypeVar("C")
V = TypeVar("V")


class Repository(ABC, Generic[T, C, V]):
    """Abstract CRUD interface for one entity kind."""

    # Domain model class served by this repository; used for diagnostics.
    entity: type[T]

    @property
    def resource_type(self) -> ResourceType:
        return resource_type_of(self.entity)

    @abstractmethod
    async def create(self, actor: Actor, payload: C) -> T:
        """Allocate a fresh identifier, persist the entity and return it."""

    @abstractmethod
    async def update(self, entity: T, actor: Actor, payload: C) -> T:
        """Replace all mutable fields of an existing entity and return the new version."""

    @abstractmethod
    async def delete(self, entity: T, actor: Actor) -> None:
        """Remove the entity.  Deleting an already-removed entity is a silent no-op."""

    @abstractmethod
    async def find_by_id(self, actor: Actor, id: V) -> T | None:
        """Return the entity with the given identifier, or None if not found."""

    @abstractmethod
    async def list(self, actor: Actor, limit: int = 50, offset: int = 0) -> list[T]:
        """Return up to limit entities starting at offset, in storage order."""

    @abstractmethod
    async def count(self, actor: Actor) -> int:
        """Return the number of entities (globally unless the kind documents otherwise)."""

    async def page(self, actor: Actor, limit: int = 50, offset: int = 0) -> Page[T]:
        """Return one page of entities together with the total count.

        list() and count() run as independent queries; under concurrent
        writes total and items may disagree.
        """
        if limit < 0 or offset < 0:
            raise ValueError(f"limit and offset must be non-negative, got {limit}/{offset}")
        items = await self.list(actor, limit=limit, offset=offset)
        total = await self.count(actor)
        return Page(items=items, total=total, limit=limit, offset=offset)
