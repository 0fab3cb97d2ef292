"""Module repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from src.domain.models.courses import Module, ModuleCreate, ModuleWithLessons
from src.domain.models.identity import Actor

from .access import HasOwner
from .base import Repository


class ModuleRepository(Repository[Module, ModuleCreate, UUID], HasOwner[Module]):
    """Read/write interface for course Modules.

    A module owns itself.  list() and all() order by order_index.
    """

    entity = Module

    async def owner_of(self, entity: Module, actor: Actor) -> UUID:
        return entity.id

    @abstractmethod
    async def all(self, actor: Actor) -> list[Module]:
        """Return every module ordered by order_index."""

    @abstractmethod
    async def with_lessons(self, actor: Actor) -> list[ModuleWithLessons]:
        """Return every module with its lesson headers and the actor's completion flags."""
