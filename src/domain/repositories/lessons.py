"""Lesson repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from src.domain.models.courses import Lesson, LessonCreate, LessonWithStatus
from src.domain.models.identity import Actor

from .access import HasOwner
from .base import Repository


class LessonRepository(Repository[Lesson, LessonCreate, UUID], HasOwner[Lesson]):
    """Read/write interface for Lessons.

    A lesson is owned by its parent module.  Completion status is always
    relative to the acting user.
    """

    entity = Lesson

    async def owner_of(self, entity: Lesson, actor: Actor) -> UUID:
        return entity.module_id

    @abstractmethod
    async def all_by_module(self, actor: Actor, module_id: UUID) -> list[Lesson]:
        """Return the module's lessons ordered by order_index."""

    @abstractmethod
    async def find_with_status(self, actor: Actor, lesson_id: UUID) -> LessonWithStatus | None:
        """Return the lesson with the actor's completion flag, or None."""

    @abstractmethod
    async def find_next_uncompleted(
        self, actor: Actor, lesson_id: UUID
    ) -> LessonWithStatus | None:
        """Return the next lesson of the same module the actor has not completed.

        "Next" means the smallest order_index greater than the given lesson's.
        Returns None when there is no such lesson.
        """
