"""Task repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from src.domain.models.courses import Task, TaskCreate
from src.domain.models.identity import Actor

from .access import HasOwner
from .base import Repository


class TaskRepository(Repository[Task, TaskCreate, UUID], HasOwner[Task]):
    """Read/write interface for quiz Tasks.  A task is owned by its lesson."""

    entity = Task

    async def owner_of(self, entity: Task, actor: Actor) -> UUID:
        return entity.lesson_id

    @abstractmethod
    async def find_all_by_lesson(self, actor: Actor, lesson_id: UUID) -> list[Task]:
        """Return every task attached to the lesson."""
