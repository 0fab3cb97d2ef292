"""Answer repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from src.domain.models.courses import Answer, AnswerCreate
from src.domain.models.identity import Actor

from .access import HasOwner
from .base import Repository


class AnswerRepository(Repository[Answer, AnswerCreate, UUID], HasOwner[Answer]):
    """Read/write interface for task Answers.  An answer is owned by its task."""

    entity = Answer

    async def owner_of(self, entity: Answer, actor: Actor) -> UUID:
        return entity.task_id

    @abstractmethod
    async def find_all_by_task(self, actor: Actor, task_id: UUID) -> list[Answer]:
        """Return every candidate answer of the task."""
