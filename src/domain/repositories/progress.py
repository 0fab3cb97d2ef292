"""User progress repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from src.domain.models.identity import Actor
from src.domain.models.progress import UserProgress, UserProgressCreate

from .access import HasOwner
from .base import Repository


class UserProgressRepository(
    Repository[UserProgress, UserProgressCreate, UUID], HasOwner[UserProgress]
):
    """Read/write interface for per-lesson progress records.

    count() is global; count_completed() is scoped to the acting user.
    """

    entity = UserProgress

    async def owner_of(self, entity: UserProgress, actor: Actor) -> UUID:
        return entity.user_id

    @abstractmethod
    async def find_for_lesson(
        self, actor: Actor, user_id: UUID, lesson_id: UUID
    ) -> UserProgress | None:
        """Return the user's progress record for the lesson, or None."""

    @abstractmethod
    async def count_completed(self, actor: Actor) -> int:
        """Return how many lessons the acting user has marked done."""
