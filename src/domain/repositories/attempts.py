"""User task attempt repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from src.domain.models.identity import Actor
from src.domain.models.progress import UserTaskAttempt, UserTaskAttemptCreate

from .access import HasOwner
from .base import Repository


class UserTaskAttemptRepository(
    Repository[UserTaskAttempt, UserTaskAttemptCreate, UUID], HasOwner[UserTaskAttempt]
):
    """Read/write interface for answer attempts.

    Unlike every other kind, count() is scoped to the acting user's own
    attempts rather than the whole table.
    """

    entity = UserTaskAttempt

    async def owner_of(self, entity: UserTaskAttempt, actor: Actor) -> UUID:
        return entity.user_id

    @abstractmethod
    async def count(self, actor: Actor) -> int:
        """Return the number of attempts made by the acting user."""

    @abstractmethod
    async def count_correct(self, actor: Actor) -> int:
        """Return the number of correct attempts made by the acting user."""
