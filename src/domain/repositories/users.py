"""User repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from src.domain.models.identity import Actor
from src.domain.models.users import User, UserCreateUpdate

from .access import HasOwner
from .base import Repository


class UserRepository(Repository[User, UserCreateUpdate, UUID], HasOwner[User]):
    """Read/write interface for User accounts.

    create() always assigns UserRole.USER.  update() replaces the username and
    keeps the stored password hash when the payload does not provide one.
    """

    entity = User

    async def owner_of(self, entity: User, actor: Actor) -> UUID:
        return entity.id

    @abstractmethod
    async def find_by_username(self, actor: Actor, username: str) -> User | None:
        """Return the user with the given username, or None."""
