"""Progress token repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from src.domain.models.identity import Actor
from src.domain.models.progress import ProgressToken, ProgressTokenCreate

from .access import HasOwner
from .base import Repository


class ProgressTokenRepository(
    Repository[ProgressToken, ProgressTokenCreate, UUID], HasOwner[ProgressToken]
):
    """Read/write interface for progress share tokens.

    Tokens are append-only: update() is unsupported.
    """

    entity = ProgressToken

    async def owner_of(self, entity: ProgressToken, actor: Actor) -> UUID:
        return entity.user_id

    async def update(
        self, entity: ProgressToken, actor: Actor, payload: ProgressTokenCreate
    ) -> ProgressToken:
        raise NotImplementedError("Progress tokens are never updated")

    @abstractmethod
    async def find_by_token(self, actor: Actor, token: str) -> ProgressToken | None:
        """Return the token record with the given token string, or None."""

    @abstractmethod
    async def cleanup_expired(self, actor: Actor) -> int:
        """Delete every expired token and return how many were removed."""
