"""SQLAlchemy implementation of ProgressTokenRepository."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import delete, select

from src.domain.models.identity import Actor
from src.domain.models.progress import ProgressToken as DomainToken
from src.domain.models.progress import ProgressTokenCreate
from src.domain.repositories.tokens import ProgressTokenRepository
from src.infrastructure.persistence.models.progress import ProgressToken as OrmToken

from .base import SqlRepository

logger = logging.getLogger(__name__)


class SqlProgressTokenRepository(
    SqlRepository[DomainToken, ProgressTokenCreate], ProgressTokenRepository
):
    orm = OrmToken

    @staticmethod
    def _to_domain(row: OrmToken) -> DomainToken:
        return DomainToken(
            id=row.id,
            token=row.token,
            user_id=row.user_id,
            expires_at=row.expires_at,
            created_at=row.created_at or datetime.now(timezone.utc),
        )

    def _new_row(self, id: UUID, payload: ProgressTokenCreate) -> OrmToken:
        return OrmToken(
            id=id,
            token=payload.token,
            user_id=payload.user_id,
            expires_at=payload.expires_at,
            created_at=datetime.now(timezone.utc),
        )

    def _apply(self, row: OrmToken, payload: ProgressTokenCreate) -> None:
        raise NotImplementedError("Progress tokens are append-only")

    async def update(
        self, entity: DomainToken, actor: Actor, payload: ProgressTokenCreate
    ) -> DomainToken:
        raise NotImplementedError("Progress tokens are append-only")

    async def find_by_token(self, actor: Actor, token: str) -> DomainToken | None:
        stmt = select(OrmToken).where(OrmToken.token == token)
        async with self._mm.session() as session:
            result = await session.execute(stmt)
            row = result.scalar_one_or_none()
            return self._to_domain(row) if row else None

    async def cleanup_expired(self, actor: Actor) -> int:
        stmt = delete(OrmToken).where(OrmToken.expires_at < datetime.now(timezone.utc))
        async with self._mm.session() as session:
            result = await session.execute(stmt)
        removed = result.rowcount or 0
        logger.info("Cleaned up %d expired progress tokens", removed)
        return removed
