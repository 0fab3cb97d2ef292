"""SQLAlchemy implementation of UserProgressRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select

from src.domain.models.enums import ProgressStatus
from src.domain.models.identity import Actor
from src.domain.models.progress import UserProgress as DomainProgress
from src.domain.models.progress import UserProgressCreate
from src.domain.repositories.progress import UserProgressRepository
from src.infrastructure.persistence.models.progress import UserProgress as OrmProgress

from .base import SqlRepository


class SqlUserProgressRepository(
    SqlRepository[DomainProgress, UserProgressCreate], UserProgressRepository
):
    orm = OrmProgress

    @staticmethod
    def _to_domain(row: OrmProgress) -> DomainProgress:
        return DomainProgress(
            id=row.id,
            user_id=row.user_id,
            lesson_id=row.lesson_id,
            status=ProgressStatus(row.status),
        )

    def _new_row(self, id: UUID, payload: UserProgressCreate) -> OrmProgress:
        return OrmProgress(
            id=id,
            user_id=payload.user_id,
            lesson_id=payload.lesson_id,
            status=payload.status.value,
        )

    def _apply(self, row: OrmProgress, payload: UserProgressCreate) -> None:
        row.user_id = payload.user_id
        row.lesson_id = payload.lesson_id
        row.status = payload.status.value

    async def find_for_lesson(
        self, actor: Actor, user_id: UUID, lesson_id: UUID
    ) -> DomainProgress | None:
        stmt = (
            select(OrmProgress)
            .where(OrmProgress.user_id == user_id, OrmProgress.lesson_id == lesson_id)
            .limit(1)
        )
        async with self._mm.session() as session:
            result = await session.execute(stmt)
            row = result.scalar_one_or_none()
            return self._to_domain(row) if row else None

    async def count_completed(self, actor: Actor) -> int:
        stmt = select(func.count()).select_from(OrmProgress).where(
            OrmProgress.user_id == actor.user_id,
            OrmProgress.status == ProgressStatus.DONE.value,
        )
        async with self._mm.session() as session:
            result = await session.execute(stmt)
            return result.scalar_one()
