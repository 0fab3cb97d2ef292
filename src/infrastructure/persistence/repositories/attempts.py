"""SQLAlchemy implementation of UserTaskAttemptRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select

from src.domain.models.identity import Actor
from src.domain.models.progress import UserTaskAttempt as DomainAttempt
from src.domain.models.progress import UserTaskAttemptCreate
from src.domain.repositories.attempts import UserTaskAttemptRepository
from src.infrastructure.persistence.models.progress import UserTaskAttempt as OrmAttempt

from .base import SqlRepository


class SqlUserTaskAttemptRepository(
    SqlRepository[DomainAttempt, UserTaskAttemptCreate], UserTaskAttemptRepository
):
    orm = OrmAttempt

    @staticmethod
    def _to_domain(row: OrmAttempt) -> DomainAttempt:
        return DomainAttempt(
            id=row.id,
            user_id=row.user_id,
            task_id=row.task_id,
            selected_answer_id=row.selected_answer_id,
            is_correct=row.is_correct,
        )

    def _new_row(self, id: UUID, payload: UserTaskAttemptCreate) -> OrmAttempt:
        return OrmAttempt(
            id=id,
            user_id=payload.user_id,
            task_id=payload.task_id,
            selected_answer_id=payload.selected_answer_id,
            is_correct=payload.is_correct,
        )

    def _apply(self, row: OrmAttempt, payload: UserTaskAttemptCreate) -> None:
        row.user_id = payload.user_id
        row.task_id = payload.task_id
        row.selected_answer_id = payload.selected_answer_id
        row.is_correct = payload.is_correct

    def _count_scope(self, actor: Actor) -> tuple:
        return (OrmAttempt.user_id == actor.user_id,)

    async def count_correct(self, actor: Actor) -> int:
        stmt = select(func.count()).select_from(OrmAttempt).where(
            OrmAttempt.user_id == actor.user_id,
            OrmAttempt.is_correct.is_(True),
        )
        async with self._mm.session() as session:
            result = await session.execute(stmt)
            return result.scalar_one()
