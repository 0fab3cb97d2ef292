"""SQLAlchemy implementation of AnswerRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select

from src.domain.models.courses import Answer as DomainAnswer
from src.domain.models.courses import AnswerCreate
from src.domain.models.identity import Actor
from src.domain.repositories.answers import AnswerRepository
from src.infrastructure.persistence.models.courses import TaskAnswer as OrmAnswer

from .base import SqlRepository


class SqlAnswerRepository(SqlRepository[DomainAnswer, AnswerCreate], AnswerRepository):
    orm = OrmAnswer

    @staticmethod
    def _to_domain(row: OrmAnswer) -> DomainAnswer:
        return DomainAnswer(
            id=row.id,
            task_id=row.task_id,
            answer_text=row.answer_text,
            image=row.image,
            is_correct=row.is_correct,
        )

    def _new_row(self, id: UUID, payload: AnswerCreate) -> OrmAnswer:
        return OrmAnswer(
            id=id,
            task_id=payload.task_id,
            answer_text=payload.answer_text,
            image=payload.image,
            is_correct=bool(payload.is_correct),
        )

    def _apply(self, row: OrmAnswer, payload: AnswerCreate) -> None:
        row.task_id = payload.task_id
        row.answer_text = payload.answer_text
        row.image = payload.image
        row.is_correct = bool(payload.is_correct)

    async def find_all_by_task(self, actor: Actor, task_id: UUID) -> list[DomainAnswer]:
        stmt = select(OrmAnswer).where(OrmAnswer.task_id == task_id)
        async with self._mm.session() as session:
            result = await session.execute(stmt)
            return [self._to_domain(row) for row in result.scalars()]
