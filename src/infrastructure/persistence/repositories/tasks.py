"""SQLAlchemy implementation of TaskRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select

from src.domain.models.courses import Task as DomainTask
from src.domain.models.courses import TaskCreate
from src.domain.models.enums import TaskType
from src.domain.models.identity import Actor
from src.domain.repositories.tasks import TaskRepository
from src.infrastructure.persistence.models.courses import Task as OrmTask

from .base import SqlRepository


class SqlTaskRepository(SqlRepository[DomainTask, TaskCreate], TaskRepository):
    orm = OrmTask

    @staticmethod
    def _to_domain(row: OrmTask) -> DomainTask:
        return DomainTask(
            id=row.id,
            lesson_id=row.lesson_id,
            task_type=TaskType(row.task_type),
            question=row.question,
            explanation=row.explanation,
        )

    def _new_row(self, id: UUID, payload: TaskCreate) -> OrmTask:
        return OrmTask(
            id=id,
            lesson_id=payload.lesson_id,
            task_type=payload.task_type.value,
            question=payload.question,
            explanation=payload.explanation,
        )

    def _apply(self, row: OrmTask, payload: TaskCreate) -> None:
        row.lesson_id = payload.lesson_id
        row.task_type = payload.task_type.value
        row.question = payload.question
        row.explanation = payload.explanation

    async def find_all_by_lesson(self, actor: Actor, lesson_id: UUID) -> list[DomainTask]:
        stmt = select(OrmTask).where(OrmTask.lesson_id == lesson_id)
        async with self._mm.session() as session:
            result = await session.execute(stmt)
            return [self._to_domain(row) for row in result.scalars()]
