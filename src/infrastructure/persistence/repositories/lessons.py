"""SQLAlchemy implementation of LessonRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select

from src.domain.models.courses import Lesson as DomainLesson
from src.domain.models.courses import LessonCreate, LessonWithStatus
from src.domain.models.enums import ProgressStatus
from src.domain.models.identity import Actor
from src.domain.repositories.lessons import LessonRepository
from src.infrastructure.persistence.models.courses import Lesson as OrmLesson
from src.infrastructure.persistence.models.progress import UserProgress as OrmProgress

from .base import SqlRepository


def _completed_by(actor: Actor):
    """Correlated EXISTS: the actor has a 'done' progress row for the outer lesson."""
    return (
        select(OrmProgress.id)
        .where(
            OrmProgress.lesson_id == OrmLesson.id,
            OrmProgress.user_id == actor.user_id,
            OrmProgress.status == ProgressStatus.DONE.value,
        )
        .exists()
    )


def _with_status(row: OrmLesson, completed: bool) -> LessonWithStatus:
    return LessonWithStatus(
        id=row.id,
        module_id=row.module_id,
        title=row.title,
        content=row.content,
        order_index=row.order_index,
        completed=bool(completed),
    )


class SqlLessonRepository(SqlRepository[DomainLesson, LessonCreate], LessonRepository):
    orm = OrmLesson

    @staticmethod
    def _to_domain(row: OrmLesson) -> DomainLesson:
        return DomainLesson(
            id=row.id,
            module_id=row.module_id,
            title=row.title,
            content=row.content,
            order_index=row.order_index,
        )

    def _new_row(self, id: UUID, payload: LessonCreate) -> OrmLesson:
        return OrmLesson(
            id=id,
            module_id=payload.module_id,
            title=payload.title,
            content=payload.content,
            order_index=payload.order_index if payload.order_index is not None else 0,
        )

    def _apply(self, row: OrmLesson, payload: LessonCreate) -> None:
        row.module_id = payload.module_id
        row.title = payload.title
        row.content = payload.content
        row.order_index = payload.order_index if payload.order_index is not None else 0

    def _order_by(self) -> tuple:
        return (OrmLesson.order_index,)

    async def all_by_module(self, actor: Actor, module_id: UUID) -> list[DomainLesson]:
        stmt = (
            select(OrmLesson)
            .where(OrmLesson.module_id == module_id)
            .order_by(OrmLesson.order_index)
        )
        async with self._mm.session() as session:
            result = await session.execute(stmt)
            return [self._to_domain(row) for row in result.scalars()]

    async def find_with_status(self, actor: Actor, lesson_id: UUID) -> LessonWithStatus | None:
        stmt = select(OrmLesson, _completed_by(actor).label("completed")).where(
            OrmLesson.id == lesson_id
        )
        async with self._mm.session() as session:
            result = await session.execute(stmt)
            found = result.one_or_none()
        if found is None:
            return None
        row, completed = found
        return _with_status(row, completed)

    async def find_next_uncompleted(
        self, actor: Actor, lesson_id: UUID
    ) -> LessonWithStatus | None:
        async with self._mm.session() as session:
            current = (
                await session.execute(select(OrmLesson).where(OrmLesson.id == lesson_id))
            ).scalar_one_or_none()
            if current is None:
                return None
            stmt = (
                select(OrmLesson)
                .where(
                    OrmLesson.module_id == current.module_id,
                    OrmLesson.order_index > current.order_index,
                    ~_completed_by(actor),
                )
                .order_by(OrmLesson.order_index)
                .limit(1)
            )
            row = (await session.execute(stmt)).scalar_one_or_none()
        return _with_status(row, False) if row else None
