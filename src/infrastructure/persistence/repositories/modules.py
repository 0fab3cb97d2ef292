"""SQLAlchemy implementation of ModuleRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import and_, select

from src.domain.models.courses import LessonSummary, ModuleCreate, ModuleWithLessons
from src.domain.models.courses import Module as DomainModule
from src.domain.models.enums import ProgressStatus
from src.domain.models.identity import Actor
from src.domain.repositories.modules import ModuleRepository
from src.infrastructure.persistence.models.courses import Lesson as OrmLesson
from src.infrastructure.persistence.models.courses import Module as OrmModule
from src.infrastructure.persistence.models.progress import UserProgress as OrmProgress

from .base import SqlRepository


class SqlModuleRepository(SqlRepository[DomainModule, ModuleCreate], ModuleRepository):
    orm = OrmModule

    @staticmethod
    def _to_domain(row: OrmModule) -> DomainModule:
        return DomainModule(
            id=row.id,
            title=row.title,
            description=row.description,
            order_index=row.order_index,
        )

    def _new_row(self, id: UUID, payload: ModuleCreate) -> OrmModule:
        return OrmModule(
            id=id,
            title=payload.title,
            description=payload.description,
            order_index=payload.order_index if payload.order_index is not None else 0,
        )

    def _apply(self, row: OrmModule, payload: ModuleCreate) -> None:
        row.title = payload.title
        row.description = payload.description
        row.order_index = payload.order_index if payload.order_index is not None else 0

    def _order_by(self) -> tuple:
        return (OrmModule.order_index,)

    async def all(self, actor: Actor) -> list[DomainModule]:
        stmt = select(OrmModule).order_by(OrmModule.order_index)
        async with self._mm.session() as session:
            result = await session.execute(stmt)
            return [self._to_domain(row) for row in result.scalars()]

    async def with_lessons(self, actor: Actor) -> list[ModuleWithLessons]:
        modules_stmt = select(OrmModule).order_by(OrmModule.order_index)
        # One row per lesson; status is NULL when the actor has no progress record.
        lessons_stmt = (
            select(OrmLesson.id, OrmLesson.module_id, OrmLesson.title, OrmProgress.status)
            .outerjoin(
                OrmProgress,
                and_(OrmProgress.lesson_id == OrmLesson.id, OrmProgress.user_id == actor.user_id),
            )
            .order_by(OrmLesson.order_index)
        )
        async with self._mm.session() as session:
            modules = (await session.execute(modules_stmt)).scalars().all()
            lesson_rows = (await session.execute(lessons_stmt)).all()

        by_module: dict[UUID, dict[UUID, LessonSummary]] = {}
        for lesson_id, module_id, title, status in lesson_rows:
            lessons = by_module.setdefault(module_id, {})
            completed = status == ProgressStatus.DONE.value
            seen = lessons.get(lesson_id)
            # Several progress rows per lesson are possible; any "done" wins.
            if seen is None or (completed and not seen.completed):
                lessons[lesson_id] = LessonSummary(id=lesson_id, title=title, completed=completed)

        return [
            ModuleWithLessons(
                id=row.id,
                title=row.title,
                description=row.description,
                order_index=row.order_index,
                lessons=list(by_module.get(row.id, {}).values()),
            )
            for row in modules
        ]
