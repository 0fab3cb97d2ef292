"""Course content ORM models: modules, lessons, tasks, task_answers.

Child rows cascade on parent delete at the database level
(ON DELETE CASCADE), so relationships use passive_deletes.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, Integer, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.database import Base


class Module(Base):
    __tablename__ = "modules"
    __table_args__ = (Index("idx_modules_order_index", "order_index"),)

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    lessons: Mapped[list["Lesson"]] = relationship(
        back_populates="module", passive_deletes=True
    )


class Lesson(Base):
    __tablename__ = "lessons"
    __table_args__ = (
        Index("idx_lessons_module_id", "module_id"),
        Index("idx_lessons_order_index", "order_index"),
        Index("idx_lessons_module_order", "module_id", "order_index"),
    )

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    module_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("modules.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    module: Mapped["Module"] = relationship(back_populates="lessons")
    tasks: Mapped[list["Task"]] = relationship(back_populates="lesson", passive_deletes=True)


class Task(Base):
    """Quiz task.

    task_type: 'fill_code' | 'multiple_choice' | 'debug_code' | 'string_cmp'
    """

    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint(
            "task_type IN ('fill_code', 'multiple_choice', 'debug_code', 'string_cmp')",
            name="ck_tasks_task_type",
        ),
        Index("idx_tasks_lesson_id", "lesson_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    lesson_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("lessons.id", ondelete="CASCADE"),
        nullable=False,
    )
    task_type: Mapped[str] = mapped_column(Text, nullable=False)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False)

    lesson: Mapped["Lesson"] = relationship(back_populates="tasks")
    answers: Mapped[list["TaskAnswer"]] = relationship(
        back_populates="task", passive_deletes=True
    )


class TaskAnswer(Base):
    """Candidate answer for a task.  image is a stored file path."""

    __tablename__ = "task_answers"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    task_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("tasks.id", ondelete="CASCADE"),
        nullable=False,
    )
    answer_text: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str] = mapped_column(Text, nullable=False)
    is_correct: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    task: Mapped["Task"] = relationship(back_populates="answers")
