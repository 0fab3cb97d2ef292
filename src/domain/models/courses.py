"""Course content domain models: modules, lessons, tasks, answers.

Ownership chain: a Module owns itself, a Lesson is owned by its Module,
a Task by its Lesson and an Answer by its Task.

Optional payload fields use None for "not provided"; the repository applies
the documented default (order_index -> 0, is_correct -> False) on both
create and update.
"""

from __future__ import annotations

from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .base import ResourceTyped
from .enums import ResourceType, TaskType

_PAYLOAD_CONFIG = ConfigDict(frozen=True, extra="forbid")


class Module(ResourceTyped, BaseModel):
    resource_type: ClassVar[ResourceType] = ResourceType.MODULE

    model_config = ConfigDict(frozen=True)

    id: UUID
    title: str
    description: str
    order_index: int = 0


class ModuleCreate(BaseModel):
    model_config = _PAYLOAD_CONFIG

    title: str
    description: str
    order_index: int | None = None


class Lesson(ResourceTyped, BaseModel):
    resource_type: ClassVar[ResourceType] = ResourceType.LESSON

    model_config = ConfigDict(frozen=True)

    id: UUID
    module_id: UUID
    title: str
    content: str
    order_index: int = 0


class LessonCreate(BaseModel):
    model_config = _PAYLOAD_CONFIG

    module_id: UUID
    title: str
    content: str
    order_index: int | None = None


class Task(ResourceTyped, BaseModel):
    """A quiz task attached to a lesson."""

    resource_type: ClassVar[ResourceType] = ResourceType.TASK

    model_config = ConfigDict(frozen=True)

    id: UUID
    lesson_id: UUID
    task_type: TaskType
    question: str
    explanation: str


class TaskCreate(BaseModel):
    model_config = _PAYLOAD_CONFIG

    lesson_id: UUID
    task_type: TaskType
    question: str
    explanation: str


class Answer(ResourceTyped, BaseModel):
    """A candidate answer for a task.

    For string_cmp tasks answer_text holds the expected (lower-case,
    trimmed) text; for the other task types is_correct marks the right
    choice.  image is a stored path, not a URL.
    """

    resource_type: ClassVar[ResourceType] = ResourceType.ANSWER

    model_config = ConfigDict(frozen=True)

    id: UUID
    task_id: UUID
    answer_text: str
    image: str
    is_correct: bool = False


class AnswerCreate(BaseModel):
    model_config = _PAYLOAD_CONFIG

    task_id: UUID
    answer_text: str
    image: str
    is_correct: bool | None = None


# --- read projections ---

class LessonSummary(BaseModel):
    """A lesson header inside a module listing, with the actor's completion flag."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    title: str
    completed: bool = False


class ModuleWithLessons(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    title: str
    description: str
    order_index: int
    lessons: list[LessonSummary] = Field(default_factory=list)


class LessonWithStatus(BaseModel):
    """A lesson plus whether the given actor has completed it."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    module_id: UUID
    title: str
    content: str
    order_index: int = 0
    completed: bool = False
