"""Learner progress domain models.

UserProgress, UserTaskAttempt and ProgressToken are all owned by the user
who produced them.  ProgressToken is append-only: it is created and
eventually deleted, never updated.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .base import ResourceTyped
from .enums import ProgressStatus, ResourceType

_PAYLOAD_CONFIG = ConfigDict(frozen=True, extra="forbid")


class UserProgress(ResourceTyped, BaseModel):
    resource_type: ClassVar[ResourceType] = ResourceType.USER_PROGRESS

    model_config = ConfigDict(frozen=True)

    id: UUID
    user_id: UUID
    lesson_id: UUID
    status: ProgressStatus


class UserProgressCreate(BaseModel):
    model_config = _PAYLOAD_CONFIG

    user_id: UUID
    lesson_id: UUID
    status: ProgressStatus


class UserTaskAttempt(ResourceTyped, BaseModel):
    resource_type: ClassVar[ResourceType] = ResourceType.USER_TASK_ATTEMPT

    model_config = ConfigDict(frozen=True)

    id: UUID
    user_id: UUID
    task_id: UUID
    selected_answer_id: UUID
    is_correct: bool


class UserTaskAttemptCreate(BaseModel):
    model_config = _PAYLOAD_CONFIG

    user_id: UUID
    task_id: UUID
    selected_answer_id: UUID
    is_correct: bool


class ProgressToken(ResourceTyped, BaseModel):
    """A short-lived public token that exposes one user's progress summary."""

    resource_type: ClassVar[ResourceType] = ResourceType.PROGRESS_TOKEN

    model_config = ConfigDict(frozen=True)

    id: UUID
    token: str
    user_id: UUID
    expires_at: datetime
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def is_expired(self, now: datetime | None = None) -> bool:
        return self.expires_at < (now or datetime.now(timezone.utc))


class ProgressTokenCreate(BaseModel):
    model_config = _PAYLOAD_CONFIG

    token: str = Field(min_length=1)
    user_id: UUID
    expires_at: datetime


# --- service results ---

class ProgressSummary(BaseModel):
    """Aggregate counts shown on a shared progress page."""

    model_config = ConfigDict(frozen=True)

    username: str
    total_lessons: int
    completed_lessons: int
    total_answers: int
    correct_answers: int


class TaskCheckResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_correct: bool
    explanation: str
    image: str
