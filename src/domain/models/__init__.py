"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .base import ResourceTyped, resource_type_of
from .courses import (
    Answer,
    AnswerCreate,
    Lesson,
    LessonCreate,
    LessonSummary,
    LessonWithStatus,
    Module,
    ModuleCreate,
    ModuleWithLessons,
    Task,
    TaskCreate,
)
from .enums import ProgressStatus, ResourceType, TaskType, UserRole
from .identity import ADMIN_SENTINEL_ID, Actor, RequestContext
from .page import Page
from .progress import (
    ProgressSummary,
    ProgressToken,
    ProgressTokenCreate,
    TaskCheckResult,
    UserProgress,
    UserProgressCreate,
    UserTaskAttempt,
    UserTaskAttemptCreate,
)
from .users import User, UserCreateUpdate

__all__ = [
    # enums
    "ProgressStatus",
    "ResourceType",
    "TaskType",
    "UserRole",
    # resource typing
    "ResourceTyped",
    "resource_type_of",
    # identity
    "ADMIN_SENTINEL_ID",
    "Actor",
    "RequestContext",
    # paging
    "Page",
    # users
    "User",
    "UserCreateUpdate",
    # courses
    "Module",
    "ModuleCreate",
    "ModuleWithLessons",
    "Lesson",
    "LessonCreate",
    "LessonSummary",
    "LessonWithStatus",
    "Task",
    "TaskCreate",
    "Answer",
    "AnswerCreate",
    # progress
    "UserProgress",
    "UserProgressCreate",
    "UserTaskAttempt",
    "UserTaskAttemptCreate",
    "ProgressToken",
    "ProgressTokenCreate",
    "ProgressSummary",
    "TaskCheckResult",
]
