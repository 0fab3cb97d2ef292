"""Concrete SQLAlchemy repository implementations.

Exports all SqlRepository classes and the get_repositories() factory function
for wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.infrastructure.database import ModelManager

from .answers import SqlAnswerRepository
from .attempts import SqlUserTaskAttemptRepository
from .base import SqlRepository
from .lessons import SqlLessonRepository
from .modules import SqlModuleRepository
from .progress import SqlUserProgressRepository
from .tasks import SqlTaskRepository
from .tokens import SqlProgressTokenRepository
from .users import SqlUserRepository


@dataclass
class Repositories:
    """All repository instances sharing one ModelManager."""

    users: SqlUserRepository
    modules: SqlModuleRepository
    lessons: SqlLessonRepository
    tasks: SqlTaskRepository
    answers: SqlAnswerRepository
    progress: SqlUserProgressRepository
    attempts: SqlUserTaskAttemptRepository
    tokens: SqlProgressTokenRepository


def get_repositories(mm: ModelManager) -> Repositories:
    """Construct all repositories bound to the given gateway.

    Each repository call opens its own session, so one Repositories instance
    can be shared by concurrent requests:

        repos = get_repositories(ModelManager.connect(settings))
        lesson = await repos.lessons.find_by_id(actor, lesson_id)
    """
    return Repositories(
        users=SqlUserRepository(mm),
        modules=SqlModuleRepository(mm),
        lessons=SqlLessonRepository(mm),
        tasks=SqlTaskRepository(mm),
        answers=SqlAnswerRepository(mm),
        progress=SqlUserProgressRepository(mm),
        attempts=SqlUserTaskAttemptRepository(mm),
        tokens=SqlProgressTokenRepository(mm),
    )


__all__ = [
    "SqlRepository",
    "SqlUserRepository",
    "SqlModuleRepository",
    "SqlLessonRepository",
    "SqlTaskRepository",
    "SqlAnswerRepository",
    "SqlUserProgressRepository",
    "SqlUserTaskAttemptRepository",
    "SqlProgressTokenRepository",
    "Repositories",
    "get_repositories",
]
