"""ORM model registry: imports all layer modules so every mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.

Import order follows the dependency graph (referenced tables first).
"""

from src.infrastructure.persistence.models.users import User
from src.infrastructure.persistence.models.courses import (
    Lesson,
    Module,
    Task,
    TaskAnswer,
)
from src.infrastructure.persistence.models.progress import (
    ProgressToken,
    UserProgress,
    UserTaskAttempt,
)

__all__ = [
    # Accounts
    "User",
    # Courses
    "Module",
    "Lesson",
    "Task",
    "TaskAnswer",
    # Progress
    "UserProgress",
    "UserTaskAttempt",
    "ProgressToken",
]
