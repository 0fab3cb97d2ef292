"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in src/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.

Import from this package rather than individual modules to avoid coupling
callers to specific repository module paths.
"""

from .access import HasOwner, check_access
from .answers import AnswerRepository
from .attempts import UserTaskAttemptRepository
from .base import Repository
from .lessons import LessonRepository
from .modules import ModuleRepository
from .progress import UserProgressRepository
from .tasks import TaskRepository
from .tokens import ProgressTokenRepository
from .users import UserRepository

__all__ = [
    "Repository",
    "HasOwner",
    "check_access",
    "UserRepository",
    "ModuleRepository",
    "LessonRepository",
    "TaskRepository",
    "AnswerRepository",
    "UserProgressRepository",
    "UserTaskAttemptRepository",
    "ProgressTokenRepository",
]
