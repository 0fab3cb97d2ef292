"""Domain enumerations for the e-learning core.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to the plain strings stored in the database.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    """Closed tag for every persisted entity kind.

    Adding an entity kind means adding a member here.
    """

    USER = "user"
    MODULE = "module"
    LESSON = "lesson"
    TASK = "task"
    ANSWER = "answer"
    USER_PROGRESS = "user_progress"
    PROGRESS_TOKEN = "progress_token"
    USER_TASK_ATTEMPT = "user_task_attempt"


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"

    @classmethod
    def parse(cls, value: str) -> "UserRole":
        """Map a stored role string to a role.

        Only "admin" grants ADMIN; every other value, including unknown
        ones, becomes USER.
        """
        if value == cls.ADMIN.value:
            return cls.ADMIN
        if value != cls.USER.value:
            logger.warning("Unknown role %r treated as %r", value, cls.USER.value)
        return cls.USER


class TaskType(str, Enum):
    FILL_CODE = "fill_code"
    MULTIPLE_CHOICE = "multiple_choice"
    DEBUG_CODE = "debug_code"
    STRING_CMP = "string_cmp"


class ProgressStatus(str, Enum):
    DONE = "done"
    IN_PROGRESS = "in_progress"
