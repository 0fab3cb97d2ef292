"""Domain error taxonomy.

DatabaseError is the root of everything the repository / access layer
raises.  Services add a few request-level errors on top; translating any of
these into transport responses is the caller's job.

  StorageFailure         - any persistence failure (connectivity, constraint,
                           malformed row, row vanished before update)
  Forbidden              - actor is neither admin nor the recorded owner
  ResourceNotFound       - a service needed an entity that does not exist
                           (repositories themselves return None instead)
  AuthenticationRequired - anonymous context asked for a user
  TokenExpired           - shared progress token is past its expiry
  InvalidAnswer          - answer check missing the free-text user answer

Unsupported repository operations raise NotImplementedError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.models.enums import ResourceType


class DatabaseError(Exception):
    """Base class for repository and access-control failures."""


class StorageFailure(DatabaseError):
    """The persistence layer failed; the original error is chained as __cause__."""


class Forbidden(DatabaseError):
    def __init__(self, resource_type: ResourceType) -> None:
        super().__init__(f"access to this {resource_type.value} is forbidden")
        self.resource_type = resource_type


class ResourceNotFound(Exception):
    def __init__(self, resource_type: ResourceType) -> None:
        super().__init__(f"{resource_type.value} not found")
        self.resource_type = resource_type


class AuthenticationRequired(Exception):
    def __init__(self) -> None:
        super().__init__("authentication required")


class TokenExpired(Exception):
    def __init__(self) -> None:
        super().__init__("this token has expired")


class InvalidAnswer(ValueError):
    pass
