"""User domain model and its create/update payload."""

from __future__ import annotations

from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .base import ResourceTyped
from .enums import ResourceType, UserRole


class User(ResourceTyped, BaseModel):
    """A registered account.

    password_hash is carried for credential checks but excluded from
    serialization and repr.  A user owns itself.
    """

    resource_type: ClassVar[ResourceType] = ResourceType.USER

    model_config = ConfigDict(frozen=True)

    id: UUID
    username: str
    password_hash: str = Field(exclude=True, repr=False)
    role: UserRole = UserRole.USER


class UserCreateUpdate(BaseModel):
    """Payload for creating or replacing a user.

    password_hash is required on create.  On update it is optional: when not
    provided the stored hash is preserved.  Role is never taken from the
    payload; new accounts are always UserRole.USER.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    username: str = Field(min_length=1)
    password_hash: str | None = None
