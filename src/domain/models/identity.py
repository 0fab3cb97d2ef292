"""Caller identity: who is making the current request.

Actor is threaded explicitly through every repository and access-control
call.  It lives for one request and is never persisted.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, model_validator

from src.domain.errors import AuthenticationRequired

from .enums import UserRole

# Maximum-value UUID reserved for trusted, system-initiated operations.
ADMIN_SENTINEL_ID = UUID(int=(1 << 128) - 1)


class Actor(BaseModel):
    """An authenticated caller: user id plus role.

    Actor.admin() is the system actor used for background cleanup and
    inter-entity lookups.  The sentinel id is refused for any role other
    than ADMIN.
    """

    model_config = ConfigDict(frozen=True)

    user_id: UUID
    role: UserRole = UserRole.USER

    @model_validator(mode="after")
    def _sentinel_is_admin_only(self) -> Actor:
        if self.user_id == ADMIN_SENTINEL_ID and self.role != UserRole.ADMIN:
            raise ValueError("the administrative sentinel id cannot carry a non-admin role")
        return self

    @classmethod
    def admin(cls) -> Actor:
        return cls(user_id=ADMIN_SENTINEL_ID, role=UserRole.ADMIN)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_system(self) -> bool:
        return self.user_id == ADMIN_SENTINEL_ID


class RequestContext(BaseModel):
    """The resolved actor for one request, or None for anonymous requests."""

    model_config = ConfigDict(frozen=True)

    actor: Actor | None = None

    @classmethod
    def anonymous(cls) -> RequestContext:
        return cls()

    @classmethod
    def admin(cls) -> RequestContext:
        return cls(actor=Actor.admin())

    @property
    def is_authenticated(self) -> bool:
        return self.actor is not None

    def user(self) -> Actor:
        """Return the actor, raising AuthenticationRequired when anonymous."""
        if self.actor is None:
            raise AuthenticationRequired()
        return self.actor
