"""Actor resolution.

Token verification happens upstream; this turns the verified subject id into
a RequestContext by loading the user with the system actor.
"""

from __future__ import annotations

import logging
from uuid import UUID

from src.domain.models.identity import ADMIN_SENTINEL_ID, Actor, RequestContext
from src.domain.repositories.users import UserRepository

logger = logging.getLogger(__name__)


class ActorResolver:
    def __init__(self, users: UserRepository) -> None:
        self._users = users

    async def resolve(self, subject: str | None) -> RequestContext:
        """Return the context for subject, or an anonymous one.

        Anonymous results: no subject, a subject that is not a UUID, the
        administrative sentinel id, or a user that no longer exists.
        """
        if subject is None:
            return RequestContext.anonymous()

        try:
            user_id = UUID(subject)
        except ValueError:
            logger.warning("Ignoring malformed subject %r", subject)
            return RequestContext.anonymous()

        if user_id == ADMIN_SENTINEL_ID:
            logger.warning("Refusing to resolve the administrative sentinel from a request")
            return RequestContext.anonymous()

        user = await self._users.find_by_id(Actor.admin(), user_id)
        if user is None:
            return RequestContext.anonymous()
        return RequestContext(actor=Actor(user_id=user.id, role=user.role))
