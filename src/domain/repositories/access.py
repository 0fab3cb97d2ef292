"""Ownership capability and the single authorization gate.

Every repository interface implements HasOwner for its entity.  Owners
differ per kind (a Lesson is owned by its Module id, a Task by its Lesson id,
progress records by the user who produced them), and resolving one may need
a storage lookup, so owner_of is async and may raise StorageFailure.

check_access is the only place the owner comparison and the admin bypass
happen.  expected_owner is supplied by the caller, so the gate only certifies
"the recorded owner equals this id" and stays agnostic of why access is
being checked.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from uuid import UUID

from src.domain.errors import Forbidden
from src.domain.models.enums import ResourceType
from src.domain.models.identity import Actor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HasOwner(ABC, Generic[T]):
    """Answers "who owns this entity" for one entity kind.

    Combined with Repository, which supplies resource_type.
    """

    resource_type: ResourceType

    @abstractmethod
    async def owner_of(self, entity: T, actor: Actor) -> UUID:
        """Return the owner identifier of entity."""


async def check_access(
    owners: HasOwner[T],
    actor: Actor,
    entity: T,
    expected_owner: UUID,
) -> None:
    """Allow the action or raise Forbidden.

    1. Admin actors are always allowed; no owner lookup is made.
    2. Otherwise the entity's owner must equal expected_owner.
    """
    if actor.is_admin:
        return

    actual = await owners.owner_of(entity, actor)
    if actual == expected_owner:
        return

    logger.info(
        "Access denied: user %s on %s (owner %s, expected %s)",
        actor.user_id,
        owners.resource_type.value,
        actual,
        expected_owner,
    )
    raise Forbidden(owners.resource_type)
