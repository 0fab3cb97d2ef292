"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select

from src.domain.models.enums import UserRole
from src.domain.models.identity import Actor
from src.domain.models.users import User as DomainUser
from src.domain.models.users import UserCreateUpdate
from src.domain.repositories.users import UserRepository
from src.infrastructure.persistence.models.users import User as OrmUser

from .base import SqlRepository


class SqlUserRepository(SqlRepository[DomainUser, UserCreateUpdate], UserRepository):
    orm = OrmUser

    @staticmethod
    def _to_domain(row: OrmUser) -> DomainUser:
        return DomainUser(
            id=row.id,
            username=row.username,
            password_hash=row.password_hash,
            role=UserRole.parse(row.role),
        )

    def _new_row(self, id: UUID, payload: UserCreateUpdate) -> OrmUser:
        if payload.password_hash is None:
            raise ValueError("password_hash is required to create a user")
        return OrmUser(
            id=id,
            username=payload.username,
            password_hash=payload.password_hash,
            role=UserRole.USER.value,
        )

    def _apply(self, row: OrmUser, payload: UserCreateUpdate) -> None:
        row.username = payload.username
        if payload.password_hash is not None:
            row.password_hash = payload.password_hash

    async def find_by_username(self, actor: Actor, username: str) -> DomainUser | None:
        stmt = select(OrmUser).where(OrmUser.username == username)
        async with self._mm.session() as session:
            result = await session.execute(stmt)
            row = result.scalar_one_or_none()
            return self._to_domain(row) if row else None
