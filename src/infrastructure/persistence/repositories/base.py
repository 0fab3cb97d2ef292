"""Generic SQLAlchemy implementation of the repository contract.

SqlRepository implements create / update / delete / find_by_id / list /
count once.  A concrete repository describes its table through:

  orm          - the mapped ORM class (primary key column named ``id``)
  _to_domain   - ORM row -> domain model
  _new_row     - fresh identifier + payload -> ORM row
  _apply       - payload -> existing ORM row (full replace)
  _order_by    - list() ordering; empty means storage order
  _count_scope - extra WHERE clauses for count()

Each public call runs in its own ModelManager.session(), i.e. its own
transaction, so consecutive calls are not atomic together.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID, uuid4

from sqlalchemy import delete, func, select

from src.domain.errors import StorageFailure
from src.domain.models.identity import Actor
from src.infrastructure.database import ModelManager

logger = logging.getLogger(__name__)

T = TypeVar("T")
C = TypeVar("C")


class SqlRepository(ABC, Generic[T, C]):
    orm: ClassVar[Any]

    def __init__(self, mm: ModelManager) -> None:
        self._mm = mm

    # --- descriptor hooks ---

    @staticmethod
    @abstractmethod
    def _to_domain(row: Any) -> T:
        """ORM row -> domain model."""

    @abstractmethod
    def _new_row(self, id: UUID, payload: C) -> Any:
        """Build a fresh ORM row for create()."""

    @abstractmethod
    def _apply(self, row: Any, payload: C) -> None:
        """Overwrite the mutable columns of row from payload."""

    def _order_by(self) -> tuple[Any, ...]:
        return ()

    def _count_scope(self, actor: Actor) -> tuple[Any, ...]:
        return ()

    # --- contract ---

    async def create(self, actor: Actor, payload: C) -> T:
        row = self._new_row(uuid4(), payload)
        async with self._mm.session() as session:
            session.add(row)
            await session.flush()
            entity = self._to_domain(row)
        logger.debug("Created %s %s", self.orm.__tablename__, row.id)
        return entity

    async def update(self, entity: T, actor: Actor, payload: C) -> T:
        id = entity.id  # type: ignore[attr-defined]
        async with self._mm.session() as session:
            stmt = select(self.orm).where(self.orm.id == id)
            result = await session.execute(stmt)
            row = result.scalar_one_or_none()
            if row is None:
                raise StorageFailure(f"{self.orm.__tablename__} row {id} vanished before update")
            self._apply(row, payload)
            await session.flush()
            updated = self._to_domain(row)
        logger.debug("Updated %s %s", self.orm.__tablename__, id)
        return updated

    async def delete(self, entity: T, actor: Actor) -> None:
        id = entity.id  # type: ignore[attr-defined]
        async with self._mm.session() as session:
            await session.execute(delete(self.orm).where(self.orm.id == id))
        logger.debug("Deleted %s %s", self.orm.__tablename__, id)

    async def find_by_id(self, actor: Actor, id: UUID) -> T | None:
        async with self._mm.session() as session:
            stmt = select(self.orm).where(self.orm.id == id)
            result = await session.execute(stmt)
            row = result.scalar_one_or_none()
            return self._to_domain(row) if row else None

    async def list(self, actor: Actor, limit: int = 50, offset: int = 0) -> list[T]:
        stmt = select(self.orm).order_by(*self._order_by()).limit(limit).offset(offset)
        async with self._mm.session() as session:
            result = await session.execute(stmt)
            return [self._to_domain(row) for row in result.scalars()]

    async def count(self, actor: Actor) -> int:
        stmt = select(func.count()).select_from(self.orm).where(*self._count_scope(actor))
        async with self._mm.session() as session:
            result = await session.execute(stmt)
            return result.scalar_one()
