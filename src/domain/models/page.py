"""Paged listing projection."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One slice of a listing plus the total row count.

    items is the [offset, offset + limit) slice of the storage order at query
    time.  total comes from a separate query, so the two can disagree under
    concurrent writes.
    """

    model_config = ConfigDict(frozen=True)

    items: list[T] = Field(default_factory=list)
    total: int = Field(ge=0)
    limit: int = Field(ge=0)
    offset: int = Field(ge=0)

    @property
    def has_next(self) -> bool:
        return self.offset + len(self.items) < self.total
