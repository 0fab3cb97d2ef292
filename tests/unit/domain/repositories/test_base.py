"""Tests for src/domain/repositories/base.py.

Contract properties are exercised against a small in-memory ModuleRepository,
so no database is required.
"""

from uuid import UUID, uuid4

import pytest

from src.domain.models.courses import Module, ModuleCreate
from src.domain.models.enums import ResourceType
from src.domain.models.identity import Actor
from src.domain.models.page import Page
from src.domain.repositories.base import Repository
from src.domain.repositories.modules import ModuleRepository


class _MemoryModuleRepository(ModuleRepository):
    def __init__(self):
        self.rows: dict[UUID, Module] = {}
        self.calls: list[str] = []

    async def create(self, actor, payload):
        module = Module(
            id=uuid4(),
            title=payload.title,
            description=payload.description,
            order_index=payload.order_index or 0,
        )
        self.rows[module.id] = module
        return module

    async def update(self, entity, actor, payload):
        module = Module(
            id=entity.id,
            title=payload.title,
            description=payload.description,
            order_index=payload.order_index or 0,
        )
        self.rows[entity.id] = module
        return module

    async def delete(self, entity, actor):
        self.rows.pop(entity.id, None)

    async def find_by_id(self, actor, id):
        return self.rows.get(id)

    async def list(self, actor, limit=50, offset=0):
        self.calls.append("list")
        ordered = sorted(self.rows.values(), key=lambda m: m.order_index)
        return ordered[offset:offset + limit]

    async def count(self, actor):
        self.calls.append("count")
        return len(self.rows)

    async def all(self, actor):
        return await self.list(actor, limit=len(self.rows))

    async def with_lessons(self, actor):
        return []


@pytest.fixture
def actor():
    return Actor(user_id=uuid4())


@pytest.fixture
def repo():
    return _MemoryModuleRepository()


async def _seed(repo, actor, n):
    return [
        await repo.create(actor, ModuleCreate(title=f"M{i}", description="d", order_index=i))
        for i in range(n)
    ]


# --- abstract contract ---

def test_repository_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Repository()  # type: ignore[abstract]


def test_repository_concrete_subclass_must_implement_all_methods():
    class _Partial(ModuleRepository):
        async def find_by_id(self, actor, id): return None
        # missing create, update, delete, list, count, all, with_lessons

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_full_concrete_subclass_instantiates(repo):
    assert repo is not None


def test_resource_type_comes_from_entity(repo):
    assert repo.resource_type == ResourceType.MODULE


# --- create / find / delete ---

async def test_create_assigns_distinct_identifiers(repo, actor):
    created = await _seed(repo, actor, 5)
    assert len({m.id for m in created}) == 5


async def test_create_then_find_by_id_round_trips(repo, actor):
    created = await repo.create(actor, ModuleCreate(title="Intro", description="Basics", order_index=3))
    found = await repo.find_by_id(actor, created.id)
    assert found == created


async def test_find_by_id_unknown_returns_none(repo, actor):
    assert await repo.find_by_id(actor, uuid4()) is None


async def test_delete_then_find_by_id_returns_none(repo, actor):
    created = await repo.create(actor, ModuleCreate(title="Intro", description="Basics"))
    await repo.delete(created, actor)
    assert await repo.find_by_id(actor, created.id) is None


async def test_delete_twice_is_silent(repo, actor):
    created = await repo.create(actor, ModuleCreate(title="Intro", description="Basics"))
    await repo.delete(created, actor)
    await repo.delete(created, actor)


# --- page ---

async def test_page_on_empty_repository(repo, actor):
    page = await repo.page(actor, limit=10, offset=0)
    assert page == Page(items=[], total=0, limit=10, offset=0)


async def test_count_on_empty_repository_is_zero(repo, actor):
    assert await repo.count(actor) == 0


async def test_page_returns_slice_and_total(repo, actor):
    created = await _seed(repo, actor, 5)
    page = await repo.page(actor, limit=2, offset=1)
    assert page.items == created[1:3]
    assert page.total == 5
    assert page.limit == 2
    assert page.offset == 1


async def test_page_items_match_list(repo, actor):
    await _seed(repo, actor, 4)
    page = await repo.page(actor, limit=3, offset=2)
    assert page.items == await repo.list(actor, limit=3, offset=2)
    assert len(page.items) <= page.limit


async def test_page_offset_past_end_is_empty(repo, actor):
    await _seed(repo, actor, 3)
    page = await repo.page(actor, limit=10, offset=10)
    assert page.items == []
    assert page.total == 3


async def test_page_zero_limit_still_counts(repo, actor):
    await _seed(repo, actor, 3)
    page = await repo.page(actor, limit=0, offset=0)
    assert page.items == []
    assert page.total == 3


async def test_page_uses_defaults(repo, actor):
    page = await repo.page(actor)
    assert page.limit == 50
    assert page.offset == 0


async def test_page_runs_list_before_count(repo, actor):
    await repo.page(actor, limit=1, offset=0)
    assert repo.calls == ["list", "count"]


@pytest.mark.parametrize("limit, offset", [(-1, 0), (0, -1)])
async def test_page_rejects_negative_arguments(repo, actor, limit, offset):
    with pytest.raises(ValueError):
        await repo.page(actor, limit=limit, offset=offset)
    assert repo.calls == []


# --- update ---

async def test_update_with_unset_order_index_resets_to_zero(repo, actor):
    created = await repo.create(actor, ModuleCreate(title="Intro", description="Basics", order_index=7))
    updated = await repo.update(created, actor, ModuleCreate(title="Intro", description="Basics"))
    assert updated.order_index == 0
    assert updated.id == created.id
