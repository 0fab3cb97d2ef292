"""Tests for SqlRepository: the statements the generic contract sends.

The mock session answers the same rows whatever it is asked, so these tests
inspect the compiled SQL instead of the returned entities.
"""

import re
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.domain.models.courses import ModuleCreate
from src.domain.models.users import User, UserCreateUpdate
from src.infrastructure.persistence.models.users import User as OrmUser
from src.infrastructure.persistence.repositories.base import SqlRepository
from src.infrastructure.persistence.repositories.modules import SqlModuleRepository
from src.infrastructure.persistence.repositories.users import SqlUserRepository


def _bound(compiled, keyword):
    """Value bound to the LIMIT or OFFSET placeholder of a compiled statement."""
    name = re.search(rf"{keyword} %\((\w+)\)s", str(compiled)).group(1)
    return compiled.params[name]


def _user():
    return User(id=uuid4(), username="ada", password_hash="h")


# --- abstract hooks ---

def test_subclass_missing_hook_cannot_be_instantiated(mm):
    class _NoApply(SqlRepository):
        orm = OrmUser

        @staticmethod
        def _to_domain(row):
            return row

        def _new_row(self, id, payload):
            return SimpleNamespace(id=id)

    with pytest.raises(TypeError):
        _NoApply(mm)  # type: ignore[abstract]


# --- list ---

async def test_list_applies_limit_and_offset(mm, actor, executed):
    await SqlUserRepository(mm).list(actor, limit=2, offset=3)
    (compiled,) = executed()
    assert _bound(compiled, "LIMIT") == 2
    assert _bound(compiled, "OFFSET") == 3


async def test_list_default_window(mm, actor, executed):
    await SqlUserRepository(mm).list(actor)
    (compiled,) = executed()
    assert _bound(compiled, "LIMIT") == 50
    assert _bound(compiled, "OFFSET") == 0


async def test_list_without_ordering_has_no_order_by(mm, actor, executed):
    await SqlUserRepository(mm).list(actor, limit=1)
    assert "ORDER BY" not in str(executed()[0])


async def test_ordered_kind_lists_by_order_index(mm, actor, executed):
    await SqlModuleRepository(mm).list(actor, limit=1)
    assert "ORDER BY modules.order_index" in str(executed()[0])


# --- page ---

async def test_page_passes_window_to_list_then_counts(mm, session, make_result, actor, executed):
    session.execute.side_effect = [make_result(rows=[]), make_result(count=4)]
    page = await SqlUserRepository(mm).page(actor, limit=2, offset=3)

    listed, counted = executed()
    assert _bound(listed, "LIMIT") == 2
    assert _bound(listed, "OFFSET") == 3
    assert "count(*)" in str(counted)
    assert "LIMIT" not in str(counted)
    assert (page.total, page.limit, page.offset) == (4, 2, 3)


async def test_page_negative_limit_sends_nothing(mm, session, actor):
    with pytest.raises(ValueError):
        await SqlUserRepository(mm).page(actor, limit=-1, offset=0)
    session.execute.assert_not_awaited()


# --- delete / find / update target one id ---

async def test_delete_targets_entity_id(mm, actor, executed):
    entity = _user()
    await SqlUserRepository(mm).delete(entity, actor)
    (compiled,) = executed()
    assert str(compiled).startswith("DELETE FROM users WHERE users.id = ")
    assert list(compiled.params.values()) == [entity.id]


async def test_find_by_id_filters_on_id(mm, actor, executed):
    wanted = uuid4()
    await SqlUserRepository(mm).find_by_id(actor, wanted)
    (compiled,) = executed()
    assert "WHERE users.id = " in str(compiled)
    assert list(compiled.params.values()) == [wanted]


async def test_update_loads_row_by_entity_id(mm, session, make_result, actor, executed):
    entity = _user()
    row = SimpleNamespace(id=entity.id, username="ada", password_hash="h", role="user")
    session.execute.return_value = make_result(scalar=row)

    await SqlUserRepository(mm).update(entity, actor, UserCreateUpdate(username="grace"))

    (compiled,) = executed()
    assert "WHERE users.id = " in str(compiled)
    assert list(compiled.params.values()) == [entity.id]
    assert row.username == "grace"
    session.flush.assert_awaited_once()


# --- create ---

async def test_create_on_ordered_kind_defaults_order_index(mm, session, actor):
    module = await SqlModuleRepository(mm).create(actor, ModuleCreate(title="T", description="D"))
    (row,), _ = session.add.call_args
    assert row.order_index == 0
    assert module.order_index == 0
