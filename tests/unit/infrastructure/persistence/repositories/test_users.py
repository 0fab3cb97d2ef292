"""Tests for SqlUserRepository and the generic SqlRepository flow it inherits."""

from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.domain.errors import StorageFailure
from src.domain.models.enums import UserRole
from src.domain.models.users import User, UserCreateUpdate
from src.infrastructure.persistence.models.users import User as OrmUser
from src.infrastructure.persistence.repositories.users import SqlUserRepository


def _orm_user(**overrides):
    defaults = {
        "id": uuid4(),
        "username": "ada",
        "password_hash": "hash-1",
        "role": "user",
    }
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


def _user(row):
    return SqlUserRepository._to_domain(row)


# --- _to_domain mapping ---

def test_to_domain_maps_username():
    assert _user(_orm_user(username="grace")).username == "grace"


def test_to_domain_maps_admin_role():
    assert _user(_orm_user(role="admin")).role == UserRole.ADMIN


def test_to_domain_unknown_role_is_user():
    assert _user(_orm_user(role="owner")).role == UserRole.USER


# --- create ---

async def test_create_adds_row_with_fresh_id(mm, session, actor):
    repo = SqlUserRepository(mm)
    user = await repo.create(actor, UserCreateUpdate(username="ada", password_hash="h"))
    (row,), _ = session.add.call_args
    assert isinstance(row, OrmUser)
    assert row.id == user.id
    session.flush.assert_awaited_once()


async def test_create_always_assigns_user_role(mm, actor):
    user = await SqlUserRepository(mm).create(actor, UserCreateUpdate(username="ada", password_hash="h"))
    assert user.role == UserRole.USER


async def test_create_assigns_distinct_ids(mm, actor):
    repo = SqlUserRepository(mm)
    first = await repo.create(actor, UserCreateUpdate(username="a", password_hash="h"))
    second = await repo.create(actor, UserCreateUpdate(username="b", password_hash="h"))
    assert first.id != second.id


async def test_create_requires_password_hash(mm, session, actor):
    with pytest.raises(ValueError):
        await SqlUserRepository(mm).create(actor, UserCreateUpdate(username="ada"))
    session.add.assert_not_called()


# --- find ---

async def test_find_by_id_returns_none_when_not_found(mm, actor):
    assert await SqlUserRepository(mm).find_by_id(actor, uuid4()) is None


async def test_find_by_id_maps_row(mm, session, make_result, actor):
    row = _orm_user()
    session.execute.return_value = make_result(scalar=row)
    found = await SqlUserRepository(mm).find_by_id(actor, row.id)
    assert found == User(id=row.id, username="ada", password_hash="hash-1")


async def test_find_by_username_maps_row(mm, session, make_result, actor):
    row = _orm_user(username="grace")
    session.execute.return_value = make_result(scalar=row)
    found = await SqlUserRepository(mm).find_by_username(actor, "grace")
    assert found.id == row.id


# --- update ---

async def test_update_raises_when_row_missing(mm, actor):
    entity = User(id=uuid4(), username="ada", password_hash="h")
    with pytest.raises(StorageFailure):
        await SqlUserRepository(mm).update(entity, actor, UserCreateUpdate(username="x"))


async def test_update_without_password_keeps_stored_hash(mm, session, make_result, actor):
    row = _orm_user(password_hash="original")
    session.execute.return_value = make_result(scalar=row)
    entity = _user(row)
    updated = await SqlUserRepository(mm).update(entity, actor, UserCreateUpdate(username="renamed"))
    assert updated.username == "renamed"
    assert updated.password_hash == "original"


async def test_update_with_password_replaces_hash(mm, session, make_result, actor):
    row = _orm_user(password_hash="original")
    session.execute.return_value = make_result(scalar=row)
    updated = await SqlUserRepository(mm).update(
        _user(row), actor, UserCreateUpdate(username="ada", password_hash="new")
    )
    assert updated.password_hash == "new"


async def test_update_never_changes_role(mm, session, make_result, actor):
    row = _orm_user(role="admin")
    session.execute.return_value = make_result(scalar=row)
    updated = await SqlUserRepository(mm).update(_user(row), actor, UserCreateUpdate(username="ada"))
    assert updated.role == UserRole.ADMIN


# --- delete / list / count ---

async def test_delete_executes_statement(mm, session, actor):
    await SqlUserRepository(mm).delete(User(id=uuid4(), username="a", password_hash="h"), actor)
    session.execute.assert_awaited_once()


async def test_list_maps_rows(mm, session, make_result, actor):
    rows = [_orm_user(username="a"), _orm_user(username="b")]
    session.execute.return_value = make_result(rows=rows)
    users = await SqlUserRepository(mm).list(actor, limit=2, offset=0)
    assert [u.username for u in users] == ["a", "b"]


async def test_count_returns_scalar(mm, session, make_result, actor):
    session.execute.return_value = make_result(count=3)
    assert await SqlUserRepository(mm).count(actor) == 3


async def test_page_combines_list_and_count(mm, session, make_result, actor):
    session.execute.side_effect = [make_result(rows=[_orm_user()]), make_result(count=7)]
    page = await SqlUserRepository(mm).page(actor, limit=1, offset=0)
    assert len(page.items) == 1
    assert page.total == 7
