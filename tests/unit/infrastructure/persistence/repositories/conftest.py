"""Shared fixtures: a mock AsyncSession behind a ModelManager-shaped gateway."""

from contextlib import asynccontextmanager
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql

from src.domain.models.identity import Actor


def _result(scalar=None, rows=(), count=None):
    """Build a mock Result answering the accessors the repositories use."""
    return MagicMock(
        scalar_one_or_none=MagicMock(return_value=scalar),
        scalar_one=MagicMock(return_value=count),
        scalars=MagicMock(return_value=MagicMock(
            __iter__=MagicMock(side_effect=lambda: iter(list(rows))),
            all=MagicMock(return_value=list(rows)),
        )),
        all=MagicMock(return_value=list(rows)),
        one_or_none=MagicMock(return_value=scalar),
        rowcount=count,
    )


def _compile(stmt):
    return stmt.compile(dialect=postgresql.dialect())


@pytest.fixture
def make_result():
    return _result


@pytest.fixture
def session():
    session = AsyncMock()
    session.add = MagicMock()
    session.execute.return_value = _result()
    return session


@pytest.fixture
def mm(session):
    @asynccontextmanager
    async def _session():
        yield session

    return SimpleNamespace(session=_session)


@pytest.fixture
def actor():
    return Actor(user_id=uuid4())


@pytest.fixture
def executed(session):
    """Compiled statements passed to session.execute, in call order."""
    def _executed():
        return [_compile(call.args[0]) for call in session.execute.call_args_list]
    return _executed
