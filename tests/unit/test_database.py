"""Unit tests for src/infrastructure/database.py.

Tests cover Settings defaults, env var override, and the ModelManager unit of
work.  No database connection is required.
"""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import DeclarativeBase

from src.domain.errors import DatabaseError, Forbidden, StorageFailure
from src.domain.models.enums import ResourceType
from src.infrastructure.database import Base, ModelManager, Settings


def _mm_with_session(session):
    """ModelManager whose sessionmaker hands out the given mock session."""
    mm = ModelManager(MagicMock(spec=AsyncEngine))

    @asynccontextmanager
    async def _begin():
        yield

    @asynccontextmanager
    async def _open():
        yield session

    session.begin = MagicMock(side_effect=_begin)
    mm._sessions = MagicMock(side_effect=_open)
    return mm


# --- Settings ---

def test_settings_default_url_uses_asyncpg():
    assert "postgresql+asyncpg" in Settings().database_url


def test_settings_default_url_targets_localhost():
    assert "localhost" in Settings().database_url


def test_settings_reads_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@myhost/mydb")
    assert Settings().database_url == "postgresql+asyncpg://u:p@myhost/mydb"


def test_settings_default_token_ttl_is_thirty_minutes():
    assert Settings().progress_token_ttl_minutes == 30


def test_settings_jwt_secret_is_masked(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "hunter2")
    settings = Settings()
    assert settings.jwt_secret.get_secret_value() == "hunter2"
    assert "hunter2" not in repr(settings)


def test_base_is_declarative_base():
    assert issubclass(Base, DeclarativeBase)


# --- ModelManager ---

def test_connect_builds_async_engine():
    mm = ModelManager.connect(Settings())
    assert isinstance(mm.engine, AsyncEngine)


async def test_session_yields_session():
    session = AsyncMock()
    mm = _mm_with_session(session)
    async with mm.session() as got:
        assert got is session


async def test_session_wraps_sqlalchemy_errors():
    mm = _mm_with_session(AsyncMock())
    with pytest.raises(StorageFailure) as exc_info:
        async with mm.session():
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))
    assert isinstance(exc_info.value.__cause__, OperationalError)


async def test_session_wraps_constraint_violations():
    mm = _mm_with_session(AsyncMock())
    with pytest.raises(StorageFailure):
        async with mm.session():
            raise IntegrityError("INSERT", {}, Exception("duplicate key"))


async def test_session_passes_domain_errors_through():
    mm = _mm_with_session(AsyncMock())
    with pytest.raises(Forbidden):
        async with mm.session():
            raise Forbidden(ResourceType.USER)


def test_storage_failure_is_database_error():
    assert issubclass(StorageFailure, DatabaseError)
    assert issubclass(Forbidden, DatabaseError)


async def test_dispose_disposes_engine():
    engine = MagicMock(spec=AsyncEngine)
    engine.dispose = AsyncMock()
    await ModelManager(engine).dispose()
    engine.dispose.assert_awaited_once()
