"""
NoteKeeper Backend - Test Configuration (conftest.py)
======================================================

Fixture Hierarchy (all function-scoped):
    ├── mock_store:       AsyncMock standing in for a NoteStore (service unit tests)
    ├── make_note:        builds transient Note rows with fixed timestamps
    ├── db_engine:        fresh in-memory SQLite database with the schema created
    ├── session_factory:  AsyncSession factory bound to db_engine
    ├── db_session:       one session for store tests
    └── test_client:      HTTPX AsyncClient talking to a fresh app backed by db_engine
"""

import os

# Must be set before any app module is imported: app.config reads the
# environment once and app.database builds its engine at import time.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db_session
from app.models.note import Note
from app.services.store_base import NoteStore


@pytest.fixture
def mock_store():
    """
    A NoteStore whose every method is an AsyncMock.

    Usage:
        mock_store.get.return_value = note
        result = await note_service.get_note(mock_store, str(note.id))
    """
    return AsyncMock(spec=NoteStore)


@pytest.fixture
def make_note():
    """Factory for detached Note instances (no session needed)."""
    def _make(title="Groceries", content="Milk, eggs", created_at=None, updated_at=None):
        created = created_at or datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        return Note(
            id=uuid4(),
            title=title,
            content=content,
            created_at=created,
            updated_at=updated_at or created,
        )
    return _make


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_app(session_factory):
    """A fresh app whose sessions come from the per-test SQLite engine."""
    from app.main import create_app

    app = create_app()

    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_session
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
