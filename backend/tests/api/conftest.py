"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness check sees the test engine
    - `client` is anonymous; `admin_client` has logged in through /api/auth/login

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - seed_posts writes through the ORM with explicit ids one second apart,
      so list order is deterministic
"""

import time

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from blog.config import get_settings
from blog.core.object_id import generate_post_id
from blog.db.base import Base
from blog.infrastructure.database import get_db, DatabaseSessionManager
from blog.models.post import Post
import blog.infrastructure.database as db_module
from blog.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def admin_client(client):
    """Same client, after a successful admin login."""
    res = await client.post(
        "/api/auth/login", json={"password": get_settings().admin_password},
    )
    assert res.status_code == 200
    return client


@pytest.fixture
def seed_posts(test_session_factory):
    """Insert posts directly; returns them oldest first."""
    async def _seed(count: int, body: str = "body", tags=None) -> list[Post]:
        start = int(time.time()) - count
        posts = [
            Post(
                id=generate_post_id(now=start + i),
                title=f"Post {i}",
                body=body,
                tags=list(tags or []),
            )
            for i in range(count)
        ]
        async with test_session_factory() as session:
            session.add_all(posts)
            await session.commit()
        return posts

    return _seed


@pytest.fixture
def open_writes(monkeypatch):
    """Run with the session gate switched off."""
    monkeypatch.setattr(get_settings(), "require_login_for_writes", False)


@pytest.fixture
def filtered_last_page(monkeypatch):
    monkeypatch.setattr(get_settings(), "last_page_counts_filtered", True)
