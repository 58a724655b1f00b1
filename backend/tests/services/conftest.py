"""Service test fixtures — async DB, frozen audit clock, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database (schema from Base.metadata)
    - get_db dependency overridden to use the test engine
    - db_manager patched so readiness probes hit the test engine
    - auth_headers carries a token signed with the configured test secret

Design Decisions:
    - SQLite in-memory with StaticPool: the test session and the app's sessions share
      one connection, so rows seeded through test_db are visible to routes
    - Unique constraints are real in SQLite, so the storage-level backstop is exercised
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

import freight.models  # noqa: F401  (registers models + audit hook)
from freight.api.deps import get_token_issuer
from freight.core.tokens import TokenIssuer
from freight.db.base import Base
from freight.infrastructure.database import get_db, DatabaseSessionManager
import freight.infrastructure.database as db_module
from freight.main import app
from freight.services.identity import IdentityService

T0 = datetime(2026, 1, 5, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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


class FrozenClock:
    """Stand-in for the audit hook's utc_now; advance() moves time forward."""

    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta) -> datetime:
        self.now = self.now + timedelta(**delta)
        return self.now


@pytest.fixture
def clock(monkeypatch) -> FrozenClock:
    frozen = FrozenClock()
    monkeypatch.setattr("freight.db.auditing.utc_now", frozen)
    return frozen


@pytest.fixture
def issuer() -> TokenIssuer:
    return TokenIssuer("service-test-secret")


@pytest.fixture
def identity_service(test_db, issuer) -> IdentityService:
    return IdentityService(test_db, issuer, bcrypt_rounds=4)


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
def auth_headers() -> dict:
    """Bearer header for a dispatcher account; signed with the app's own secret."""
    identity = SimpleNamespace(id=1, email="ops@freight.test", full_name="Ops Desk")
    token = get_token_issuer().issue(identity).token
    return {"Authorization": f"Bearer {token}"}
