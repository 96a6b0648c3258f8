"""Pytest shared fixtures: in-memory database, seeded session and HTTP client."""
import os
import pathlib
import sys

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Configure test environment BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "testing"
os.environ["AUTO_CREATE_SCHEMA"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient

from app.adapters.outbound.persistence.database import build_engine, build_session_factory, create_schema, get_db
from app.adapters.outbound.persistence.seeds import run_all_seeds
from app.main import app


# ─────────────────────────────────────────────────────────────────────────────
# Database
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture
async def engine():
    """Fresh in-memory SQLite database per test, with every table created."""
    test_engine = build_engine("sqlite+aiosqlite:///:memory:")
    await create_schema(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def session_factory(engine):
    """Session factory over a database holding the default groups and permissions."""
    factory = build_session_factory(engine)
    async with factory() as session:
        await run_all_seeds(session)
    return factory


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


# ─────────────────────────────────────────────────────────────────────────────
# HTTP
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture
async def client(session_factory):
    """Async client for the app, with get_db bound to the test database."""

    async def _override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def user_payload():
    """Valid creation body, in the API's camelCase."""
    return {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john@example.com",
        "phoneNumber": "+1 555 0100",
        "groupIds": [1],
    }
