"""API test fixtures — in-memory document store + FastAPI test client.

Invariants:
    - Every test gets a fresh FakeDatabase
    - get_db dependency overridden to return a MongoManager wrapping the fake,
      so MongoManager.operation() error mapping still runs
    - Lifespan is not run: no real Mongo client is ever created
"""

import pytest
from httpx import ASGITransport, AsyncClient

from car_doctor.core.session_token import issue_token
from car_doctor.infrastructure.database import MongoManager, get_db
from car_doctor.main import app
from tests.api.mock_mongo import FakeClient, FakeDatabase


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def db_manager(fake_db):
    manager = MongoManager.__new__(MongoManager)
    manager.client = FakeClient()
    manager.database = fake_db
    return manager


@pytest.fixture
async def client(db_manager):
    """FastAPI test client with storage dependency overridden."""
    app.dependency_overrides[get_db] = lambda: db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def auth_cookie():
    """Build a Cookie header carrying a valid token for `email`."""
    def _make(email: str) -> dict:
        token = issue_token(
            {"email": email}, app.state.settings.access_token_secret,
        )
        return {"Cookie": f"token={token}"}
    return _make
