"""API test fixtures: FastAPI app over httpx with the DB dependency overridden.

Invariants:
    - get_db yields sessions bound to the per-test in-memory database
"""

import pytest
from httpx import ASGITransport, AsyncClient

from orders_api.infrastructure.database import get_db
from orders_api.main import app


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def no_db_client(client):
    """Client whose get_db yields a session that fails the test if touched."""

    class _UntouchableSession:
        def __getattr__(self, name):
            raise AssertionError(f"database accessed via session.{name}")

    async def untouchable_db():
        yield _UntouchableSession()

    app.dependency_overrides[get_db] = untouchable_db
    yield client


@pytest.fixture
async def seed_users(client):
    """Create three users through the API; returns their JSON bodies."""
    created = []
    for username, email in (
        ("alice", "alice@example.com"),
        ("bob", "bob@test.io"),
        ("carol", "carol@mail.net"),
    ):
        res = await client.post(
            "/api/v1/users", json={"username": username, "email": email},
        )
        assert res.status_code == 201
        created.append(res.json())
    return created


@pytest.fixture
async def seed_order(client):
    """Create one order with two items through the API."""
    res = await client.post("/api/v1/orders", json={
        "customerName": "Tom Jones",
        "orderedAt": "2024-03-01T10:30:00+00:00",
        "items": [
            {"itemCode": "A-100", "description": "Keyboard", "quantity": 2},
            {"itemCode": "B-200", "description": "Mouse", "quantity": 5},
        ],
    })
    assert res.status_code == 201
    return res.json()
