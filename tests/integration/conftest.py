"""
Integration test fixtures
"""

import pytest
from fastapi.testclient import TestClient

from marketplace.api.main import create_app
from marketplace.config import Settings
from marketplace.container import build_container
from marketplace.db import create_db_engine, create_session_factory


@pytest.fixture
def session_factory():
    """Session factory over a fresh in-memory SQLite database."""
    engine = create_db_engine("sqlite://")
    yield create_session_factory(engine)
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def api_settings(request):
    return Settings(
        storage_backend=request.param,
        database_url="sqlite://",
        seed_admin=True,
        admin_username="admin",
        admin_password="correct",
        _env_file=None,
    )


@pytest.fixture
def container(api_settings):
    container = build_container(api_settings)
    yield container
    container.close()


@pytest.fixture
def client(container):
    """Test client against both storage backends."""
    with TestClient(create_app(container=container)) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    response = client.post("/api/v1/auth/login", json={"username": "admin", "password": "correct"})
    assert response.status_code == 200
    return client
