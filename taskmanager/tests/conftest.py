"""Shared fixtures: in-memory database, settings, app client, and login helper."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from taskmanager.config import Settings
from taskmanager.main import create_app
from taskmanager.services.auth import AuthService

TEST_SECRET_KEY = "test-signing-key-that-is-long-enough-0123456789"


@pytest.fixture(name="settings")
def settings_fixture() -> Settings:
    """Settings with a fixed key and the cheapest bcrypt cost."""
    return Settings(jwt_secret_key=TEST_SECRET_KEY, bcrypt_rounds=4)


@pytest.fixture(name="engine")
def engine_fixture():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="auth_service")
def auth_service_fixture(settings: Settings) -> AuthService:
    return AuthService(settings)


@pytest.fixture(name="app")
def app_fixture(settings: Settings, engine):
    return create_app(settings=settings, engine=engine)


@pytest.fixture(name="client")
def client_fixture(app):
    """Create a test client bound to the in-memory database."""
    with TestClient(app) as client:
        yield client


@pytest.fixture(name="login")
def login_fixture(client: TestClient):
    """Register (once) and log in a user, returning bearer headers."""

    def _login(username: str = "alice", password: str = "s3cret-pass", email=None):
        email = email or f"{username}@example.com"
        client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        response = client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login
