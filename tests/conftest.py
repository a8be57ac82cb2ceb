"""
- Spins up a temp in-memory SQLite DB for the game service
- Creates tables before tests run
- Overrides FastAPI's get_db so routes use the test session
- Provides a client fixture (TestClient(app)) and an API client wired to it
"""
import os
import pytest
from typing import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure the app does NOT run dev-only startup hooks
os.environ.setdefault("APP_ENV", "test")

from mastermind.api_client import MastermindAPI
from mastermind.server.db import Base, get_db
from mastermind.server.app import app
from mastermind.server import models  # noqa: F401

TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"

@pytest.fixture(scope="session")
def engine():
    # StaticPool + check_same_thread=False lets Starlette's TestClient and SQLAlchemy
    # share ONE in-memory SQLite database across threads.
    engine = create_engine(
        TEST_DATABASE_URL,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db_session(engine) -> Generator:
    """Provide a clean session per test with rollback."""
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    db = TestingSessionLocal()
    try:
        yield db
        db.rollback()
    finally:
        db.close()

@pytest.fixture(autouse=True)
def _clean_db(engine):
    """The store commits inside requests, so wipe rows before each test."""
    with engine.begin() as conn:
        conn.execute(text("DELETE FROM guesses"))
        conn.execute(text("DELETE FROM games"))
    yield

@pytest.fixture(autouse=True)
def override_dep(db_session):
    """Force the app to use our test session for every request."""
    def _get_db_for_tests():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _get_db_for_tests
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    return TestClient(app)

class ServiceTransport:
    """
    requests-style session backed by TestClient. The per-request timeout is
    recorded, not forwarded: TestClient deprecates that argument.
    """

    def __init__(self, client):
        self.client = client
        self.timeouts = []

    def post(self, url, timeout=None, **kwargs):
        self.timeouts.append(timeout)
        return self.client.post(url, **kwargs)

    def delete(self, url, timeout=None, **kwargs):
        self.timeouts.append(timeout)
        return self.client.delete(url, **kwargs)

@pytest.fixture
def api(client) -> MastermindAPI:
    # The real client code, talking HTTP to the in-process service
    return MastermindAPI(base_url="http://testserver", timeout=5, session=ServiceTransport(client))

@pytest.fixture
def fixed_secret(monkeypatch):
    """Make POST /game hand out a known secret: call it with the digits you want."""
    import mastermind.server.app as server_app

    def _set(secret):
        monkeypatch.setattr(server_app, "generate_secret", lambda: list(secret))
    return _set
