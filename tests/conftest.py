"""
Shared fixtures: an in-memory database per test, the FastAPI app bound to it,
and the terminal client's services talking to that app.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import worldsmith.models  # noqa: F401
from worldsmith.database import Base, build_engine, get_db
from worldsmith.main import app
from worldsmith.models.user import User
from worldsmith_client.api.client import WorldsmithClient
from worldsmith_client.api.query_cache import QueryCache
from worldsmith_client.game.state import AppState


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database shared across threads."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """TestClient with get_db pointed at the test database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager, so the startup seeding never runs
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user(db_session) -> User:
    user = User(username="gamemaster")
    user.set_password("changeme")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def world(client, user) -> dict:
    response = client.post("/api/worlds", json={
        "name": "Eldoria",
        "description": "A realm of ancient forests and smouldering peaks.",
        "user_id": user.id
    })
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def region(client, world) -> dict:
    response = client.post("/api/regions", json={
        "name": "Whispering Woods",
        "description": "An old-growth forest.",
        "type": "Forest",
        "world_id": world["id"]
    })
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def query_cache() -> QueryCache:
    return QueryCache()


@pytest.fixture
def api(client, query_cache) -> WorldsmithClient:
    """The terminal client's services, sending requests straight to the app."""
    return WorldsmithClient(session=client, cache=query_cache, server_url="")


@pytest.fixture
def state() -> AppState:
    return AppState()
