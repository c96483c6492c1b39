"""
Shared fixtures: an in-memory SQLite database per test and a TestClient
wired to it through the get_db dependency.
"""
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.logging import configure_logging
from app.models.profile_db.profile_db import UserProfile  # noqa: F401
from app.models.match_db.match_db import Match  # noqa: F401
from main import app


@pytest.fixture(autouse=True)
def structured_logging():
    configure_logging(log_level="DEBUG", cache_loggers=False)


# ============================================================================
# Fixtures: plain profile objects for the scoring engine
# ============================================================================

def make_profile(**overrides) -> SimpleNamespace:
    values = {
        "id": "profile",
        "name": "Test User",
        "email": "test@example.com",
        "cleanliness": 3,
        "social_level": 3,
        "sleep_schedule": 3,
        "guest_frequency": 3,
        "smoking": False,
        "drinking": False,
        "pets": False,
        "interests": [],
    }
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.fixture
def current_user() -> SimpleNamespace:
    return make_profile(
        id="current",
        name="Alex",
        cleanliness=5,
        social_level=2,
        sleep_schedule=4,
        guest_frequency=1,
        smoking=False,
        drinking=False,
        pets=True,
        interests=["hiking", "reading"],
    )


@pytest.fixture
def match_user() -> SimpleNamespace:
    return make_profile(
        id="match",
        name="Sam",
        cleanliness=3,
        social_level=4,
        sleep_schedule=4,
        guest_frequency=3,
        smoking=False,
        drinking=True,
        pets=False,
        interests=["hiking", "gaming"],
    )


@pytest.fixture
def match_record() -> SimpleNamespace:
    return SimpleNamespace(id="match-1", user1_id="current", user2_id="match")


# ============================================================================
# Fixtures: database and API client
# ============================================================================

@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def profile_payload():
    def build(name: str, email: str, **survey) -> dict:
        payload = {"name": name, "email": email}
        payload.update(survey)
        return payload
    return build


@pytest.fixture
def profile_factory():
    return make_profile
