"""
Pytest configuration and shared fixtures.

Every test gets its own SQLite database file, so counter and pool state
never leaks between tests. Worker threads in the concurrency tests open
their own sessions from the same factory.
"""

import os
import tempfile
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Settings are read when the app package is first imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="telecalling-logs-"))

import app.models  # noqa: E402,F401
from app.database import Base, build_engine_args, get_db  # noqa: E402
from app.main import app as fastapi_app  # noqa: E402


@pytest.fixture
def engine(tmp_path):
    """Engine bound to a fresh SQLite file with all tables created."""
    url = f"sqlite:///{tmp_path / 'test.db'}"
    engine = create_engine(url, **build_engine_args(url))
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Session for service and repository tests. Uncommitted work is discarded."""
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def api_app(session_factory):
    """The FastAPI app with requests routed to the per-test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(api_app):
    return TestClient(api_app)


@pytest.fixture
def year_prefix():
    """Two-digit prefix the HTTP endpoints use for the current year."""
    return f"{datetime.now().year % 100:02d}"


@pytest.fixture
def record_payload():
    return {
        "carRegistrationNumber": "MH12AB1234",
        "yearOfRegistration": "2019",
        "ownerName": "Asha Patil",
        "ownershipSerialNumber": 1,
        "make": "Maruti",
        "model": "Swift",
        "variant": "VXI",
        "emailAddress": "asha@example.com",
        "customerContactNumber": "9876543210",
        "city": "Pune",
        "priority": "High",
    }
