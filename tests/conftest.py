"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Users and their JWT headers
"""

import pytest
from fastapi.testclient import TestClient

from optahire.core.database import Base, Database, get_db
from optahire.core.security import create_access_token
from optahire.models.user import User
from main import create_app


@pytest.fixture
def database(tmp_path):
    """
    Fresh SQLite database file per test with all tables created.

    A file (not :memory:) so the data survives the app disposing its pool on shutdown.
    """
    database = Database(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    database.init_db()
    yield database
    Base.metadata.drop_all(bind=database.engine)
    database.dispose()


@pytest.fixture
def db_session(database):
    """
    Database session shared by the test and the application.
    """
    db = database.session()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def app(database):
    return create_app(database)


@pytest.fixture
def client(app, db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def make_user(db_session, email="candidate@optahire.com", **overrides):
    """Insert a user and return it."""
    fields = {
        "first_name": "Candidate",
        "last_name": "User",
        "email": email,
        "phone": "+1234567893",
        "hashed_password": "not-a-real-hash",
        "is_verified": True,
        "is_candidate": True,
    }
    fields.update(overrides)

    user = User(**fields)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def auth_headers(user):
    """Bearer headers for a user."""
    token = create_access_token(data={"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def candidate(db_session):
    return make_user(db_session)


@pytest.fixture
def candidate_headers(candidate):
    return auth_headers(candidate)


@pytest.fixture
def admin(db_session):
    return make_user(
        db_session,
        email="admin@optahire.com",
        first_name="Admin",
        phone="+1234567890",
        is_admin=True,
        is_candidate=False,
    )


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def sample_resume_data():
    """Sample resume data for testing"""
    return {
        "title": "Backend Engineer",
        "summary": "Ten years building systems",
        "headline": "Distributed systems and data pipelines",
        "skills": ["Go", "SQL"],
        "experience": "Senior engineer at Acme Corp, 2015-2025, owned the payments platform.",
        "education": "BSc Computer Science, State University",
        "industry": "Fintech",
        "availability": "Immediate",
        "company": "Acme Corp",
        "achievements": "Cut p99 latency of the checkout API by 60%.",
        "portfolio": "https://example.com/portfolio",
    }
