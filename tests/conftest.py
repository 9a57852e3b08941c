# /tests/conftest.py

import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tutorhub.db.database import get_db, init_db
from tutorhub.main import app
from tutorhub.models.profile_model import Profile, UserType


# --- Service Doubles ---

@pytest.fixture
def mock_db_service():
    """Provides a mock of the DatabaseService for dependency injection."""
    return MagicMock()


@pytest.fixture
def teacher_profile():
    return Profile(id="prf_teacher", name="Asha Rao", email="asha@example.com", user_type=UserType.TEACHER)


@pytest.fixture
def parent_profile():
    return Profile(id="prf_parent", name="Vikram Shah", email="vikram@example.com", user_type=UserType.PARENT)


# --- In-Memory Database for API Tests ---

@pytest.fixture
def db_session():
    """
    A fresh in-memory SQLite database per test. StaticPool keeps the single
    connection alive so every session sees the same tables.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    """
    A TestClient whose requests share the in-memory session. Not entered as a
    context manager, so the startup hook never touches the real database.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _register(client, name, email, user_type):
    response = client.post("/api/profiles", json={"name": name, "email": email, "user_type": user_type})
    assert response.status_code == 201, response.text
    return response.json()["id"]


@pytest.fixture
def seeded(client):
    """
    Registers one teacher, one parent and one student profile, and enrolls the
    student linked to both. Returns the ids and ready-made request headers.
    """
    teacher_id = _register(client, "Asha Rao", "asha@example.com", "teacher")
    parent_id = _register(client, "Vikram Shah", "vikram@example.com", "parent")
    student_profile_id = _register(client, "Meera Shah", "meera@example.com", "Student")

    teacher_headers = {"X-Profile-Id": teacher_id}
    response = client.post("/api/students", headers=teacher_headers, json={
        "name": "Meera Shah",
        "email": "meera@example.com",
        "class_label": "10th",
        "subjects": ["Maths", "Physics"],
        "parent_id": parent_id,
        "profile_id": student_profile_id,
    })
    assert response.status_code == 201, response.text

    return {
        "teacher_id": teacher_id,
        "parent_id": parent_id,
        "student_id": response.json()["id"],
        "teacher": teacher_headers,
        "parent": {"X-Profile-Id": parent_id},
        "student": {"X-Profile-Id": student_profile_id},
    }
