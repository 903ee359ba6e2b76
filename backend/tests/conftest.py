"""Shared fixtures: an isolated in-memory database and a TestClient."""
from __future__ import annotations

import os

# Configure the app before it is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["STORE_BACKEND"] = "sql"
os.environ["SEED_SAMPLE_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from student_tracker.database import Base, build_engine, get_db
from student_tracker.main import app
from student_tracker.schemas import StudentPayload
from student_tracker.store import InMemoryStudentStore, SqlStudentStore


def build_payload(**overrides) -> StudentPayload:
    data = {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "phone": "72254856",
        "grade": "10A",
        "enrollmentDate": "2023-09-01",
        "assessment1": 18,
        "assessment2": 19,
        "assessment3": 17,
    }
    data.update(overrides)
    return StudentPayload.model_validate(data)


@pytest.fixture()
def make_payload():
    return build_payload


@pytest.fixture()
def session_factory():
    engine = build_engine("sqlite:///:memory:", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
    yield factory
    engine.dispose()


@pytest.fixture()
def db_session(session_factory) -> Session:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def sql_store(db_session) -> SqlStudentStore:
    return SqlStudentStore(db_session)


@pytest.fixture()
def memory_store() -> InMemoryStudentStore:
    return InMemoryStudentStore()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
