import pytest
from fastapi.testclient import TestClient

from student_records.db import models
from student_records.db.database import SessionLocal, engine
from student_records.api.main import app


@pytest.fixture(scope="session", autouse=True)
def _schema():
    # database.py switches to in-memory SQLite (StaticPool) under pytest
    models.Base.metadata.create_all(bind=engine)
    yield
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.delenv("DEV_MODE", raising=False)
    monkeypatch.delenv("ADMIN_EMAILS", raising=False)
    yield


@pytest.fixture(autouse=True)
def _clean_tables():
    yield
    with engine.begin() as conn:
        for table in reversed(models.Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# Shorter alias used across the unit tests
@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def client():
    return TestClient(app)


def make_user(db, email: str, superadmin: bool = False):
    """Insert a user and return (orm_user, current_user_context)."""
    u = models.User(email=email, display_name=email.split('@')[0], is_superadmin=superadmin)
    db.add(u)
    db.commit()
    db.refresh(u)
    ctx = {
        "id": u.id,
        "email": u.email,
        "display_name": u.display_name,
        "is_superadmin": superadmin,
    }
    return u, ctx


def auth_headers(user: str):
    return {"x-auth-request-user": user, "x-auth-request-email": f"{user}@example.com"}
