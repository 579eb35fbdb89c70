import pytest
from fastapi import HTTPException

from student_records.api.auth import get_or_create_user, resolve_identity_from_headers
from student_records.api.deps import DEV_USER_EMAIL, get_current_user_context
from student_records.db import models

# Called outside FastAPI, so Header defaults must be replaced explicitly
_NO_HEADERS = {
    "x_auth_request_user": None,
    "x_auth_request_email": None,
    "x_forwarded_user": None,
    "x_forwarded_email": None,
}


def test_resolve_identity_prefers_auth_request_headers():
    name, email = resolve_identity_from_headers(
        x_auth_request_user="ana",
        x_auth_request_email="  Ana@Example.COM ",
        x_forwarded_user="other",
        x_forwarded_email="other@example.com",
    )
    assert name == "ana"
    assert email == "ana@example.com"


def test_resolve_identity_falls_back_to_forwarded_headers():
    name, email = resolve_identity_from_headers(None, None, "fw", "FW@example.com")
    assert (name, email) == ("fw", "fw@example.com")


def test_get_or_create_user_is_idempotent(db):
    first = get_or_create_user(db, email="tutor@example.com", display_name="Tutor")
    second = get_or_create_user(db, email="tutor@example.com")
    assert first.id == second.id
    assert db.query(models.User).count() == 1
    assert first.is_superadmin is False


def test_admin_emails_elevate_new_and_existing_users(db, monkeypatch):
    existing = get_or_create_user(db, email="director@example.com")
    assert existing.is_superadmin is False

    monkeypatch.setenv("ADMIN_EMAILS", "director@example.com, 'boss@example.com'")
    promoted = get_or_create_user(db, email="director@example.com")
    assert promoted.is_superadmin is True
    created = get_or_create_user(db, email="boss@example.com")
    assert created.is_superadmin is True


def test_current_user_context_requires_identity(db):
    with pytest.raises(HTTPException) as exc:
        get_current_user_context(db=db, **_NO_HEADERS)
    assert exc.value.status_code == 401


def test_current_user_context_builds_dict(db):
    headers = {**_NO_HEADERS, "x_auth_request_user": "luis", "x_auth_request_email": "luis@example.com"}
    user, ctx = get_current_user_context(db=db, **headers)
    assert ctx["id"] == user.id
    assert ctx["email"] == "luis@example.com"
    assert ctx["is_superadmin"] is False


def test_current_user_context_dev_mode(db, monkeypatch):
    monkeypatch.setenv("DEV_MODE", "true")
    monkeypatch.setenv("APP_BASE_URL", "http://localhost:8000")
    user, ctx = get_current_user_context(db=db, **_NO_HEADERS)
    assert user.email == DEV_USER_EMAIL
    assert ctx["display_name"] == "Development User"
