import uuid
from unittest.mock import patch

from student_records.audit import AuditAction, AuditStatus, log, log_record, log_registry, try_log
from student_records.db import models, schemas
from student_records.db.repositories import registries as registry_repo
from tests.conftest import make_user


def test_log_basic(db):
    user, _ = make_user(db, f"tester_{uuid.uuid4().hex}@example.com")
    registry = registry_repo.create_registry(db, schemas.RegistryCreate(name="R"), user.id)
    entry = log(
        db,
        action=AuditAction.REGISTRY_CREATE,
        status=AuditStatus.SUCCESS,
        target_type="registry",
        target_id=registry.id,
        actor_user_id=user.id,
        registry_id=registry.id,
        metadata={"foo": "bar"},
    )
    assert entry.action_type == "registry_create"
    assert entry.status == "success"
    assert entry.target_id == registry.id
    assert entry.get_metadata().get("foo") == "bar"


def test_log_enums_vs_strings(db):
    user, _ = make_user(db, "strings@example.com")
    entry = log(
        db,
        action="custom_action",
        status="custom_status",
        target_type="custom",
        actor_user_id=user.id,
    )
    assert entry.action_type == "custom_action"
    assert entry.status == "custom_status"
    assert entry.get_metadata() == {}


def test_record_wrapper_keeps_reason(db):
    user, _ = make_user(db, "wrapper@example.com")
    entry = log_record(
        db,
        actor_user_id=user.id,
        registry_id=None,
        record_id=None,
        action=AuditAction.RECORD_ENROLL,
        status=AuditStatus.FAILURE,
        reason="duplicate",
        metadata={"nia": 7},
    )
    assert entry.target_type == "student_record"
    assert entry.reason == "duplicate"
    assert entry.get_metadata() == {"nia": 7}


def test_registry_delete_is_not_linked_by_foreign_key(db):
    user, _ = make_user(db, "deleter@example.com")
    rid = uuid.uuid4()
    entry = log_registry(db, actor_user_id=user.id, registry_id=rid, action=AuditAction.REGISTRY_DELETE)
    assert entry.target_id == rid
    assert entry.registry_id is None


def test_try_log_swallows_write_failures(db):
    user, _ = make_user(db, "flaky@example.com")
    with patch("student_records.audit.audit_repo.create_audit_log", side_effect=RuntimeError("db down")):
        result = try_log(
            db,
            action=AuditAction.RECORD_CONTACT_UPDATE,
            target_type="student_record",
            actor_user_id=user.id,
        )
    assert result is None
    assert db.query(models.AuditLog).count() == 0
