import uuid
import pytest
from unittest.mock import patch
from sqlalchemy.exc import IntegrityError

from student_records.db import models, schemas
from student_records.db.repositories import records as record_repo
from student_records.db.repositories import registries as registry_repo
from student_records.exceptions import DuplicateNiaError
from tests.conftest import make_user


def _enrollment(nia=12345, **overrides):
    data = dict(
        nia=nia,
        nombre="Ana Pérez",
        curp="XXX",
        telefono_tutor=5551112222,
        email_tutor="a@x.com",
    )
    data.update(overrides)
    return schemas.EnrollmentCreate(**data)


def test_create_get_delete_registry(db):
    admin, _ = make_user(db, "admin@example.com")
    registry = registry_repo.create_registry(db, schemas.RegistryCreate(name="Primaria 5"), admin.id)
    assert registry.created_by == admin.id
    assert registry.entry_count == 0

    fetched = registry_repo.get_registry(db, registry.id)
    assert fetched.name == "Primaria 5"

    assert registry_repo.delete_registry(db, registry.id) is True
    assert registry_repo.get_registry(db, registry.id) is None
    assert registry_repo.delete_registry(db, uuid.uuid4()) is False


def test_enroll_writes_record_and_index_entry(db):
    admin, _ = make_user(db, "admin@example.com")
    guardian, _ = make_user(db, "tutor@example.com")
    registry = registry_repo.create_registry(db, schemas.RegistryCreate(), admin.id)

    record = record_repo.enroll_student(db, registry.id, _enrollment(), guardian.id)
    assert record.owner_user_id == guardian.id
    assert record.grado == 0
    assert record.grupo == "unassigned"

    entry = registry_repo.get_entry(db, registry.id, 12345)
    assert entry.record_id == record.id
    assert registry_repo.count_entries(db, registry.id) == 1
    assert [r.id for r in registry_repo.get_registries_indexing_record(db, record.id)] == [registry.id]


def test_duplicate_index_key_rolls_back_whole_enrollment(db):
    admin, _ = make_user(db, "admin@example.com")
    guardian, _ = make_user(db, "tutor@example.com")
    registry = registry_repo.create_registry(db, schemas.RegistryCreate(), admin.id)
    first = record_repo.enroll_student(db, registry.id, _enrollment(), guardian.id)

    # Bypasses the service pre-check, as a concurrent enrollment would
    with pytest.raises(DuplicateNiaError):
        record_repo.enroll_student(db, registry.id, _enrollment(nombre="Otra"), guardian.id)

    assert db.query(models.StudentRecord).count() == 1
    assert registry_repo.count_entries(db, registry.id) == 1
    assert registry_repo.get_entry(db, registry.id, 12345).record_id == first.id


def test_same_nia_allowed_in_different_registries(db):
    admin, _ = make_user(db, "admin@example.com")
    guardian, _ = make_user(db, "tutor@example.com")
    r1 = registry_repo.create_registry(db, schemas.RegistryCreate(), admin.id)
    r2 = registry_repo.create_registry(db, schemas.RegistryCreate(), admin.id)
    a = record_repo.enroll_student(db, r1.id, _enrollment(), guardian.id)
    b = record_repo.enroll_student(db, r2.id, _enrollment(), guardian.id)
    assert a.id != b.id
    assert registry_repo.get_entry(db, r2.id, 12345).record_id == b.id


def test_field_group_updates_and_owner_listing(db):
    admin, _ = make_user(db, "admin@example.com")
    guardian, _ = make_user(db, "tutor@example.com")
    other, _ = make_user(db, "other@example.com")
    registry = registry_repo.create_registry(db, schemas.RegistryCreate(), admin.id)
    record = record_repo.enroll_student(db, registry.id, _enrollment(), guardian.id)
    record_repo.enroll_student(db, registry.id, _enrollment(nia=2), other.id)

    updated = record_repo.update_contact(db, record.id, schemas.ContactUpdate(telefono_tutor=5559998888, email_tutor="b@x.com"))
    assert (updated.telefono_tutor, updated.email_tutor) == (5559998888, "b@x.com")
    assert updated.grado == 0

    updated = record_repo.update_academic(db, record.id, 3, "3B")
    assert (updated.grado, updated.grupo) == (3, "3B")
    assert updated.email_tutor == "b@x.com"

    assert record_repo.update_academic(db, uuid.uuid4(), 1, "1A") is None
    assert [r.nia for r in record_repo.get_records_by_owner(db, guardian.id)] == [12345]


def _fk_violation():
    return IntegrityError("INSERT INTO registry_entries", {}, Exception("violates foreign key constraint"))


def test_non_duplicate_integrity_error_is_not_reported_as_duplicate(db):
    admin, _ = make_user(db, "admin@example.com")
    guardian, _ = make_user(db, "tutor@example.com")
    registry = registry_repo.create_registry(db, schemas.RegistryCreate(), admin.id)

    with patch.object(db, "commit", side_effect=_fk_violation()):
        with pytest.raises(IntegrityError):
            record_repo.enroll_student(db, registry.id, _enrollment(), guardian.id)

    assert registry_repo.count_entries(db, registry.id) == 0
    assert db.query(models.StudentRecord).count() == 0


def test_delete_registry_reraises_integrity_error(db):
    admin, _ = make_user(db, "admin@example.com")
    registry = registry_repo.create_registry(db, schemas.RegistryCreate(), admin.id)

    with patch.object(db, "commit", side_effect=_fk_violation()):
        with pytest.raises(IntegrityError):
            registry_repo.delete_registry(db, registry.id)

    assert registry_repo.get_registry(db, registry.id) is not None


def test_entry_count_follows_the_index(db):
    admin, _ = make_user(db, "admin@example.com")
    guardian, _ = make_user(db, "tutor@example.com")
    registry = registry_repo.create_registry(db, schemas.RegistryCreate(), admin.id)
    record_repo.enroll_student(db, registry.id, _enrollment(nia=1), guardian.id)
    record_repo.enroll_student(db, registry.id, _enrollment(nia=2), guardian.id)

    assert registry_repo.get_registry(db, registry.id).entry_count == 2


def test_index_entry_links_back_to_its_registry(db):
    admin, _ = make_user(db, "admin@example.com")
    guardian, _ = make_user(db, "tutor@example.com")
    registry = registry_repo.create_registry(db, schemas.RegistryCreate(), admin.id)
    record_repo.enroll_student(db, registry.id, _enrollment(), guardian.id)

    # 'registry' is reserved by declarative mapping and must stay unused
    assert "registry" not in models.RegistryEntry.__mapper__.relationships
    assert registry_repo.get_entry(db, registry.id, 12345).parent.id == registry.id
