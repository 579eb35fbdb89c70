import uuid
from types import SimpleNamespace

from student_records.utils.permissions import (
    can_read_record,
    is_record_owner,
    is_registry_admin,
    is_superadmin,
)


def _ctx(uid=None, superadmin=False):
    return {"id": uid or uuid.uuid4(), "is_superadmin": superadmin}


def test_record_owner_only_matches_owner():
    owner = _ctx()
    record = SimpleNamespace(owner_user_id=owner["id"])
    assert is_record_owner(record, owner) is True
    assert is_record_owner(record, _ctx()) is False
    assert is_record_owner(record, None) is False
    assert is_record_owner(None, owner) is False


def test_superadmin_is_not_record_owner():
    # Contact data stays with the guardian even for superadmins
    record = SimpleNamespace(owner_user_id=uuid.uuid4())
    assert is_record_owner(record, _ctx(superadmin=True)) is False


def test_registry_admin_is_creator_or_superadmin():
    creator = _ctx()
    registry = SimpleNamespace(created_by=creator["id"])
    assert is_registry_admin(registry, creator) is True
    assert is_registry_admin(registry, _ctx(superadmin=True)) is True
    assert is_registry_admin(registry, _ctx()) is False
    assert is_registry_admin(None, creator) is False
    assert is_superadmin(None) is False


def test_can_read_record_via_indexing_registry():
    admin = _ctx()
    stranger = _ctx()
    record = SimpleNamespace(owner_user_id=uuid.uuid4())
    registry = SimpleNamespace(created_by=admin["id"])
    assert can_read_record(record, admin, [registry]) is True
    assert can_read_record(record, admin, []) is False
    assert can_read_record(record, stranger, [registry]) is False
    assert can_read_record(record, _ctx(superadmin=True)) is True
    assert can_read_record(record, {"id": record.owner_user_id}) is True
