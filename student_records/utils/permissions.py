"""
Ownership and administration checks for registries and student records.

``current_user`` is the request context dict built by
``student_records.api.deps.get_current_user_context``; only its ``id`` and
``is_superadmin`` keys are consulted here.
"""
from typing import Any, Dict, Iterable, Optional


def is_superadmin(current_user: Optional[Dict[str, Any]]) -> bool:
    return bool(current_user and current_user.get("is_superadmin"))


def is_record_owner(record, current_user: Optional[Dict[str, Any]]) -> bool:
    """True when the caller is the guardian who enrolled the record."""
    if record is None or not current_user:
        return False
    uid = current_user.get("id")
    return uid is not None and getattr(record, "owner_user_id", None) == uid


def is_registry_admin(registry, current_user: Optional[Dict[str, Any]]) -> bool:
    """True for the registry's creator and for superadmins."""
    if registry is None or not current_user:
        return False
    if is_superadmin(current_user):
        return True
    uid = current_user.get("id")
    return uid is not None and getattr(registry, "created_by", None) == uid


def can_read_record(record, current_user: Optional[Dict[str, Any]], indexing_registries: Iterable = ()) -> bool:
    """Owner, superadmin, or the admin of any registry whose index lists the record."""
    if record is None or not current_user:
        return False
    if is_superadmin(current_user) or is_record_owner(record, current_user):
        return True
    return any(is_registry_admin(r, current_user) for r in indexing_registries)
