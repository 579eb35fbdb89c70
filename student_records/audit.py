"""
Audit logging helpers and enums.

Centralized helpers to persist normalized audit records with consistent
schema; includes convenience wrappers per target type.
"""
from __future__ import annotations
import logging
import uuid
from enum import Enum
from typing import Any, Optional, Dict
from sqlalchemy.orm import Session

from student_records.db import schemas
from student_records.db.repositories import audits as audit_repo

logger = logging.getLogger(__name__)


class AuditAction(str, Enum):
    # Registry
    REGISTRY_CREATE = "registry_create"
    REGISTRY_DELETE = "registry_delete"
    # Record
    RECORD_ENROLL = "record_enroll"
    RECORD_CONTACT_UPDATE = "record_contact_update"
    RECORD_ACADEMIC_UPDATE = "record_academic_update"


class AuditStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


def log(
    db: Session,
    *,
    action: AuditAction | str,
    status: AuditStatus | str = AuditStatus.SUCCESS,
    target_type: str,
    target_id: Optional[uuid.UUID] = None,
    actor_user_id: uuid.UUID,
    registry_id: Optional[uuid.UUID] = None,
    reason: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> schemas.AuditLog:
    """Central audit logging helper.

    Ensures consistent schema and a single place for enrichment.
    """
    # Persist pure string values, not Enum reprs (avoid 'AuditAction.XYZ')
    action_value = action.value if isinstance(action, AuditAction) else str(action)
    status_value = status.value if isinstance(status, AuditStatus) else str(status)
    audit_log = schemas.AuditLogCreate(
        action_type=action_value,
        status=status_value,
        target_type=target_type,
        target_id=target_id,
        reason=reason,
        metadata=metadata or {},
    )
    return audit_repo.create_audit_log(
        db,
        audit_log=audit_log,
        actor_user_id=actor_user_id,
        registry_id=registry_id,
    )


def try_log(db: Session, **kwargs) -> Optional[schemas.AuditLog]:
    """Best-effort variant of :func:`log` for use after a committed operation.

    An audit failure is logged and rolled back but never propagated, so it
    cannot undo or mask the outcome of the operation being recorded.
    """
    try:
        return log(db, **kwargs)
    except Exception as e:
        db.rollback()
        logger.warning("audit write failed: action=%s error=%s", kwargs.get("action"), e)
        return None


__all__ = ["AuditAction", "AuditStatus", "log", "try_log"]


# Convenience wrappers. Keep optional registry_id explicit.
def log_registry(db: Session, *, actor_user_id: uuid.UUID, registry_id: uuid.UUID, action: AuditAction, name: Optional[str] = None, status: AuditStatus | str = AuditStatus.SUCCESS):
    return try_log(
        db,
        action=action,
        status=status,
        target_type="registry",
        target_id=registry_id,
        actor_user_id=actor_user_id,
        # A deleted registry can no longer be referenced by foreign key
        registry_id=registry_id if action != AuditAction.REGISTRY_DELETE else None,
        metadata={"name": name} if name else None,
    )


def log_record(db: Session, *, actor_user_id: uuid.UUID, registry_id: Optional[uuid.UUID], record_id: Optional[uuid.UUID], action: AuditAction, status: AuditStatus | str = AuditStatus.SUCCESS, reason: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None):
    return try_log(
        db,
        action=action,
        status=status,
        target_type="student_record",
        target_id=record_id,
        actor_user_id=actor_user_id,
        registry_id=registry_id,
        reason=reason,
        metadata=metadata,
    )


__all__.extend(["log_registry", "log_record"])
