"""
Audit log API endpoints.

Superadmins may list every entry; registry administrators may list the
entries of their own registry.
"""
from typing import Optional, List
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from student_records.db.database import get_db
from student_records.db import schemas
from student_records.db.repositories import audits as audit_repo
from student_records.db.repositories import registries as registry_repo
from student_records.api.deps import get_current_user_context
from student_records.utils.permissions import is_registry_admin, is_superadmin

router = APIRouter(prefix="/audits", tags=["audits"])


@router.get("/", response_model=List[schemas.AuditLog])
def list_audit_logs(
    registry_id: Optional[uuid.UUID] = None,
    user_id: Optional[uuid.UUID] = None,
    action_type: Optional[str] = None,
    skip: int = Query(0, ge=0, le=schemas.MAX_BIGINT),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    user, current_user = user_context

    if not is_superadmin(current_user):
        if not registry_id:
            raise HTTPException(status_code=403, detail="Forbidden, registry_id is required for non-superadmins")
        registry = registry_repo.get_registry(db, registry_id)
        if not is_registry_admin(registry, current_user):
            raise HTTPException(status_code=403, detail="Forbidden")

    audit_logs = audit_repo.get_audit_logs(
        db,
        registry_id=registry_id,
        user_id=user_id,
        action_type=action_type,
        skip=skip,
        limit=limit,
    )
    # Schema expects .metadata (dict) but the model stores it as metadata_json
    return [
        schemas.AuditLog.model_validate({
            "id": log.id,
            "registry_id": log.registry_id,
            "actor_user_id": log.actor_user_id,
            "action_type": log.action_type,
            "status": log.status,
            "target_type": log.target_type,
            "target_id": log.target_id,
            "reason": log.reason,
            "metadata": log.get_metadata(),
            "created_at": log.created_at,
        })
        for log in audit_logs
    ]
