"""
Registry API endpoints.

Create, inspect and tear down registries, look up index entries, and enroll
students into a registry.
"""
import uuid
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from student_records.db import schemas
from student_records.db.database import get_db
from student_records.api.deps import get_current_user_context
from student_records.api.errors import to_http_exception
from student_records.exceptions import RecordNotRegisteredError, RecordsError
from student_records.services import EnrollmentService

router = APIRouter(prefix="/registries", tags=["registries"])


@router.post("/", response_model=schemas.Registry, status_code=status.HTTP_201_CREATED)
def create_registry_endpoint(
    registry: schemas.RegistryCreate | None = None,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    u, current_user = user_context
    return EnrollmentService(db).create_registry(current_user, registry)


@router.get("/{registry_id}", response_model=schemas.Registry)
def get_registry_endpoint(
    registry_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    try:
        return EnrollmentService(db).get_registry(registry_id)
    except RecordsError as e:
        raise to_http_exception(e)


@router.delete("/{registry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_registry_endpoint(
    registry_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    u, current_user = user_context
    try:
        EnrollmentService(db).teardown_registry(registry_id, current_user)
    except RecordsError as e:
        raise to_http_exception(e)
    return None


@router.get("/{registry_id}/index/{nia}", response_model=schemas.RegistryEntry)
def lookup_index_entry_endpoint(
    registry_id: uuid.UUID,
    nia: int = Path(ge=0, le=schemas.MAX_BIGINT),
    db: Session = Depends(get_db),
):
    try:
        return EnrollmentService(db).lookup_entry(registry_id, nia)
    except RecordNotRegisteredError:
        raise HTTPException(status_code=404, detail="Index entry not found")
    except RecordsError as e:
        raise to_http_exception(e)


@router.post(
    "/{registry_id}/enrollments",
    response_model=schemas.StudentRecord,
    status_code=status.HTTP_201_CREATED,
)
def enroll_student_endpoint(
    registry_id: uuid.UUID,
    enrollment: schemas.EnrollmentCreate,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    u, current_user = user_context
    try:
        return EnrollmentService(db).enroll_student(registry_id, enrollment, current_user)
    except RecordsError as e:
        raise to_http_exception(e)
