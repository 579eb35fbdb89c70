"""
Student record API endpoints.

Guardians read their records and update contact data; registry
administrators assign grade and group.
"""
from typing import List
import uuid
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from student_records.db import schemas
from student_records.db.database import get_db
from student_records.api.deps import get_current_user_context
from student_records.api.errors import to_http_exception
from student_records.exceptions import RecordsError
from student_records.services import EnrollmentService

router = APIRouter(prefix="/records", tags=["records"])


@router.get("/", response_model=List[schemas.StudentRecord])
def list_my_records_endpoint(
    skip: int = Query(0, ge=0, le=schemas.MAX_BIGINT),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    u, current_user = user_context
    return EnrollmentService(db).list_records(current_user, skip=skip, limit=limit)


@router.get("/{record_id}", response_model=schemas.StudentRecord)
def get_record_endpoint(
    record_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    u, current_user = user_context
    try:
        return EnrollmentService(db).get_record(record_id, current_user)
    except RecordsError as e:
        raise to_http_exception(e)


@router.get("/{record_id}/basic", response_model=schemas.BasicFields)
def read_basic_fields_endpoint(
    record_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    u, current_user = user_context
    try:
        return EnrollmentService(db).read_basic_fields(record_id, current_user)
    except RecordsError as e:
        raise to_http_exception(e)


@router.put("/{record_id}/contact", response_model=schemas.StudentRecord)
def update_contact_endpoint(
    record_id: uuid.UUID,
    contact: schemas.ContactUpdate,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    u, current_user = user_context
    try:
        return EnrollmentService(db).update_contact(record_id, contact, current_user)
    except RecordsError as e:
        raise to_http_exception(e)


@router.put("/{record_id}/academic", response_model=schemas.StudentRecord)
def assign_grade_group_endpoint(
    record_id: uuid.UUID,
    payload: schemas.AcademicUpdate,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    u, current_user = user_context
    try:
        return EnrollmentService(db).assign_grade_group(
            payload.registry_id,
            record_id,
            payload.grado,
            payload.grupo,
            current_user,
        )
    except RecordsError as e:
        raise to_http_exception(e)
