"""
Student record repository functions.

Enrollment writes the record and its index entry in one transaction; the
remaining helpers read or overwrite individual field groups.
"""
from __future__ import annotations

import uuid
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from student_records.db import models, schemas
from student_records.db.repositories import registries as registry_repo
from student_records.exceptions import DuplicateNiaError


def enroll_student(
    db: Session,
    registry_id: uuid.UUID,
    enrollment: schemas.EnrollmentCreate,
    owner_user_id: uuid.UUID,
) -> models.StudentRecord:
    """Create a record owned by ``owner_user_id`` and index it under its nia.

    Raises DuplicateNiaError (after rolling back) when the registry already
    holds that nia, including when a concurrent enrollment wins the race.
    Other integrity failures are rolled back and re-raised.
    """
    db_record = models.StudentRecord(
        owner_user_id=owner_user_id,
        nia=enrollment.nia,
        nombre=enrollment.nombre,
        curp=enrollment.curp,
        telefono_tutor=enrollment.telefono_tutor,
        email_tutor=enrollment.email_tutor,
        grado=models.DEFAULT_GRADO,
        grupo=models.DEFAULT_GRUPO,
    )
    try:
        db.add(db_record)
        db.flush()
        db.add(models.RegistryEntry(
            registry_id=registry_id,
            nia=enrollment.nia,
            record_id=db_record.id,
        ))
        db.commit()
    except IntegrityError:
        db.rollback()
        # Only the index primary key means a duplicate; anything else (a
        # registry deleted mid-enrollment, say) propagates unchanged
        if registry_repo.get_entry(db, registry_id, enrollment.nia) is not None:
            raise DuplicateNiaError(registry_id, enrollment.nia)
        raise
    db.refresh(db_record)
    return db_record


def get_record(db: Session, record_id: uuid.UUID):
    return db.query(models.StudentRecord).filter(models.StudentRecord.id == record_id).first()


def get_records_by_owner(db: Session, owner_user_id: uuid.UUID, skip: int = 0, limit: int = 100):
    return (
        db.query(models.StudentRecord)
        .filter(models.StudentRecord.owner_user_id == owner_user_id)
        .order_by(models.StudentRecord.created_at)
        .offset(skip)
        .limit(limit)
        .all()
    )


def update_contact(db: Session, record_id: uuid.UUID, contact: schemas.ContactUpdate):
    db_record = get_record(db, record_id)
    if db_record:
        db_record.telefono_tutor = contact.telefono_tutor
        db_record.email_tutor = contact.email_tutor
        db.commit()
        db.refresh(db_record)
    return db_record


def update_academic(db: Session, record_id: uuid.UUID, grado: int, grupo: str):
    db_record = get_record(db, record_id)
    if db_record:
        db_record.grado = grado
        db_record.grupo = grupo
        db.commit()
        db.refresh(db_record)
    return db_record
