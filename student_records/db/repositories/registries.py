"""
Registry repository functions.

Implements create/read/delete for registries and direct key lookups into a
registry's index.
"""
from __future__ import annotations

import uuid
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from student_records.db import models, schemas


def create_registry(db: Session, registry: schemas.RegistryCreate, user_id: uuid.UUID):
    db_registry = models.Registry(
        name=registry.name,
        created_by=user_id,
    )
    db.add(db_registry)
    db.commit()
    db.refresh(db_registry)
    return db_registry


def get_registry(db: Session, registry_id: uuid.UUID) -> Optional[models.Registry]:
    return db.query(models.Registry).filter(models.Registry.id == registry_id).first()


def get_entry(db: Session, registry_id: uuid.UUID, nia: int) -> Optional[models.RegistryEntry]:
    return (
        db.query(models.RegistryEntry)
        .filter(
            models.RegistryEntry.registry_id == registry_id,
            models.RegistryEntry.nia == nia,
        )
        .first()
    )


def count_entries(db: Session, registry_id: uuid.UUID) -> int:
    return db.query(models.RegistryEntry).filter(models.RegistryEntry.registry_id == registry_id).count()


def get_registries_indexing_record(db: Session, record_id: uuid.UUID) -> List[models.Registry]:
    return (
        db.query(models.Registry)
        .join(models.RegistryEntry, models.RegistryEntry.registry_id == models.Registry.id)
        .filter(models.RegistryEntry.record_id == record_id)
        .all()
    )


def delete_registry(db: Session, registry_id: uuid.UUID) -> bool:
    """Delete a registry row. Callers must ensure its index is empty first.

    An IntegrityError (an entry inserted after that check) is rolled back
    and re-raised for the caller to report.
    """
    db_registry = get_registry(db, registry_id)
    if not db_registry:
        return False
    try:
        db.delete(db_registry)
        db.commit()
        return True
    except IntegrityError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to delete registry {registry_id}: {str(e)}")
