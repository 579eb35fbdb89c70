"""
Enrollment service: registries, student enrollment and record updates.

Every public method is one transaction. Failed checks raise a
``RecordsError`` before anything is written, and repository writes roll
back on error, so a rejected call leaves no partial state.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from student_records.audit import AuditAction, AuditStatus, log_record, log_registry
from student_records.db import models, schemas
from student_records.db.repositories import records as record_repo
from student_records.db.repositories import registries as registry_repo
from student_records.exceptions import (
    DuplicateNiaError,
    NotRecordOwnerError,
    NotRegistryAdminError,
    RecordNotFoundError,
    RecordNotRegisteredError,
    RegistryNotEmptyError,
    RegistryNotFoundError,
)
from student_records.utils.permissions import (
    can_read_record,
    is_record_owner,
    is_registry_admin,
)

logger = logging.getLogger(__name__)


class EnrollmentService:
    """Service class for registry and student record operations."""

    def __init__(self, db: Session):
        self.db = db

    # Registries

    def create_registry(self, current_user: Dict[str, Any], registry: Optional[schemas.RegistryCreate] = None) -> models.Registry:
        """Create an empty registry administered by the caller."""
        registry = registry or schemas.RegistryCreate()
        created = registry_repo.create_registry(self.db, registry, current_user["id"])
        logger.info("registry_created: id=%s by=%s", created.id, current_user["id"])
        log_registry(
            self.db,
            actor_user_id=current_user["id"],
            registry_id=created.id,
            action=AuditAction.REGISTRY_CREATE,
            name=created.name,
        )
        return created

    def get_registry(self, registry_id: uuid.UUID) -> models.Registry:
        registry = registry_repo.get_registry(self.db, registry_id)
        if not registry:
            raise RegistryNotFoundError(registry_id)
        return registry

    def lookup_entry(self, registry_id: uuid.UUID, nia: int) -> models.RegistryEntry:
        """Direct key lookup of ``nia`` in a registry's index."""
        self.get_registry(registry_id)
        entry = registry_repo.get_entry(self.db, registry_id, nia)
        if not entry:
            raise RecordNotRegisteredError(registry_id, nia)
        return entry

    def teardown_registry(self, registry_id: uuid.UUID, current_user: Dict[str, Any]) -> None:
        """Delete a registry whose index is empty."""
        registry = self.get_registry(registry_id)
        if not is_registry_admin(registry, current_user):
            raise NotRegistryAdminError(registry_id, current_user.get("id"))
        entry_count = registry_repo.count_entries(self.db, registry_id)
        if entry_count:
            raise RegistryNotEmptyError(registry_id, entry_count)
        try:
            registry_repo.delete_registry(self.db, registry_id)
        except IntegrityError:
            # An enrollment landed between the count and the delete
            raise RegistryNotEmptyError(registry_id, registry_repo.count_entries(self.db, registry_id))
        logger.info("registry_deleted: id=%s by=%s", registry_id, current_user["id"])
        log_registry(
            self.db,
            actor_user_id=current_user["id"],
            registry_id=registry_id,
            action=AuditAction.REGISTRY_DELETE,
        )

    # Records

    def enroll_student(
        self,
        registry_id: uuid.UUID,
        enrollment: schemas.EnrollmentCreate,
        current_user: Dict[str, Any],
    ) -> models.StudentRecord:
        """Create a record owned by the caller and index it under its nia.

        New records start at grado 0, grupo "unassigned".
        """
        self.get_registry(registry_id)
        try:
            if registry_repo.get_entry(self.db, registry_id, enrollment.nia):
                raise DuplicateNiaError(registry_id, enrollment.nia)
            record = record_repo.enroll_student(self.db, registry_id, enrollment, current_user["id"])
        except DuplicateNiaError as e:
            logger.warning("enroll_rejected: registry=%s nia=%s reason=duplicate", registry_id, enrollment.nia)
            log_record(
                self.db,
                actor_user_id=current_user["id"],
                registry_id=registry_id,
                record_id=None,
                action=AuditAction.RECORD_ENROLL,
                status=AuditStatus.FAILURE,
                reason=e.message,
                metadata={"nia": enrollment.nia},
            )
            raise
        except IntegrityError:
            # The only other constraint an enrollment can break is the
            # registry foreign key, i.e. the registry was torn down meanwhile
            if registry_repo.get_registry(self.db, registry_id) is None:
                raise RegistryNotFoundError(registry_id)
            raise
        logger.info("student_enrolled: registry=%s nia=%s record=%s", registry_id, record.nia, record.id)
        log_record(
            self.db,
            actor_user_id=current_user["id"],
            registry_id=registry_id,
            record_id=record.id,
            action=AuditAction.RECORD_ENROLL,
            metadata={"nia": record.nia},
        )
        return record

    def get_record(self, record_id: uuid.UUID, current_user: Dict[str, Any]) -> models.StudentRecord:
        """Return a record the caller may read; unreadable records look absent."""
        record = record_repo.get_record(self.db, record_id)
        if not record:
            raise RecordNotFoundError(record_id)
        indexing = registry_repo.get_registries_indexing_record(self.db, record_id)
        if not can_read_record(record, current_user, indexing):
            raise RecordNotFoundError(record_id)
        return record

    def read_basic_fields(self, record_id: uuid.UUID, current_user: Dict[str, Any]) -> schemas.BasicFields:
        record = self.get_record(record_id, current_user)
        return schemas.BasicFields(nia=record.nia, nombre=record.nombre, curp=record.curp)

    def list_records(self, current_user: Dict[str, Any], skip: int = 0, limit: int = 100) -> List[models.StudentRecord]:
        """Records owned by the caller."""
        return record_repo.get_records_by_owner(self.db, current_user["id"], skip=skip, limit=limit)

    def update_contact(
        self,
        record_id: uuid.UUID,
        contact: schemas.ContactUpdate,
        current_user: Dict[str, Any],
    ) -> models.StudentRecord:
        """Overwrite the guardian's phone and email. Owner only."""
        record = record_repo.get_record(self.db, record_id)
        if not record:
            raise RecordNotFoundError(record_id)
        if not is_record_owner(record, current_user):
            raise NotRecordOwnerError(record_id, current_user.get("id"))
        updated = record_repo.update_contact(self.db, record_id, contact)
        log_record(
            self.db,
            actor_user_id=current_user["id"],
            registry_id=None,
            record_id=record_id,
            action=AuditAction.RECORD_CONTACT_UPDATE,
        )
        return updated

    def assign_grade_group(
        self,
        registry_id: uuid.UUID,
        record_id: uuid.UUID,
        grado: int,
        grupo: str,
        current_user: Dict[str, Any],
    ) -> models.StudentRecord:
        """Overwrite grado and grupo of a record listed in ``registry_id``.

        The registry's index must hold the record's nia and point at this
        very record; otherwise RecordNotRegisteredError (code 0) is raised
        and the record is left unchanged.
        """
        registry = self.get_registry(registry_id)
        if not is_registry_admin(registry, current_user):
            raise NotRegistryAdminError(registry_id, current_user.get("id"))
        record = record_repo.get_record(self.db, record_id)
        if not record:
            raise RecordNotFoundError(record_id)
        entry = registry_repo.get_entry(self.db, registry_id, record.nia)
        if entry is None or entry.record_id != record.id:
            err = RecordNotRegisteredError(registry_id, record.nia)
            logger.warning("assign_rejected: registry=%s record=%s nia=%s", registry_id, record_id, record.nia)
            log_record(
                self.db,
                actor_user_id=current_user["id"],
                registry_id=registry_id,
                record_id=record_id,
                action=AuditAction.RECORD_ACADEMIC_UPDATE,
                status=AuditStatus.FAILURE,
                reason=err.message,
            )
            raise err
        previous = {"grado": record.grado, "grupo": record.grupo}
        updated = record_repo.update_academic(self.db, record_id, grado, grupo)
        log_record(
            self.db,
            actor_user_id=current_user["id"],
            registry_id=registry_id,
            record_id=record_id,
            action=AuditAction.RECORD_ACADEMIC_UPDATE,
            metadata={
                "old_grado": previous["grado"],
                "old_grupo": previous["grupo"],
                "new_grado": updated.grado,
                "new_grupo": updated.grupo,
            },
        )
        return updated
