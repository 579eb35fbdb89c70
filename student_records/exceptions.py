"""
Domain errors raised by the enrollment service.

Routers translate these into HTTP responses; each carries a stable numeric
``code`` so clients can tell rejection reasons apart without parsing text.
"""
from __future__ import annotations

import uuid
from typing import Optional

# Abort code for grade assignment on a record the registry does not list
E_NOT_REGISTERED = 0
E_DUPLICATE_NIA = 1
E_REGISTRY_NOT_FOUND = 2
E_RECORD_NOT_FOUND = 3
E_NOT_OWNER = 4
E_NOT_REGISTRY_ADMIN = 5
E_REGISTRY_NOT_EMPTY = 6


class RecordsError(Exception):
    """Base class for student records domain errors."""

    code: int = -1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateNiaError(RecordsError):
    code = E_DUPLICATE_NIA

    def __init__(self, registry_id: uuid.UUID, nia: int):
        super().__init__(f"nia {nia} is already registered in registry {registry_id}")
        self.registry_id = registry_id
        self.nia = nia


class RecordNotRegisteredError(RecordsError):
    code = E_NOT_REGISTERED

    def __init__(self, registry_id: uuid.UUID, nia: int):
        super().__init__(f"Record with nia {nia} is not registered in registry {registry_id}")
        self.registry_id = registry_id
        self.nia = nia


class RegistryNotFoundError(RecordsError):
    code = E_REGISTRY_NOT_FOUND

    def __init__(self, registry_id: uuid.UUID):
        super().__init__("Registry not found")
        self.registry_id = registry_id


class RecordNotFoundError(RecordsError):
    code = E_RECORD_NOT_FOUND

    def __init__(self, record_id: uuid.UUID):
        super().__init__("Record not found")
        self.record_id = record_id


class NotRecordOwnerError(RecordsError):
    code = E_NOT_OWNER

    def __init__(self, record_id: uuid.UUID, user_id: Optional[uuid.UUID] = None):
        super().__init__("Only the guardian who enrolled the student may change this record")
        self.record_id = record_id
        self.user_id = user_id


class NotRegistryAdminError(RecordsError):
    code = E_NOT_REGISTRY_ADMIN

    def __init__(self, registry_id: uuid.UUID, user_id: Optional[uuid.UUID] = None):
        super().__init__("Only the registry administrator may perform this operation")
        self.registry_id = registry_id
        self.user_id = user_id


class RegistryNotEmptyError(RecordsError):
    code = E_REGISTRY_NOT_EMPTY

    def __init__(self, registry_id: uuid.UUID, entry_count: int):
        super().__init__(f"Registry still indexes {entry_count} record(s)")
        self.registry_id = registry_id
        self.entry_count = entry_count
