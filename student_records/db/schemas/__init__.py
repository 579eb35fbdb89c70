"""
Domain-split Pydantic schemas re-exported from a single package.
"""

from .users import UserBase, UserCreate, User
from .registries import RegistryBase, RegistryCreate, Registry, RegistryEntry
from .records import (
    MAX_BIGINT,
    MAX_INTEGER,
    EnrollmentCreate,
    ContactUpdate,
    AcademicUpdate,
    BasicFields,
    StudentRecord,
)
from .audits import AuditLogBase, AuditLogCreate, AuditLog

__all__ = [
    "MAX_BIGINT",
    "MAX_INTEGER",
    # users
    "UserBase",
    "UserCreate",
    "User",
    # registries
    "RegistryBase",
    "RegistryCreate",
    "Registry",
    "RegistryEntry",
    # records
    "EnrollmentCreate",
    "ContactUpdate",
    "AcademicUpdate",
    "BasicFields",
    "StudentRecord",
    # audits
    "AuditLogBase",
    "AuditLogCreate",
    "AuditLog",
]
