"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and all ORM classes from a single import point.
"""

from .base import Base, now_utc  # re-export

# Domain models
from .users import User
from .registries import Registry, RegistryEntry
from .records import StudentRecord, DEFAULT_GRADO, DEFAULT_GRUPO
from .audit import AuditLog

__all__ = [
    # base
    "Base",
    "now_utc",
    # users
    "User",
    # registries
    "Registry",
    "RegistryEntry",
    # records
    "StudentRecord",
    "DEFAULT_GRADO",
    "DEFAULT_GRUPO",
    # audit
    "AuditLog",
]
