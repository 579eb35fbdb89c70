import uuid
from sqlalchemy import BigInteger, Column, String, DateTime, ForeignKey, Index, func, select
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import column_property, relationship
from .base import Base, now_utc


class Registry(Base):
    __tablename__ = 'registries'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=True)
    # Institution administrator; the only non-owner allowed to touch academic fields
    created_by = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    # Never cascaded or nulled; the foreign key blocks deleting a non-empty registry
    entries = relationship("RegistryEntry", back_populates="parent", passive_deletes="all")


class RegistryEntry(Base):
    """One row of a registry's index: nia -> record id.

    The composite primary key is what rejects duplicate nia values.
    """
    __tablename__ = 'registry_entries'
    registry_id = Column(UUID(as_uuid=True), ForeignKey('registries.id'), primary_key=True)
    nia = Column(BigInteger, primary_key=True, autoincrement=False)
    record_id = Column(UUID(as_uuid=True), ForeignKey('student_records.id'), nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    parent = relationship("Registry", back_populates="entries")

    __table_args__ = (
        Index('idx_registry_entries_record_id', 'record_id'),
    )


# Counted in SQL when the registry row loads; the index itself is never pulled in
Registry.entry_count = column_property(
    select(func.count(RegistryEntry.nia))
    .where(RegistryEntry.registry_id == Registry.id)
    .correlate_except(RegistryEntry)
    .scalar_subquery()
)
