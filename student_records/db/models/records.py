import uuid
from sqlalchemy import BigInteger, Column, Integer, String, DateTime, ForeignKey, Index, Text
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, now_utc

DEFAULT_GRADO = 0
DEFAULT_GRUPO = "unassigned"


class StudentRecord(Base):
    __tablename__ = 'student_records'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    owner_user_id = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=False)
    # nia is written once at enrollment and never updated
    nia = Column(BigInteger, nullable=False)
    nombre = Column(Text, nullable=False)
    curp = Column(String(64), nullable=False)
    telefono_tutor = Column(BigInteger, nullable=False)
    email_tutor = Column(Text, nullable=False)
    grado = Column(Integer, nullable=False, default=DEFAULT_GRADO)
    grupo = Column(String(64), nullable=False, default=DEFAULT_GRUPO)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('idx_student_records_owner_user_id', 'owner_user_id'),
        Index('idx_student_records_nia', 'nia'),
    )
