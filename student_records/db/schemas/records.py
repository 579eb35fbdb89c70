import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

# Column limits: nia and telefono_tutor are BIGINT, grado is INTEGER
MAX_BIGINT = 2**63 - 1
MAX_INTEGER = 2**31 - 1


class EnrollmentCreate(BaseModel):
    nia: int = Field(ge=0, le=MAX_BIGINT)
    nombre: str
    curp: str
    telefono_tutor: int = Field(ge=0, le=MAX_BIGINT)
    email_tutor: str


class ContactUpdate(BaseModel):
    telefono_tutor: int = Field(ge=0, le=MAX_BIGINT)
    email_tutor: str


class AcademicUpdate(BaseModel):
    registry_id: uuid.UUID
    grado: int = Field(ge=0, le=MAX_INTEGER)
    grupo: str


class BasicFields(BaseModel):
    nia: int
    nombre: str
    curp: str


class StudentRecord(BaseModel):
    id: uuid.UUID
    owner_user_id: uuid.UUID
    nia: int
    nombre: str
    curp: str
    telefono_tutor: int
    email_tutor: str
    grado: int
    grupo: str
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
