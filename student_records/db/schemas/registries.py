import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict


class RegistryBase(BaseModel):
    name: str | None = None


class RegistryCreate(RegistryBase):
    pass


class Registry(RegistryBase):
    id: uuid.UUID
    created_by: uuid.UUID
    entry_count: int = 0
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class RegistryEntry(BaseModel):
    registry_id: uuid.UUID
    nia: int
    record_id: uuid.UUID
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
