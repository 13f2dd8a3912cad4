from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
import uuid


class RoleCreate(BaseModel):
    name: str = Field(min_length=1)


class RoleUpdate(BaseModel):
    name: str = Field(min_length=1)


class RoleResponse(BaseModel):
    uid: uuid.UUID
    name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
