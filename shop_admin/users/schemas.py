from pydantic import BaseModel, Field, ConfigDict, EmailStr
from datetime import datetime
import uuid
from typing import List, Optional

from shop_admin.roles.schemas import RoleResponse


class UserBase(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr


class UserCreate(UserBase):
    password: str = Field(min_length=6)
    roles: List[str] = Field(default_factory=list, description="Role names, at least one is required")


class UserUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6)
    roles: Optional[List[str]] = None


class UserResponse(UserBase):
    uid: uuid.UUID
    roles: List[RoleResponse]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
