from pydantic import BaseModel, EmailStr, Field
from typing import List
import uuid


class UserLoginModel(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthenticatedUser(BaseModel):
    id: uuid.UUID
    name: str
    email: EmailStr
    roles: List[str]


class LoginResponse(BaseModel):
    token: str
    user: AuthenticatedUser
