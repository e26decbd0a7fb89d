"""User schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RoleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    alias: str


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)
    phone: str | None = Field(default=None, max_length=30)
    role: Literal["admin", "agent"] = "agent"


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str | None = None
    avatar_url: str | None = None
    must_change_password: bool
    last_login: datetime | None = None
    created_at: datetime | None = None
    is_active: bool
    role: RoleRead


__all__ = ["RoleRead", "UserCreate", "UserRead"]
