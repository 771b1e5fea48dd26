"""Typed schemas for staff user IO."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sassy.core.auth.permissions import Role

if TYPE_CHECKING:
    from sassy.core.users.models import User


class UserCreateRequest(BaseModel):
    name: str = Field(min_length=3, max_length=120)
    password: str = Field(min_length=6)
    role: Role = Role.EDITOR

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value


class RoleUpdateRequest(BaseModel):
    role: Role


class UserResponse(BaseModel):
    id: str
    name: str
    role: Role
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


def serialize_user(user: "User") -> dict:
    """JSON-ready user without the password hash."""
    return UserResponse.model_validate(user).model_dump(mode="json")
