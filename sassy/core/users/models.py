"""Staff user model."""

from __future__ import annotations

import secrets
from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from sassy.core.auth.permissions import Role
from sassy.extensions import db


def generate_id(prefix: str) -> str:
    """Text primary keys like ``user_3f9c2a1b7d4e_lz8k2m``."""
    stamp = format(int(datetime.utcnow().timestamp() * 1000), "x")
    return f"{prefix}_{secrets.token_hex(6)}_{stamp}"


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)


class User(db.Model, TimestampMixin):
    __tablename__ = "user"

    id: Mapped[str] = mapped_column(db.String(64), primary_key=True, default=lambda: generate_id("user"))
    name: Mapped[str] = mapped_column(db.String(120), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(db.String(255), nullable=False)
    role: Mapped[str] = mapped_column(db.String(16), nullable=False, default=Role.EDITOR.value)

    @property
    def role_enum(self) -> Role:
        return Role(self.role)
