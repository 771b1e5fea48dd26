"""Media library models."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship

from sassy.core.users.models import User, generate_id
from sassy.extensions import db


class Media(db.Model):
    __tablename__ = "media"

    id: Mapped[str] = mapped_column(db.String(64), primary_key=True, default=lambda: generate_id("media"))
    name: Mapped[str] = mapped_column(db.String(255), nullable=False)
    key: Mapped[str] = mapped_column(db.String(512), unique=True, nullable=False, index=True)
    url: Mapped[str] = mapped_column(db.String(1024), nullable=False)
    size: Mapped[int] = mapped_column(db.Integer, nullable=False, default=0)
    content_type: Mapped[str | None] = mapped_column(db.String(128))
    author_id: Mapped[str | None] = mapped_column(db.ForeignKey("user.id", ondelete="SET NULL"), index=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)

    author: Mapped[User | None] = relationship(User, lazy="joined")
