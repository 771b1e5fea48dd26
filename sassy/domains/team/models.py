"""Team member models."""

from __future__ import annotations

from sqlalchemy.orm import Mapped, mapped_column

from sassy.core.users.models import TimestampMixin, generate_id
from sassy.extensions import db


class TeamMember(db.Model, TimestampMixin):
    __tablename__ = "team_member"

    id: Mapped[str] = mapped_column(db.String(64), primary_key=True, default=lambda: generate_id("team"))
    name: Mapped[str] = mapped_column(db.String(120), nullable=False)
    image: Mapped[str | None] = mapped_column(db.String(1024))
