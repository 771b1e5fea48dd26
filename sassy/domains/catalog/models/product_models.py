"""Catalog domain models."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship

from sassy.core.users.models import User, generate_id
from sassy.extensions import db


class Product(db.Model):
    __tablename__ = "product"
    __table_args__ = (
        db.Index("ix_product_published_created", "published", "created_at"),
        db.Index("ix_product_brand", "brand"),
        db.Index("ix_product_category", "category"),
    )

    id: Mapped[str] = mapped_column(db.String(64), primary_key=True, default=lambda: generate_id("prod"))
    name: Mapped[str] = mapped_column(db.String(255), nullable=False)
    image: Mapped[str | None] = mapped_column(db.String(1024))
    brand: Mapped[str] = mapped_column(db.String(120), nullable=False)
    category: Mapped[str] = mapped_column(db.String(120), nullable=False)
    subcategory: Mapped[str | None] = mapped_column(db.String(120))
    sizes: Mapped[list] = mapped_column(db.JSON, nullable=False, default=list)
    concerns: Mapped[list] = mapped_column(db.JSON, nullable=False, default=list)
    description: Mapped[str] = mapped_column(db.Text, nullable=False, default="")
    featured: Mapped[bool] = mapped_column(default=False, nullable=False)
    published: Mapped[bool] = mapped_column(default=True, nullable=False)
    author_id: Mapped[str | None] = mapped_column(db.ForeignKey("user.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    author: Mapped[User | None] = relationship(User, lazy="joined")
