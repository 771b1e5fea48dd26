"""initial storefront schema

Revision ID: 20261019_initial_schema
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    ]


def upgrade():
    op.create_table(
        "user",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=16), nullable=False, server_default="EDITOR"),
        *_timestamps(),
    )
    op.create_index("ix_user_name", "user", ["name"], unique=True)

    op.create_table(
        "product",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("image", sa.String(length=1024)),
        sa.Column("brand", sa.String(length=120), nullable=False),
        sa.Column("category", sa.String(length=120), nullable=False),
        sa.Column("subcategory", sa.String(length=120)),
        sa.Column("sizes", sa.JSON(), nullable=False),
        sa.Column("concerns", sa.JSON(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("author_id", sa.String(length=64), sa.ForeignKey("user.id")),
        *_timestamps(),
    )
    op.create_index("ix_product_author_id", "product", ["author_id"])
    op.create_index("ix_product_brand", "product", ["brand"])
    op.create_index("ix_product_category", "product", ["category"])
    op.create_index("ix_product_published_created", "product", ["published", "created_at"])

    op.create_table(
        "media",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("key", sa.String(length=512), nullable=False),
        sa.Column("url", sa.String(length=1024), nullable=False),
        sa.Column("size", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("content_type", sa.String(length=128)),
        sa.Column("author_id", sa.String(length=64), sa.ForeignKey("user.id", ondelete="SET NULL")),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_media_key", "media", ["key"], unique=True)
    op.create_index("ix_media_author_id", "media", ["author_id"])

    op.create_table(
        "team_member",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("image", sa.String(length=1024)),
        *_timestamps(),
    )


def downgrade():
    op.drop_table("team_member")
    op.drop_index("ix_media_author_id", table_name="media")
    op.drop_index("ix_media_key", table_name="media")
    op.drop_table("media")
    op.drop_index("ix_product_published_created", table_name="product")
    op.drop_index("ix_product_category", table_name="product")
    op.drop_index("ix_product_brand", table_name="product")
    op.drop_index("ix_product_author_id", table_name="product")
    op.drop_table("product")
    op.drop_index("ix_user_name", table_name="user")
    op.drop_table("user")
