"""initial schema

Revision ID: 4c1e9a7d2b30
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '4c1e9a7d2b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("username", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("hashed_password", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("role", sa.Enum("ADMIN", "USER", name="role"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=False)

    op.create_table(
        "project",
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("short_desc", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("long_desc", sa.Text(), nullable=True),
        sa.Column(
            "status_flag",
            sa.Enum("PLANNING", "IN_PROGRESS", "COMPLETED", "MAINTAINED", "ARCHIVED", name="statusflag"),
            nullable=False,
        ),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("collab_mode", sa.Enum("SOLO", "GROUP", name="collabmode"), nullable=False),
        sa.Column("affiliation", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column(
            "affiliation_type",
            sa.Enum("INDEPENDENT", "UNIVERSITY", "ORGANIZATION", "CLUB", name="affiliationtype"),
            nullable=False,
        ),
        sa.Column(
            "source_code_availability",
            sa.Enum("OPEN_SOURCE", "CLOSED_SOURCE", "UNDER_NDA", name="sourcecodeavailability"),
            nullable=False,
        ),
        sa.Column("tech_stacks", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("project_url", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("live_url", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("image", sa.LargeBinary(), nullable=True),
        sa.Column("image_type", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_project_name", "project", ["name"], unique=False)
    op.create_index("ix_project_start_date", "project", ["start_date"], unique=False)

    op.create_table(
        "blog_post",
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("slug", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("excerpt", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("cover_image", sa.LargeBinary(), nullable=True),
        sa.Column("image_type", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("published", sa.Boolean(), nullable=False),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("tags", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("meta_title", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("meta_description", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("og_image", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index("ix_blog_post_title", "blog_post", ["title"], unique=False)
    op.create_index("ix_blog_post_slug", "blog_post", ["slug"], unique=False)
    op.create_index("ix_blog_post_published", "blog_post", ["published"], unique=False)
    op.create_index("ix_blog_post_published_at", "blog_post", ["published_at"], unique=False)

    op.create_table(
        "comment",
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column("post_id", sa.String(length=32), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["blog_post.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_comment_post_id", "comment", ["post_id"], unique=False)

    op.create_table(
        "blog_image",
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column("image", sa.LargeBinary(), nullable=False),
        sa.Column("image_type", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("alt_text", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "gallery_item",
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("caption", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("media_type", sa.Enum("IMAGE", "VIDEO", name="mediatype"), nullable=False),
        sa.Column("image", sa.LargeBinary(), nullable=True),
        sa.Column("image_type", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("video_url", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("tags", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_gallery_item_title", "gallery_item", ["title"], unique=False)
    op.create_index("ix_gallery_item_created_at", "gallery_item", ["created_at"], unique=False)

    op.create_table(
        "contact_message",
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("subject", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_contact_message_read", "contact_message", ["read"], unique=False)
    op.create_index("ix_contact_message_created_at", "contact_message", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_table("contact_message")
    op.drop_table("gallery_item")
    op.drop_table("blog_image")
    op.drop_table("comment")
    op.drop_table("blog_post")
    op.drop_table("project")
    op.drop_table("users")

    # postgres keeps enum types around after their tables are gone
    bind = op.get_bind()
    for name in ("mediatype", "sourcecodeavailability", "affiliationtype", "collabmode", "statusflag", "role"):
        sa.Enum(name=name).drop(bind, checkfirst=True)
