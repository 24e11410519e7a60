"""
Database models for Quill (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import (
    DateTime,
    ForeignKeyConstraint,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

DEFAULT_USER_STATUS = "I am new!"

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utc_now() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="users_pkey"),
        UniqueConstraint("email", name="users_email_key"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)  # bcrypt hash
    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=DEFAULT_USER_STATUS,
        server_default=text(f"'{DEFAULT_USER_STATUS}'"),
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(True), default=utc_now, onupdate=utc_now)

    posts: Mapped[list["Posts"]] = relationship(
        "Posts",
        uselist=True,
        back_populates="creator",
        order_by="Posts.created_at",
        cascade="all, delete-orphan",
    )


class Posts(Base):
    __tablename__ = "posts"
    __table_args__ = (
        ForeignKeyConstraint(
            ["creator_id"], ["users.id"], ondelete="CASCADE", name="posts_creator_id_fkey"
        ),
        PrimaryKeyConstraint("id", name="posts_pkey"),
        Index("idx_posts_creator", "creator_id"),
        Index("idx_posts_created_at", "created_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    creator_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(True), default=utc_now, onupdate=utc_now)

    creator: Mapped["Users"] = relationship("Users", back_populates="posts")


target_metadata = Base.metadata

__all__ = ["Base", "DEFAULT_USER_STATUS", "Posts", "Users", "target_metadata", "utc_now"]
