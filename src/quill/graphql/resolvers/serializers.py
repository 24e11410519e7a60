"""
Conversion of ORM rows into GraphQL types.

Relationships must already be loaded (selectinload) before conversion;
lazy loading is not available on async sessions.
"""

from __future__ import annotations

from datetime import UTC, datetime

from ...dbmodels import Posts, Users
from ..types.post import Post
from ..types.user import User


def to_iso(value: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with millisecond precision, e.g. 2024-01-01T10:00:00.000Z."""
    if value.tzinfo is None:
        # SQLite drops the offset; values are always written in UTC
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _build_post(post: Posts, creator: User) -> Post:
    return Post(
        id=str(post.id),
        title=post.title,
        content=post.content,
        image_url=post.image_url,
        creator=creator,
        created_at=to_iso(post.created_at),
        updated_at=to_iso(post.updated_at),
    )


def serialize_user(user: Users) -> User:
    """Convert a user whose ``posts`` collection is loaded."""
    user_type = User(
        id=str(user.id),
        email=user.email,
        name=user.name,
        status=user.status,
        posts=[],
    )
    user_type.posts.extend(_build_post(post, user_type) for post in user.posts)
    return user_type


def serialize_post(post: Posts, creator: User | None = None) -> Post:
    """Convert a post whose ``creator`` (and the creator's posts) are loaded."""
    return _build_post(post, creator or serialize_user(post.creator))
