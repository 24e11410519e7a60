"""
Post GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .user import User


@strawberry.type
class Post:
    """Post type for GraphQL API. Timestamps are ISO-8601 UTC strings."""

    id: strawberry.ID = strawberry.field(name="_id")
    title: str
    content: str
    image_url: str
    creator: Annotated["User", strawberry.lazy(".user")]
    created_at: str
    updated_at: str


@strawberry.type
class PostData:
    """One page of posts plus the total number of posts."""

    posts: list[Post]
    total_posts: int
