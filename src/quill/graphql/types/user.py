"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .post import Post


@strawberry.type
class User:
    """User type for GraphQL API. The password hash is never exposed."""

    id: strawberry.ID = strawberry.field(name="_id")
    email: str
    name: str
    status: str
    posts: list[Annotated["Post", strawberry.lazy(".post")]]


@strawberry.type
class AuthData:
    """Result of a successful login."""

    token: str
    user_id: str
