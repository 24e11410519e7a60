"""
Root GraphQL query definitions
"""

import strawberry

from ..access_control import get_auth_context_from_info
from ..types.post import Post, PostData
from ..types.user import AuthData, User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def login(self, email: str, password: str) -> AuthData:
        """Exchange credentials for an access token."""
        from ...auth.factory import get_auth_adapter
        from ..resolvers.user import login

        return await login(email, password, get_auth_adapter())

    @strawberry.field
    async def user(self, info: strawberry.Info) -> User:
        """Get the current authenticated user."""
        from ..resolvers.user import resolve_current_user

        return await resolve_current_user(get_auth_context_from_info(info))

    @strawberry.field
    async def posts(self, info: strawberry.Info, page: int | None = None) -> PostData:
        """Get one page of posts, newest first."""
        from ..resolvers.post import resolve_posts

        return await resolve_posts(get_auth_context_from_info(info), page)

    @strawberry.field
    async def post(self, info: strawberry.Info, id: strawberry.ID) -> Post:
        """Get a post by ID."""
        from ..resolvers.post import resolve_post_by_id

        return await resolve_post_by_id(get_auth_context_from_info(info), id)
