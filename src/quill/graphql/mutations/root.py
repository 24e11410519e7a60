"""
Root GraphQL mutation definitions
"""

import strawberry

from ..access_control import get_auth_context_from_info
from ..types.post import Post
from ..types.user import User


# Input types for mutations
@strawberry.input(name="UserInputData")
class UserInput:
    """Input for registering a new user."""

    email: str
    name: str
    password: str


@strawberry.input(name="PostInputData")
class PostInput:
    """Input for creating or updating a post."""

    title: str
    content: str
    image_url: str


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(self, user_input: UserInput) -> User:
        """Register a new user."""
        from ..resolvers.user import create_user

        return await create_user(user_input)

    @strawberry.mutation(name="updateStatus")
    async def update_status(self, info: strawberry.Info, status: str) -> User:
        """Update the current user's status."""
        from ..resolvers.user import update_status

        return await update_status(get_auth_context_from_info(info), status)

    # Post mutations
    @strawberry.mutation(name="createPost")
    async def create_post(self, info: strawberry.Info, post_input: PostInput) -> Post:
        """Create a new post."""
        from ..resolvers.post import create_post

        return await create_post(get_auth_context_from_info(info), post_input)

    @strawberry.mutation(name="updatePost")
    async def update_post(
        self, info: strawberry.Info, id: strawberry.ID, post_input: PostInput
    ) -> Post:
        """Update a post owned by the current user."""
        from ..resolvers.post import update_post

        return await update_post(get_auth_context_from_info(info), id, post_input)

    @strawberry.mutation(name="deletePost")
    async def delete_post(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a post owned by the current user."""
        from ..resolvers.post import delete_post

        return await delete_post(get_auth_context_from_info(info), id)
