"""
Resolvers for creating, listing, updating and deleting posts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ...auth.context import AuthContext
from ...config import settings
from ...database.connection import get_async_session
from ...dbmodels import Posts, Users, utc_now
from ...errors import INVALID_INPUT, NOT_FOUND, UNAUTHORIZED, fail_if
from ...logging import get_logger
from ...storage.images import clear_image
from ..access_control import require_authenticated, require_post_owner
from .serializers import serialize_post, serialize_user

if TYPE_CHECKING:
    from ..mutations.root import PostInput
    from ..types.post import Post, PostData

logger = get_logger(__name__)

MIN_FIELD_LENGTH = 5

# Sent by clients that keep the current image when editing a post
UNCHANGED_IMAGE = "undefined"


def validate_post_input(input: PostInput) -> None:
    """Title and content must each be non-empty and at least five characters."""
    errors = []
    if not input.title or len(input.title) < MIN_FIELD_LENGTH:
        errors.append({"message": "Title is Invalid"})
    if not input.content or len(input.content) < MIN_FIELD_LENGTH:
        errors.append({"message": "Content is Invalid"})

    fail_if(errors, "Invalid Input used..", INVALID_INPUT, data=errors)


def parse_post_id(id: str) -> UUID | None:
    try:
        return UUID(str(id))
    except ValueError:
        return None


async def _load_post(session: AsyncSession, id: str) -> Posts | None:
    """Load a post with its creator (and the creator's posts) eagerly."""
    post_id = parse_post_id(id)
    if post_id is None:
        return None

    stmt = (
        select(Posts)
        .where(Posts.id == post_id)
        .options(selectinload(Posts.creator).selectinload(Users.posts))
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


# Query resolvers
async def resolve_posts(auth_context: AuthContext, page: int | None = None) -> PostData:
    """
    Resolve one page of posts, newest first, with the total post count.

    The page size is fixed by configuration; a missing page means the first.
    """
    require_authenticated(auth_context)

    page = page or 1
    fail_if(page < 1, "Invalid page number", INVALID_INPUT)
    per_page = settings.posts_per_page

    async with get_async_session() as session:
        count_result = await session.execute(select(func.count(Posts.id)))
        total_posts = count_result.scalar() or 0

        stmt = (
            select(Posts)
            .options(selectinload(Posts.creator).selectinload(Users.posts))
            .order_by(Posts.created_at.desc())
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        result = await session.execute(stmt)
        posts = result.scalars().all()

        from ..types.post import PostData as PostDataType

        return PostDataType(
            posts=[serialize_post(post) for post in posts],
            total_posts=total_posts,
        )


async def resolve_post_by_id(auth_context: AuthContext, id: str) -> Post:
    """Resolve a single post with its creator."""
    require_authenticated(auth_context)

    async with get_async_session() as session:
        post = await _load_post(session, id)
        fail_if(post is None, "No post found!", NOT_FOUND)

        return serialize_post(post)


# Mutation resolvers
async def create_post(auth_context: AuthContext, input: PostInput) -> Post:
    """
    Create a post owned by the authenticated user.

    The post row and the owner's collection are written in one transaction.
    """
    user_id = require_authenticated(auth_context)
    validate_post_input(input)

    async with get_async_session() as session:
        stmt = select(Users).where(Users.id == user_id).options(selectinload(Users.posts))
        result = await session.execute(stmt)
        user = result.scalar_one_or_none()

        fail_if(user is None, "User not found..", UNAUTHORIZED)

        post = Posts(title=input.title, content=input.content, image_url=input.image_url)
        user.posts.append(post)
        await session.flush()

        logger.info("Post created", post_id=str(post.id), user_id=str(user.id), title=post.title)

        creator = serialize_user(user)
        return serialize_post(post, creator)


async def update_post(auth_context: AuthContext, id: str, input: PostInput) -> Post:
    """
    Update a post's title, content and (unless unchanged) image.

    Only the creator of the post may update it.
    """
    require_authenticated(auth_context)

    async with get_async_session() as session:
        post = await _load_post(session, id)
        fail_if(post is None, "No post found!", NOT_FOUND)

        require_post_owner(post, auth_context)
        validate_post_input(input)

        post.title = input.title
        post.content = input.content
        if input.image_url != UNCHANGED_IMAGE:
            post.image_url = input.image_url
        post.updated_at = utc_now()

        await session.flush()

        logger.info("Post updated", post_id=str(post.id), user_id=str(auth_context.user_id))

        return serialize_post(post)


async def delete_post(auth_context: AuthContext, id: str) -> bool:
    """
    Delete a post, its image file and its entry in the owner's collection.

    Only the creator of the post may delete it. A missing image file does
    not fail the deletion.
    """
    require_authenticated(auth_context)

    async with get_async_session() as session:
        post = await _load_post(session, id)
        fail_if(post is None, "No post found!", NOT_FOUND)

        require_post_owner(post, auth_context)

        await clear_image(post.image_url)

        owner = post.creator
        await session.delete(post)
        if post in owner.posts:
            owner.posts.remove(post)
        await session.flush()

        logger.info("Post deleted", post_id=str(post.id), user_id=str(auth_context.user_id))

        return True
