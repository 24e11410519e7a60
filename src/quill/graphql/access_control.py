"""
Shared access control logic for GraphQL resolvers
"""

from typing import TYPE_CHECKING
from uuid import UUID

import strawberry

from ..auth.context import ANONYMOUS, AuthContext
from ..errors import FORBIDDEN, UNAUTHORIZED, ApiError, fail_if
from ..logging import get_logger

if TYPE_CHECKING:
    from ..dbmodels import Posts

logger = get_logger(__name__)


def get_auth_context_from_info(info: strawberry.Info) -> AuthContext:
    """
    Extract the verified identity placed on the GraphQL context.

    The context getter resolves the bearer token once per request; anything
    else (missing key, direct schema execution) is treated as anonymous.
    """
    auth_context = info.context.get("auth_context")
    if isinstance(auth_context, AuthContext):
        return auth_context
    return ANONYMOUS


def require_authenticated(auth_context: AuthContext) -> UUID:
    """Fail with 401 unless the request carries a verified user; return its id."""
    user_id = auth_context.user_id
    if user_id is None:
        raise ApiError("Not Authenticated", UNAUTHORIZED)
    return user_id


def is_post_owner(post: "Posts", auth_context: AuthContext) -> bool:
    """Ownership is a plain identifier comparison against the post's creator."""
    return auth_context.is_authenticated and post.creator_id == auth_context.user_id


def require_post_owner(post: "Posts", auth_context: AuthContext) -> None:
    """Fail with 403 unless the authenticated user created the post."""
    is_owner = is_post_owner(post, auth_context)
    if not is_owner:
        logger.info(
            "Access denied to post",
            post_id=str(post.id),
            user_id=str(auth_context.user_id) if auth_context.user_id else None,
        )
    fail_if(not is_owner, "Not Authorized", FORBIDDEN)
