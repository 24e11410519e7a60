"""Resolve the Authorization header into an AuthContext."""

from __future__ import annotations

from uuid import UUID

from ..logging import get_logger
from .adapters.base import AuthAdapter, AuthenticationError
from .context import ANONYMOUS, AuthContext
from .factory import get_auth_adapter

logger = get_logger(__name__)


async def get_auth_context(
    authorization: str | None, adapter: AuthAdapter | None = None
) -> AuthContext:
    """
    Extract authentication context from the Authorization header.

    This function:
    1. Extracts the Bearer token from the header
    2. Verifies it with the token adapter
    3. Returns an AuthContext carrying the user id and email

    A missing, malformed, invalid or expired token never fails the request;
    it yields an unauthenticated context and resolvers decide what that means.
    """
    if not authorization:
        return ANONYMOUS

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        logger.warning("Invalid authorization format received")
        return ANONYMOUS

    token = token.strip()

    try:
        adapter = adapter or get_auth_adapter()
        principal = await adapter.verify_token(token)
        user_id = UUID(principal["user_id"])
    except AuthenticationError as e:
        logger.info("Authentication failed", error=str(e))
        return ANONYMOUS
    except ValueError as e:
        # Unconfigured secret or a subject that is not a UUID
        logger.warning("Token could not be resolved to a user", error=str(e))
        return ANONYMOUS

    return AuthContext(user_id=user_id, email=principal.get("email"), token=token)
