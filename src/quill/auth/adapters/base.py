"""Base authentication adapter interface and types."""

from __future__ import annotations

from typing import NotRequired, Protocol, TypedDict
from uuid import UUID


class Principal(TypedDict):
    """Identity extracted from an incoming token."""

    user_id: str
    email: NotRequired[str]
    claims: NotRequired[dict]


class AuthAdapter(Protocol):
    """Token issuing/verification interface."""

    async def verify_token(self, token: str) -> Principal:
        """
        Verify a token and return the principal identity.

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        ...

    async def issue_token(self, user_id: UUID, email: str) -> str:
        """Issue a signed token carrying the user's id and email."""
        ...


class AuthenticationError(Exception):
    """Raised when authentication fails."""

    pass
