"""Authentication context for request handling."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class AuthContext:
    """Verified identity (or its absence) for a single request."""

    user_id: UUID | None = None
    email: str | None = None
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        """Check if the request is authenticated."""
        return self.user_id is not None


ANONYMOUS = AuthContext()
