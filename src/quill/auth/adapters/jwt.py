"""JWT authentication adapter for self-issued tokens."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError

from ...logging import get_logger
from .base import AuthenticationError, Principal

logger = get_logger(__name__)


class JWTAuthAdapter:
    """Issues and verifies HS256 tokens signed with an injected secret."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "quill",
        token_expiry_hours: int = 1,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.token_expiry_hours = token_expiry_hours

    async def verify_token(self, token: str) -> Principal:
        """Verify a JWT token and return the principal."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={
                    "require": ["exp", "iat"],
                    "verify_exp": True,
                    "verify_iat": True,
                },
            )

            user_id = payload.get("userId") or payload.get("sub")
            if not user_id:
                raise AuthenticationError("Missing 'userId' claim in token")

            principal = Principal(user_id=str(user_id))

            if email := payload.get("email"):
                principal["email"] = email

            principal["claims"] = payload

            return principal

        except AuthenticationError:
            raise
        except InvalidTokenError as e:
            logger.warning("JWT token validation failed", error=str(e))
            raise AuthenticationError("Invalid token") from e

    async def issue_token(self, user_id: UUID, email: str) -> str:
        """Issue a new JWT token valid for ``token_expiry_hours``."""
        now = datetime.now(UTC)

        payload = {
            "iss": self.issuer,
            "iat": now,
            "exp": now + timedelta(hours=self.token_expiry_hours),
            "sub": str(user_id),
            "userId": str(user_id),
            "email": email,
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
