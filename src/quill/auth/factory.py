"""Factory for creating the token adapter from configuration."""

from __future__ import annotations

from ..config import settings
from .adapters.jwt import JWTAuthAdapter


def get_auth_adapter() -> JWTAuthAdapter:
    """Create the JWT adapter with the configured signing secret.

    Raises:
        ValueError: If no signing secret is configured
    """
    if not settings.jwt_secret:
        raise ValueError("JWT secret key is required. Set QUILL_JWT_SECRET.")

    return JWTAuthAdapter(
        secret_key=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        token_expiry_hours=settings.jwt_expiry_hours,
    )
