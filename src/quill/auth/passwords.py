"""Password hashing with bcrypt via passlib."""

import asyncio

from passlib.context import CryptContext

from ..config import settings


def _crypt_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def get_password_hash(password: str, rounds: int | None = None) -> str:
    """Hash a password with the configured bcrypt cost factor."""
    return _crypt_context(rounds or settings.password_hash_rounds).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return _crypt_context(settings.password_hash_rounds).verify(plain_password, hashed_password)


async def hash_password_async(password: str) -> str:
    """Hash in a worker thread so the event loop keeps serving requests."""
    return await asyncio.to_thread(get_password_hash, password)


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    return await asyncio.to_thread(verify_password, plain_password, hashed_password)
