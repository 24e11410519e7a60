"""
Resolvers for registration, login and the current user's profile.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ...auth.adapters.base import AuthAdapter
from ...auth.context import AuthContext
from ...auth.passwords import hash_password_async, verify_password_async
from ...database.connection import get_async_session
from ...dbmodels import Users
from ...errors import CONFLICT, INVALID_INPUT, NOT_FOUND, UNAUTHORIZED, ApiError, fail_if
from ...logging import get_logger
from ..access_control import require_authenticated
from .serializers import serialize_user

if TYPE_CHECKING:
    from ..mutations.root import UserInput
    from ..types.user import AuthData, User

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 5


def is_valid_email(email: str) -> bool:
    """Syntax check only. Reserved names such as .local and .test are rejected."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


async def _load_user(session: AsyncSession, user_id: UUID) -> Users | None:
    stmt = select(Users).where(Users.id == user_id).options(selectinload(Users.posts))
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


# Mutation resolvers
async def create_user(input: UserInput) -> User:
    """
    Register a new user.

    The email must be syntactically valid and unused; the password must be at
    least five characters. An email that is already registered is reported as
    a conflict before any field errors. The password is stored as a bcrypt hash.
    """
    errors = []
    email_ok = is_valid_email(input.email)
    if not email_ok:
        errors.append({"message": "E-mail is invalid!"})
    if not input.password or len(input.password) < MIN_PASSWORD_LENGTH:
        errors.append({"message": "Password is short.."})

    async with get_async_session() as session:
        # A taken email is a conflict whatever the password looks like
        if email_ok:
            result = await session.execute(select(Users.id).where(Users.email == input.email))
            fail_if(result.first() is not None, "User already Exists", CONFLICT)

        fail_if(errors, "Invalid Input used..", INVALID_INPUT, data=errors)

        hashed_password = await hash_password_async(input.password)
        user = Users(email=input.email, name=input.name, password=hashed_password, posts=[])
        session.add(user)

        try:
            await session.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same email
            raise ApiError("User already Exists", CONFLICT) from e

        logger.info("User created", user_id=str(user.id))

        return serialize_user(user)


async def update_status(auth_context: AuthContext, status: str) -> User:
    """Overwrite the current user's status text."""
    user_id = require_authenticated(auth_context)

    async with get_async_session() as session:
        user = await _load_user(session, user_id)
        fail_if(user is None, "user does not exist!", NOT_FOUND)

        user.status = status
        await session.flush()

        logger.info("User status updated", user_id=str(user.id))

        return serialize_user(user)


# Query resolvers
async def login(email: str, password: str, adapter: AuthAdapter) -> AuthData:
    """
    Exchange email and password for a signed token.

    The token adapter is passed in so the signing secret never comes from
    ambient state inside the resolver.
    """
    async with get_async_session() as session:
        result = await session.execute(select(Users).where(Users.email == email))
        user = result.scalar_one_or_none()

    fail_if(user is None, "User not found..", UNAUTHORIZED)

    is_equal = await verify_password_async(password, user.password)
    fail_if(not is_equal, "Password does not match.", UNAUTHORIZED)

    token = await adapter.issue_token(user.id, user.email)

    logger.info("User logged in", user_id=str(user.id))

    from ..types.user import AuthData as AuthDataType

    return AuthDataType(token=token, user_id=str(user.id))


async def resolve_current_user(auth_context: AuthContext) -> User:
    """Get the authenticated user."""
    user_id = require_authenticated(auth_context)

    async with get_async_session() as session:
        user = await _load_user(session, user_id)
        fail_if(user is None, "user does not exist!", NOT_FOUND)

        return serialize_user(user)
