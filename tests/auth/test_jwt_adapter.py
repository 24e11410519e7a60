"""Tests for JWT authentication adapter."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
import pytest

from quill.auth.adapters.base import AuthenticationError
from quill.auth.adapters.jwt import JWTAuthAdapter


@pytest.fixture
def secret_key():
    return "test-secret-key-for-testing-only"


@pytest.fixture
def jwt_adapter(secret_key):
    return JWTAuthAdapter(secret_key=secret_key, algorithm="HS256", issuer="test-quill")


def make_token(secret_key, **overrides):
    now = datetime.now(UTC)
    payload = {
        "iss": "test-quill",
        "sub": str(uuid4()),
        "email": "alice@b.com",
        "iat": now,
        "exp": now + timedelta(hours=1),
    }
    payload.update(overrides)
    return jwt.encode(payload, secret_key, algorithm="HS256")


class TestIssueToken:
    @pytest.mark.asyncio
    async def test_token_carries_user_id_and_email(self, jwt_adapter, secret_key):
        user_id = uuid4()

        token = await jwt_adapter.issue_token(user_id, "alice@b.com")
        payload = jwt.decode(token, secret_key, algorithms=["HS256"], issuer="test-quill")

        assert payload["userId"] == str(user_id)
        assert payload["sub"] == str(user_id)
        assert payload["email"] == "alice@b.com"

    @pytest.mark.asyncio
    async def test_token_expires_after_configured_hours(self, secret_key):
        adapter = JWTAuthAdapter(secret_key=secret_key, issuer="test-quill", token_expiry_hours=1)

        token = await adapter.issue_token(uuid4(), "alice@b.com")
        payload = jwt.decode(token, secret_key, algorithms=["HS256"], issuer="test-quill")

        assert payload["exp"] - payload["iat"] == 3600

    @pytest.mark.asyncio
    async def test_issued_token_round_trips_through_verify(self, jwt_adapter):
        user_id = uuid4()

        token = await jwt_adapter.issue_token(user_id, "alice@b.com")
        principal = await jwt_adapter.verify_token(token)

        assert principal["user_id"] == str(user_id)
        assert principal["email"] == "alice@b.com"


class TestVerifyToken:
    @pytest.mark.asyncio
    async def test_falls_back_to_subject(self, jwt_adapter, secret_key):
        user_id = str(uuid4())

        principal = await jwt_adapter.verify_token(make_token(secret_key, sub=user_id))

        assert principal["user_id"] == user_id
        assert principal["claims"]["iss"] == "test-quill"

    @pytest.mark.asyncio
    async def test_expired_token(self, jwt_adapter, secret_key):
        past = datetime.now(UTC) - timedelta(hours=2)
        token = make_token(secret_key, iat=past, exp=past + timedelta(minutes=30))

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await jwt_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_wrong_secret(self, jwt_adapter):
        with pytest.raises(AuthenticationError):
            await jwt_adapter.verify_token(make_token("some-other-secret"))

    @pytest.mark.asyncio
    async def test_wrong_issuer(self, jwt_adapter, secret_key):
        with pytest.raises(AuthenticationError):
            await jwt_adapter.verify_token(make_token(secret_key, iss="someone-else"))

    @pytest.mark.asyncio
    async def test_missing_expiry(self, jwt_adapter, secret_key):
        token = jwt.encode(
            {"iss": "test-quill", "sub": "x", "iat": datetime.now(UTC)},
            secret_key,
            algorithm="HS256",
        )

        with pytest.raises(AuthenticationError):
            await jwt_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_missing_user_claims(self, jwt_adapter, secret_key):
        now = datetime.now(UTC)
        token = jwt.encode(
            {"iss": "test-quill", "iat": now, "exp": now + timedelta(hours=1)},
            secret_key,
            algorithm="HS256",
        )

        with pytest.raises(AuthenticationError, match="userId"):
            await jwt_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_garbage_token(self, jwt_adapter):
        with pytest.raises(AuthenticationError):
            await jwt_adapter.verify_token("not.a.token")
