"""Tests for password hashing."""

import pytest

from quill.auth.passwords import (
    get_password_hash,
    hash_password_async,
    verify_password,
    verify_password_async,
)


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = get_password_hash("secret")

        assert hashed != "secret"
        assert hashed.startswith("$2b$")

    def test_verify(self):
        hashed = get_password_hash("secret")

        assert verify_password("secret", hashed) is True
        assert verify_password("Secret", hashed) is False

    def test_same_password_gets_different_salts(self):
        assert get_password_hash("secret") != get_password_hash("secret")

    def test_cost_factor_from_settings(self):
        # The suite runs with the minimum cost configured in conftest
        assert get_password_hash("secret").startswith("$2b$04$")

    def test_production_cost_factor(self):
        hashed = get_password_hash("secret", rounds=12)

        assert hashed.startswith("$2b$12$")
        assert verify_password("secret", hashed) is True

    @pytest.mark.asyncio
    async def test_async_helpers(self):
        hashed = await hash_password_async("secret")

        assert await verify_password_async("secret", hashed) is True
        assert await verify_password_async("wrong", hashed) is False
