"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from pathlib import Path
from typing import Any
from uuid import UUID

import pytest
import pytest_asyncio

from quill.auth.context import AuthContext
from quill.config import settings

TEST_JWT_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def test_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point settings at throwaway values; returns the image directory."""
    image_dir = tmp_path / "images"
    image_dir.mkdir()

    monkeypatch.setattr(settings, "jwt_secret", TEST_JWT_SECRET)
    # Minimum bcrypt cost keeps the suite fast
    monkeypatch.setattr(settings, "password_hash_rounds", 4)
    monkeypatch.setattr(settings, "posts_per_page", 2)
    monkeypatch.setattr(settings, "image_base_path", str(image_dir))
    return image_dir


@pytest_asyncio.fixture(scope="function")
async def database(tmp_path: Path) -> AsyncGenerator[str, None]:
    """Point the shared engine at a fresh SQLite file with the schema created."""
    from quill.database.connection import close_database, create_all_tables, init_database

    dsn = f"sqlite:///{tmp_path / 'quill.db'}"
    init_database(dsn, force_reinit=True)
    await create_all_tables()

    yield dsn

    await close_database()


@pytest.fixture
def make_user(database: str) -> Callable[..., Awaitable[tuple[Any, AuthContext]]]:
    """Register a user through the resolver and return it with its auth context."""
    from quill.graphql.mutations.root import UserInput
    from quill.graphql.resolvers.user import create_user

    async def _make_user(
        email: str = "alice@b.com", name: str = "Alice", password: str = "secret"
    ) -> tuple[Any, AuthContext]:
        user = await create_user(UserInput(email=email, name=name, password=password))
        return user, AuthContext(user_id=UUID(user.id), email=email)

    return _make_user


@pytest.fixture
def make_post() -> Callable[..., Awaitable[Any]]:
    """Create a post through the resolver on behalf of ``auth_context``."""
    from quill.graphql.mutations.root import PostInput
    from quill.graphql.resolvers.post import create_post

    async def _make_post(
        auth_context: AuthContext,
        title: str = "First post",
        content: str = "Some content here",
        image_url: str = "images/first.png",
    ) -> Any:
        return await create_post(
            auth_context, PostInput(title=title, content=content, image_url=image_url)
        )

    return _make_post


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
