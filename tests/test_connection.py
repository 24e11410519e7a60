"""Tests for the shared engine and session accessors."""

from unittest.mock import patch

import pytest

from quill.database import connection
from quill.database.connection import get_async_engine, get_async_session, reset_database


class TestGetAsyncEngine:
    @pytest.mark.asyncio
    async def test_returns_shared_engine(self, database):
        assert get_async_engine() is get_async_engine()
        assert get_async_engine().url.drivername == "sqlite+aiosqlite"

    def test_raises_when_initialization_leaves_no_engine(self):
        reset_database()

        with patch.object(connection, "init_database"):
            with pytest.raises(RuntimeError, match="Database not initialized"):
                get_async_engine()


class TestGetAsyncSession:
    @pytest.mark.asyncio
    async def test_raises_when_initialization_leaves_no_sessionmaker(self):
        reset_database()

        with patch.object(connection, "init_database"):
            with pytest.raises(RuntimeError, match="Database not initialized"):
                async with get_async_session():
                    pass
