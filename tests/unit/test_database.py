"""Unit tests for the request-scoped database session dependency."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, patch

import pytest

from cinema_api.database import get_db


def make_session_factory(session: AsyncMock):
    @asynccontextmanager
    async def factory():
        yield session

    return factory


async def test_commits_after_request() -> None:
    session = AsyncMock()

    with patch("cinema_api.database.AsyncSessionLocal", make_session_factory(session)):
        gen = get_db()
        assert await gen.__anext__() is session
        with pytest.raises(StopAsyncIteration):
            await gen.__anext__()

    session.commit.assert_awaited_once()
    session.rollback.assert_not_awaited()


async def test_rolls_back_and_reraises_on_error() -> None:
    session = AsyncMock()

    with patch("cinema_api.database.AsyncSessionLocal", make_session_factory(session)):
        gen = get_db()
        await gen.__anext__()
        with pytest.raises(RuntimeError, match="boom"):
            await gen.athrow(RuntimeError("boom"))

    session.rollback.assert_awaited_once()
    session.commit.assert_not_awaited()
