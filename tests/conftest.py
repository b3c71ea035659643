"""Shared test fixtures."""

from collections.abc import AsyncIterator
from datetime import date

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cinema_api.api.dependencies import get_movie_handler, get_schedule_handler
from cinema_api.api.routes import health, movies, schedules
from cinema_api.handlers import MovieHandler, ScheduleHandler
from tests.doubles import InMemoryRepository


@pytest.fixture
def movie_repo() -> InMemoryRepository:
    return InMemoryRepository(sort_key=lambda m: (m.release_date or date.min, m.id))


@pytest.fixture
def schedule_repo() -> InMemoryRepository:
    return InMemoryRepository(sort_key=lambda s: (s.start_time, s.id), scope_field="movie_id")


@pytest.fixture
def movie_handler(movie_repo: InMemoryRepository) -> MovieHandler:
    return MovieHandler(movie_repo)


@pytest.fixture
def schedule_handler(
    schedule_repo: InMemoryRepository, movie_repo: InMemoryRepository
) -> ScheduleHandler:
    return ScheduleHandler(schedule_repo, movie_repo)


@pytest.fixture
def test_app(movie_handler: MovieHandler, schedule_handler: ScheduleHandler) -> FastAPI:
    """Minimal FastAPI app with the handlers wired to in-memory repositories."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(movies.router, prefix="/api")
    app.include_router(schedules.router, prefix="/api")
    app.dependency_overrides[get_movie_handler] = lambda: movie_handler
    app.dependency_overrides[get_schedule_handler] = lambda: schedule_handler
    return app


@pytest.fixture
async def client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test"
    ) as client:
        yield client
