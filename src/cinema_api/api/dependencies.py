"""FastAPI dependencies that build request-scoped handlers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_api.database import get_db
from cinema_api.handlers import MovieHandler, ScheduleHandler
from cinema_api.repositories import MovieRepository, ScheduleRepository


def get_movie_handler(db: AsyncSession = Depends(get_db)) -> MovieHandler:
    return MovieHandler(MovieRepository(db))


def get_schedule_handler(db: AsyncSession = Depends(get_db)) -> ScheduleHandler:
    return ScheduleHandler(ScheduleRepository(db), MovieRepository(db))
