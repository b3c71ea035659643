"""Storage implementations of the data-access contract."""

from cinema_api.repositories.base import Repository, SqlAlchemyRepository, StorageError
from cinema_api.repositories.movie import MovieRepository
from cinema_api.repositories.schedule import ScheduleRepository

__all__ = [
    "MovieRepository",
    "Repository",
    "ScheduleRepository",
    "SqlAlchemyRepository",
    "StorageError",
]
