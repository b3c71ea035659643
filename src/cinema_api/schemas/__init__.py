"""Pydantic schemas for API requests and responses."""

from cinema_api.schemas.common import ApiModel, ListResult
from cinema_api.schemas.movie import Movie
from cinema_api.schemas.schedule import Schedule

__all__ = [
    "ApiModel",
    "ListResult",
    "Movie",
    "Schedule",
]
