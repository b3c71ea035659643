"""SQLAlchemy ORM models."""

from cinema_api.models.base import Base
from cinema_api.models.movie import Movie
from cinema_api.models.schedule import Schedule

__all__ = ["Base", "Movie", "Schedule"]
