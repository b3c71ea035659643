"""Movie storage."""

from typing import Any

from cinema_api.models.movie import Movie as MovieRow
from cinema_api.repositories.base import SqlAlchemyRepository
from cinema_api.schemas.movie import Movie


class MovieRepository(SqlAlchemyRepository[MovieRow, Movie]):
    """Movies, listed by release date."""

    row_model = MovieRow
    record_model = Movie
    resource_name = "movie"

    def _ordering(self) -> tuple[Any, ...]:
        return (MovieRow.release_date, MovieRow.id)
