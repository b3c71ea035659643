"""Movie resource handler."""

from typing import Any

from cinema_api.handlers.base import Messages, ResourceHandler
from cinema_api.handlers.envelope import Envelope
from cinema_api.schemas.movie import Movie


class MovieHandler(ResourceHandler[Movie]):
    """Movies, paged by release date."""

    record_model = Movie
    resource_name = "movie"
    messages = Messages(
        invalid_identifier="Invalid movie identifier",
        invalid_data="Invalid request data",
        count_failed="Could not obtain movie count",
        list_failed="Could not obtain movie list",
        save_failed="Could not save movie",
        delete_failed="Could not delete movie",
    )

    async def list(self, raw_page: Any = None) -> Envelope:
        """
        List one page of movies.

        An absent or unparseable page number selects the first page. Pages
        past the end come back empty rather than as an error.
        """
        return await self.list_page(raw_page)
