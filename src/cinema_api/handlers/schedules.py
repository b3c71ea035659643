"""Schedule resource handler."""

from typing import Any

from cinema_api.handlers.base import Messages, ResourceHandler, check_exists
from cinema_api.handlers.envelope import Envelope
from cinema_api.handlers.validation import Invalid, Outcome, Valid, parse_positive_int
from cinema_api.repositories.base import Repository
from cinema_api.schemas.movie import Movie
from cinema_api.schemas.schedule import Schedule


class ScheduleHandler(ResourceHandler[Schedule]):
    """
    Schedules of movies, paged by showtime.

    A schedule may only be created or modified while the movie it points at
    exists. The check is read-then-act; the foreign key on
    ``schedules.movie_id`` rejects a save that loses the race with a movie
    delete, which then surfaces as a storage failure.
    """

    record_model = Schedule
    resource_name = "schedule"
    messages = Messages(
        invalid_identifier="Invalid schedule identifier",
        invalid_data="Invalid request data",
        count_failed="Could not obtain schedule count",
        list_failed="Could not obtain schedule list",
        save_failed="Could not save schedule",
        delete_failed="Could not delete schedule",
        invalid_parent_identifier="Invalid movie identifier",
    )

    def __init__(
        self,
        repository: Repository[Schedule],
        movie_repository: Repository[Movie],
    ) -> None:
        super().__init__(repository)
        self.movie_repository = movie_repository

    async def check_references(self, record: Schedule) -> Outcome[Schedule]:
        if not await check_exists(self.movie_repository, record.movie_id):
            return Invalid(f"movie {record.movie_id} does not exist")
        return Valid(record)

    async def list(self, raw_movie_id: Any, raw_page: Any = None) -> Envelope:
        """List one page of the schedules of a movie.

        Unlike the page number, the movie identifier must be a positive integer.
        """
        movie_id = parse_positive_int(raw_movie_id)
        if isinstance(movie_id, Invalid):
            return self.reject("list", movie_id, self.messages.invalid_parent_identifier)
        return await self.list_page(raw_page, scope=movie_id.value)
