"""Schedule storage."""

from typing import Any

from sqlalchemy import Select

from cinema_api.models.schedule import Schedule as ScheduleRow
from cinema_api.repositories.base import SqlAlchemyRepository
from cinema_api.schemas.schedule import Schedule


class ScheduleRepository(SqlAlchemyRepository[ScheduleRow, Schedule]):
    """Schedules, listed by showtime and scoped to a movie."""

    row_model = ScheduleRow
    record_model = Schedule
    resource_name = "schedule"

    def _ordering(self) -> tuple[Any, ...]:
        return (ScheduleRow.start_time, ScheduleRow.id)

    def _apply_scope(self, stmt: Select, scope: int | None) -> Select:
        if scope is None:
            return stmt
        return stmt.where(ScheduleRow.movie_id == scope)
