"""Pydantic schemas for schedule data."""

from datetime import datetime

from pydantic import Field

from cinema_api.schemas.common import MAX_ID, ApiModel


class Schedule(ApiModel):
    """Single showtime of a movie."""

    id: int = Field(default=0, ge=0, le=MAX_ID)
    movie_id: int = Field(..., gt=0, le=MAX_ID)
    start_time: datetime
    auditorium: str | None = Field(default=None, max_length=100)
    price: float | None = Field(default=None, ge=0)
