"""Pydantic schemas for movie data."""

from datetime import date

from pydantic import Field

from cinema_api.schemas.common import MAX_ID, ApiModel


class Movie(ApiModel):
    """Movie record as exchanged with API clients.

    An ``id`` of 0 means the movie has not been stored yet.
    """

    id: int = Field(default=0, ge=0, le=MAX_ID)
    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = None
    director: str | None = Field(default=None, max_length=200)
    duration: int | None = Field(default=None, gt=0, description="Running time in minutes")
    release_date: date | None = None
    age_rating: str | None = Field(default=None, max_length=10)
