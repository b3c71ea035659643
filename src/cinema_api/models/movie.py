"""Movie model for storing film metadata."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinema_api.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from cinema_api.models.schedule import Schedule


class Movie(Base, TimestampMixin):
    """
    Movie model.

    Listings are ordered by release date, so the column is indexed.
    """

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    director: Mapped[str | None] = mapped_column(String(200), nullable=True)
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    age_rating: Mapped[str | None] = mapped_column(String(10), nullable=True)

    # Relationships
    schedules: Mapped[list["Schedule"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title={self.title!r}, release_date={self.release_date})>"
