"""Schedule model for movie screening times."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinema_api.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from cinema_api.models.movie import Movie


class Schedule(Base, TimestampMixin):
    """
    Movie schedule (showtime) model.

    Every schedule belongs to a movie; removing the movie removes its
    schedules through the foreign key cascade.
    """

    __tablename__ = "schedules"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Foreign keys
    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Showtime details
    start_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    auditorium: Mapped[str | None] = mapped_column(String(100), nullable=True)
    price: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Relationships
    movie: Mapped["Movie"] = relationship(back_populates="schedules")

    def __repr__(self) -> str:
        return f"<Schedule(id={self.id}, movie_id={self.movie_id}, start_time={self.start_time})>"
