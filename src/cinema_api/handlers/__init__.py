"""Request/response contract of the movie and schedule resources."""

from cinema_api.handlers.envelope import Envelope, Failure, Status, Success
from cinema_api.handlers.movies import MovieHandler
from cinema_api.handlers.schedules import ScheduleHandler

__all__ = [
    "Envelope",
    "Failure",
    "MovieHandler",
    "ScheduleHandler",
    "Status",
    "Success",
]
