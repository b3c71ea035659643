"""Uniform success/failure outcomes returned by every resource handler."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Status(IntEnum):
    """The only status codes the handler layer produces."""

    OK = 200
    BAD_REQUEST = 400
    INTERNAL_SERVER_ERROR = 500


@dataclass(frozen=True)
class Success:
    """Handled request; ``payload`` is a record, a ListResult or None (bare acknowledgment)."""

    payload: Any = None
    status: Status = Status.OK


@dataclass(frozen=True)
class Failure:
    """Rejected request with a fixed, human-readable message."""

    status: Status
    message: str


Envelope = Success | Failure


def ok(payload: Any = None) -> Success:
    return Success(payload)


def bad_request(message: str) -> Failure:
    return Failure(Status.BAD_REQUEST, message)


def internal_error(message: str) -> Failure:
    return Failure(Status.INTERNAL_SERVER_ERROR, message)
