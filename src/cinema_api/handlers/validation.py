"""
Tagged validation outcomes and the input parsers built on them.

Every parser returns either ``Valid(value)`` or ``Invalid(reason)``; none of
them raise on bad input.
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from cinema_api.schemas.common import MAX_ID

logger = logging.getLogger(__name__)

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_PAGE = 1


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    reason: str


Outcome = Valid[T] | Invalid


def parse_positive_int(raw: Any) -> Outcome[int]:
    """Parse a path/query value as an integer between 1 and ``MAX_ID``."""
    if raw is None or isinstance(raw, bool):
        return Invalid("missing value")
    try:
        value = int(str(raw).strip())
    except ValueError:
        return Invalid(f"not an integer: {raw!r}")
    if value < 1:
        return Invalid(f"not positive: {value}")
    if value > MAX_ID:
        return Invalid(f"out of range: {value}")
    return Valid(value)


def parse_page(raw: Any) -> int:
    """Page number, falling back to the first page for anything unparseable."""
    outcome = parse_positive_int(raw)
    if isinstance(outcome, Invalid):
        if raw is not None:
            logger.debug(f"Ignoring page {raw!r} ({outcome.reason}), using {DEFAULT_PAGE}")
        return DEFAULT_PAGE
    return outcome.value


def parse_record(model: type[ModelT], body: Any) -> Outcome[ModelT]:
    """
    Parse a decoded JSON body into a record.

    A missing body (``None``) and a body that fails validation are both
    reported as ``Invalid``.
    """
    if body is None:
        return Invalid("empty body")
    try:
        return Valid(model.model_validate(body))
    except ValidationError as e:
        return Invalid(f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}")


def bind_identifier(body: Any, raw_id: Any) -> Outcome[Any]:
    """
    Carry an identifier taken from the URL into a request body.

    A body without an id (or with id 0) takes the URL identifier; a body whose
    id names a different record is rejected.
    """
    if raw_id is None:
        return Valid(body)
    parsed = parse_positive_int(raw_id)
    if isinstance(parsed, Invalid):
        return parsed
    if not isinstance(body, dict):
        return Invalid("body is not an object")
    carried_raw = body.get("id")
    if carried_raw is None or (type(carried_raw) is int and carried_raw == 0):
        return Valid({**body, "id": parsed.value})
    carried = parse_positive_int(body["id"])
    if isinstance(carried, Invalid) or carried.value != parsed.value:
        return Invalid(f"body id {body['id']!r} does not match {parsed.value}")
    return Valid(body)
