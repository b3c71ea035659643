"""Behaviour shared by the movie and schedule handlers."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from cinema_api.handlers.envelope import Envelope, bad_request, internal_error, ok
from cinema_api.handlers.validation import (
    Invalid,
    Outcome,
    Valid,
    bind_identifier,
    parse_page,
    parse_positive_int,
    parse_record,
)
from cinema_api.repositories.base import Repository, StorageError
from cinema_api.schemas.common import ListResult

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


@dataclass(frozen=True)
class Messages:
    """Fixed client-facing messages of one resource."""

    invalid_identifier: str
    invalid_data: str
    count_failed: str
    list_failed: str
    save_failed: str
    delete_failed: str
    # Parent identifier in the URL of a scoped listing
    invalid_parent_identifier: str = "Invalid request data"


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` records, rounding up."""
    return math.ceil(total / page_size)


async def check_exists(repository: Repository[Any], id: int) -> bool:
    """Existence check that treats a storage failure as "does not exist"."""
    try:
        return await repository.exists(id)
    except StorageError:
        return False


class ResourceHandler(Generic[RecordT]):
    """
    CRUD contract of one resource on top of its repository.

    Every public method returns an envelope; storage failures become 500s
    and everything the caller got wrong becomes a 400.
    """

    PAGE_SIZE: ClassVar[int] = 10

    record_model: ClassVar[type[BaseModel]]
    resource_name: ClassVar[str]
    messages: ClassVar[Messages]

    def __init__(self, repository: Repository[RecordT]) -> None:
        self.repository = repository

    # ------------------------------------------------------------------
    # Validation steps
    # ------------------------------------------------------------------

    async def check_references(self, record: RecordT) -> Outcome[RecordT]:
        """Hook for resources that point at a parent record."""
        return Valid(record)

    async def validate_new(self, body: Any) -> Outcome[RecordT]:
        outcome = parse_record(self.record_model, body)
        if isinstance(outcome, Invalid):
            return outcome
        if outcome.value.id != 0:
            return Invalid(f"identifier {outcome.value.id} supplied on create")
        return await self.check_references(outcome.value)

    async def validate_existing(self, body: Any) -> Outcome[RecordT]:
        outcome = parse_record(self.record_model, body)
        if isinstance(outcome, Invalid):
            return outcome
        record = outcome.value
        if record.id < 1 or not await check_exists(self.repository, record.id):
            return Invalid(f"{self.resource_name} {record.id} does not exist")
        return await self.check_references(record)

    async def lookup(self, raw_id: Any) -> Outcome[RecordT]:
        parsed = parse_positive_int(raw_id)
        if isinstance(parsed, Invalid):
            return parsed
        try:
            record = await self.repository.find(parsed.value)
        except StorageError:
            return Invalid(f"lookup of {self.resource_name} {parsed.value} failed")
        if record is None:
            return Invalid(f"{self.resource_name} {parsed.value} not found")
        return Valid(record)

    async def existing_id(self, raw_id: Any) -> Outcome[int]:
        parsed = parse_positive_int(raw_id)
        if isinstance(parsed, Invalid):
            return parsed
        if not await check_exists(self.repository, parsed.value):
            return Invalid(f"{self.resource_name} {parsed.value} not found")
        return parsed

    def reject(self, operation: str, outcome: Invalid, message: str) -> Envelope:
        logger.info(f"Rejected {self.resource_name} {operation}: {outcome.reason}")
        return bad_request(message)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def list_page(self, raw_page: Any, scope: int | None = None) -> Envelope:
        page = parse_page(raw_page)

        try:
            total = await self.repository.count(scope)
        except StorageError as e:
            logger.warning(f"{self.resource_name} count failed: {e}")
            return internal_error(self.messages.count_failed)
        pages = page_count(total, self.PAGE_SIZE)

        try:
            items: Sequence[RecordT] = await self.repository.list(
                (page - 1) * self.PAGE_SIZE, self.PAGE_SIZE, scope
            )
        except StorageError as e:
            logger.warning(f"{self.resource_name} list failed: {e}")
            return internal_error(self.messages.list_failed)

        return ok(ListResult[self.record_model](items=list(items), total=total, pages=pages))

    async def create(self, body: Any) -> Envelope:
        outcome = await self.validate_new(body)
        if isinstance(outcome, Invalid):
            return self.reject("create", outcome, self.messages.invalid_data)
        return await self._save(outcome.value)

    async def find(self, raw_id: Any) -> Envelope:
        outcome = await self.lookup(raw_id)
        if isinstance(outcome, Invalid):
            return self.reject("find", outcome, self.messages.invalid_identifier)
        return ok(outcome.value)

    async def modify(self, body: Any, raw_id: Any = None) -> Envelope:
        """Replace a stored record. ``raw_id`` is the identifier from the URL, if any."""
        outcome = bind_identifier(body, raw_id)
        if isinstance(outcome, Valid):
            outcome = await self.validate_existing(outcome.value)
        if isinstance(outcome, Invalid):
            return self.reject("modify", outcome, self.messages.invalid_data)
        return await self._save(outcome.value)

    async def delete(self, raw_id: Any) -> Envelope:
        outcome = await self.existing_id(raw_id)
        if isinstance(outcome, Invalid):
            return self.reject("delete", outcome, self.messages.invalid_identifier)

        try:
            await self.repository.kill(outcome.value)
        except StorageError as e:
            logger.warning(f"{self.resource_name} delete failed: {e}")
            return internal_error(self.messages.delete_failed)
        return ok()

    async def _save(self, record: RecordT) -> Envelope:
        try:
            await self.repository.save(record)
        except StorageError as e:
            logger.warning(f"{self.resource_name} save failed: {e}")
            return internal_error(self.messages.save_failed)
        return ok()
