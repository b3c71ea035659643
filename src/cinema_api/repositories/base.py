"""Data-access contract shared by the resource handlers."""

import logging
from collections.abc import Sequence
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_api.models import Base

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
RowT = TypeVar("RowT", bound=Base)


class StorageError(Exception):
    """Raised when the storage backend cannot complete an operation."""


class Repository(Protocol[RecordT]):
    """
    Storage operations a resource handler relies on.

    ``scope`` narrows count/list to the records of a parent resource
    (schedules of one movie); resources without a parent ignore it.
    """

    async def count(self, scope: int | None = None) -> int: ...

    async def list(
        self, offset: int, limit: int, scope: int | None = None
    ) -> Sequence[RecordT]: ...

    async def find(self, id: int) -> RecordT | None: ...

    async def exists(self, id: int) -> bool: ...

    async def save(self, record: RecordT) -> RecordT: ...

    async def kill(self, id: int) -> None: ...


class SqlAlchemyRepository(Generic[RowT, RecordT]):
    """
    Repository backed by an async SQLAlchemy session.

    Subclasses bind the ORM model, the wire schema and the listing order.
    Rows are converted to schema records on the way out so callers never
    hold ORM objects. A failed operation rolls the session back before
    StorageError is raised, so the request can still commit cleanly.
    """

    row_model: type[RowT]
    record_model: type[RecordT]
    resource_name: str = "record"

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _ordering(self) -> tuple[Any, ...]:
        return (self.row_model.id,)

    def _apply_scope(self, stmt: Select, scope: int | None) -> Select:
        return stmt

    async def _failure(self, operation: str, exc: Exception) -> StorageError:
        logger.error(f"Failed to {operation} {self.resource_name}: {exc}", exc_info=True)
        await self.db.rollback()
        return StorageError(f"Could not {operation} {self.resource_name}")

    async def count(self, scope: int | None = None) -> int:
        stmt = self._apply_scope(select(func.count()).select_from(self.row_model), scope)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise await self._failure("count", e) from e
        return result.scalar_one()

    async def list(
        self, offset: int, limit: int, scope: int | None = None
    ) -> Sequence[RecordT]:
        stmt = (
            self._apply_scope(select(self.row_model), scope)
            .order_by(*self._ordering())
            .offset(offset)
            .limit(limit)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise await self._failure("list", e) from e
        return [self.record_model.model_validate(row) for row in result.scalars().all()]

    async def find(self, id: int) -> RecordT | None:
        try:
            row = await self.db.get(self.row_model, id)
        except SQLAlchemyError as e:
            raise await self._failure("find", e) from e
        if row is None:
            return None
        return self.record_model.model_validate(row)

    async def exists(self, id: int) -> bool:
        stmt = select(self.row_model.id).where(self.row_model.id == id).limit(1)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise await self._failure("look up", e) from e
        return result.scalar_one_or_none() is not None

    async def save(self, record: RecordT) -> RecordT:
        """
        Insert the record when it has no id, otherwise replace every column
        of the stored row.

        Returns:
            The record with its storage-assigned id
        """
        values = record.model_dump(exclude={"id"})
        try:
            if record.id:
                row = await self.db.get(self.row_model, record.id)
                if row is None:
                    raise StorageError(f"{self.resource_name} {record.id} does not exist")
                for field, value in values.items():
                    setattr(row, field, value)
            else:
                row = self.row_model(**values)
                self.db.add(row)
            await self.db.flush()
        except SQLAlchemyError as e:
            raise await self._failure("save", e) from e

        logger.info(f"Saved {self.resource_name} {row.id}")
        return record.model_copy(update={"id": row.id})

    async def kill(self, id: int) -> None:
        try:
            row = await self.db.get(self.row_model, id)
            if row is None:
                raise StorageError(f"{self.resource_name} {id} does not exist")
            await self.db.delete(row)
            await self.db.flush()
        except SQLAlchemyError as e:
            raise await self._failure("delete", e) from e

        logger.info(f"Deleted {self.resource_name} {id}")
