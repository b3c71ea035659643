"""Shared schema definitions."""

from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Largest identifier an INTEGER primary key can hold
MAX_ID = 2**31 - 1


class ApiModel(BaseModel):
    """Base for wire schemas: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ListResult(ApiModel, Generic[T]):
    """One page of records plus the totals needed to page through the rest."""

    items: Sequence[T]
    total: int = Field(..., ge=0)
    pages: int = Field(..., ge=0)
