"""Shared schema base and list payloads."""

from __future__ import annotations

from typing import Generic
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic.alias_generators import to_camel

ItemT = TypeVar("ItemT")


class CamelModel(BaseModel):
    """Base model exposing camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(CamelModel):
    page_num: int
    page_size: int
    total: int
    total_page: int


class ListData(CamelModel, Generic[ItemT]):
    """One page of rows plus its pagination block."""

    items: list[ItemT] = Field(alias="list")
    pagination: Pagination
