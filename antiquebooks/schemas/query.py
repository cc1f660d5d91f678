"""Schemas for collection queries."""

from enum import Enum

from pydantic import BaseModel, field_validator


class SortKey(str, Enum):
    """Collection sort orders."""

    NONE = "none"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    DATE_DESC = "date_desc"


class QuerySpec(BaseModel):
    """Combined collection inputs: category filter, free-text query, sort key.

    Empty strings (an untouched select or search box) mean "not set".
    """

    category: str | None = None
    text: str | None = None
    sort: SortKey = SortKey.NONE

    @field_validator("category", "text", mode="before")
    @classmethod
    def _blank_to_none(cls, v: object) -> object:
        if isinstance(v, str) and not v:
            return None
        return v

    @field_validator("sort", mode="before")
    @classmethod
    def _blank_sort(cls, v: object) -> object:
        if v is None or v == "":
            return SortKey.NONE
        return v
