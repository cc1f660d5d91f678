"""Schemas for the static catalog documents (data/items.json, data/categories.json)."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ItemStatus(str, Enum):
    """Sale status of a catalog item."""

    AVAILABLE = "available"
    SOLD = "sold"


class Category(BaseModel):
    """A collection category."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    title: dict[str, str] = Field(default_factory=dict)


class Item(BaseModel):
    """A single catalog item (book, map, print...).

    `title` and `description` are keyed by locale code.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    title: dict[str, str] = Field(default_factory=dict)
    author: str | None = None
    year: int | None = None
    price: float = Field(ge=0)
    currency: str = Field(default="EUR", min_length=3, max_length=3)
    status: ItemStatus = ItemStatus.AVAILABLE
    category: str = ""
    images: tuple[str, ...] = ()
    featured: bool = False
    description: dict[str, str] = Field(default_factory=dict)

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, v: str) -> str:
        return v.upper()

    @property
    def is_available(self) -> bool:
        return self.status == ItemStatus.AVAILABLE
