"""Schemas for the persisted cart."""

from pydantic import BaseModel, Field


class CartLine(BaseModel):
    """One (item id, quantity) pair in the cart."""

    id: str = Field(min_length=1)
    qty: int = Field(ge=1)


class Cart(BaseModel):
    """Ordered cart lines, at most one line per item id.

    Only `CartStore` mutates carts; everything else treats them as snapshots.
    """

    lines: list[CartLine] = Field(default_factory=list)

    def get(self, item_id: str) -> CartLine | None:
        return next((line for line in self.lines if line.id == item_id), None)

    @property
    def total_quantity(self) -> int:
        return sum(line.qty for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines
