"""Pydantic schemas for catalog documents, cart state and API payloads."""

from antiquebooks.schemas.cart import Cart, CartLine
from antiquebooks.schemas.catalog import Category, Item, ItemStatus
from antiquebooks.schemas.common import ErrorDetail, ErrorResponse, error_payload
from antiquebooks.schemas.query import QuerySpec, SortKey
from antiquebooks.schemas.views import (
    AddToCartRequest,
    CartLineOut,
    CartLineView,
    CartPageResponse,
    CartSummary,
    CategoryOption,
    CollectionQueryEcho,
    CollectionResponse,
    HomeResponse,
    ItemCard,
    ItemDetail,
    ItemResponse,
    ShopResponse,
)

__all__ = [
    "AddToCartRequest",
    "Cart",
    "CartLine",
    "CartLineOut",
    "CartLineView",
    "CartPageResponse",
    "CartSummary",
    "Category",
    "CategoryOption",
    "CollectionQueryEcho",
    "CollectionResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HomeResponse",
    "Item",
    "ItemCard",
    "ItemDetail",
    "ItemResponse",
    "ItemStatus",
    "QuerySpec",
    "ShopResponse",
    "SortKey",
    "error_payload",
]
