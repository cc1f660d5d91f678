"""Schemas for the UI bootstrap endpoints (/v1/ui/*) and cart API (/v1/cart)."""

from pydantic import BaseModel, Field


class ItemCard(BaseModel):
    """Display-ready record for one item in a grid."""

    item_id: str = Field(alias="itemId")
    display_title: str = Field(alias="displayTitle")
    display_price: str = Field(alias="displayPrice")
    image_url: str = Field(alias="imageUrl")
    detail_link: str = Field(alias="detailLink")
    view_label: str = Field(alias="viewLabel")
    sold: bool = False

    model_config = {"populate_by_name": True}


class ItemDetail(BaseModel):
    """Display-ready record for the item page."""

    item_id: str = Field(alias="itemId")
    display_title: str = Field(alias="displayTitle")
    author: str
    year: int | None = None
    display_price: str = Field(alias="displayPrice")
    status_label: str = Field(alias="statusLabel")
    description_html: str = Field(alias="descriptionHtml")
    images: list[str] = Field(default_factory=list)
    can_add_to_cart: bool = Field(alias="canAddToCart")
    inquire_link: str = Field(alias="inquireLink")

    model_config = {"populate_by_name": True}


class CategoryOption(BaseModel):
    """A localized option for the category select."""

    id: str
    title: str


class HomeResponse(BaseModel):
    """Response payload for GET /v1/ui/home."""

    locale: str
    featured: list[ItemCard] = Field(default_factory=list)
    cart_count: int = Field(alias="cartCount", ge=0)

    model_config = {"populate_by_name": True}


class CollectionQueryEcho(BaseModel):
    """The query inputs the collection page was computed for."""

    category: str | None = None
    text: str | None = None
    sort: str


class CollectionResponse(BaseModel):
    """Response payload for GET /v1/ui/collection."""

    locale: str
    categories: list[CategoryOption] = Field(default_factory=list)
    query: CollectionQueryEcho
    items: list[ItemCard] = Field(default_factory=list)
    match_count: int = Field(alias="matchCount", ge=0)

    model_config = {"populate_by_name": True}


class ItemResponse(BaseModel):
    """Response payload for GET /v1/ui/items/{item_id}."""

    locale: str
    item: ItemDetail
    cart_count: int = Field(alias="cartCount", ge=0)

    model_config = {"populate_by_name": True}


class ShopResponse(BaseModel):
    """Response payload for GET /v1/ui/shop."""

    locale: str
    items: list[ItemCard] = Field(default_factory=list)
    cart_count: int = Field(alias="cartCount", ge=0)

    model_config = {"populate_by_name": True}


class CartLineView(BaseModel):
    """A cart row on the cart page."""

    item_id: str = Field(alias="itemId")
    display_title: str = Field(alias="displayTitle")
    unit_price: str = Field(alias="unitPrice")
    qty: int = Field(ge=1)
    line_total: str = Field(alias="lineTotal")
    detail_link: str = Field(alias="detailLink")

    model_config = {"populate_by_name": True}


class CartPageResponse(BaseModel):
    """Response payload for GET /v1/ui/cart."""

    locale: str
    lines: list[CartLineView] = Field(default_factory=list)
    total_quantity: int = Field(alias="totalQuantity", ge=0)
    total_label: str = Field(alias="totalLabel")
    display_total: str = Field(alias="displayTotal")
    remove_label: str = Field(alias="removeLabel")
    empty_message: str | None = Field(alias="emptyMessage", default=None)

    model_config = {"populate_by_name": True}


class AddToCartRequest(BaseModel):
    """Request body for POST /v1/cart/items."""

    item_id: str = Field(alias="itemId", min_length=1, max_length=200)
    qty: int = Field(default=1, ge=1, le=10000)

    model_config = {"populate_by_name": True}


class CartLineOut(BaseModel):
    id: str
    qty: int


class CartSummary(BaseModel):
    """Response payload for the /v1/cart endpoints."""

    lines: list[CartLineOut] = Field(default_factory=list)
    total_quantity: int = Field(alias="totalQuantity", ge=0)
    total_price: float = Field(alias="totalPrice", ge=0)
    message: str | None = None

    model_config = {"populate_by_name": True}
