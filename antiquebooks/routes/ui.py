"""UI bootstrap endpoints.

GET /v1/ui/home             - featured items
GET /v1/ui/collection       - category/search/sort driven grid
GET /v1/ui/items/{item_id}  - item detail
GET /v1/ui/shop             - every item
GET /v1/ui/cart             - cart page

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import ValidationError

from antiquebooks.schemas import (
    CartPageResponse,
    CollectionResponse,
    HomeResponse,
    ItemResponse,
    QuerySpec,
    ShopResponse,
    SortKey,
    error_payload,
)
from antiquebooks.routes.deps import get_cart_store, get_page_context
from antiquebooks.services.cart import CartStore
from antiquebooks.services.pages import (
    PageContext,
    build_cart_page,
    build_collection,
    build_home,
    build_item,
    build_shop,
)

router = APIRouter()


@router.get("/home", response_model=HomeResponse)
async def get_home(
    ctx: PageContext = Depends(get_page_context),
    cart_store: CartStore = Depends(get_cart_store),
) -> HomeResponse:
    """Get homepage data (featured items + cart badge)."""
    return build_home(ctx, await cart_store.load())


@router.get("/collection", response_model=CollectionResponse)
async def get_collection(
    category: str | None = Query(
        default=None,
        description="Category id filter (exact match)",
        max_length=100,
    ),
    q: str | None = Query(
        default=None,
        description="Case-insensitive search over title and author",
        max_length=200,
    ),
    sort: str | None = Query(
        default=None,
        description="Sort order: none, price_asc, price_desc, date_desc (empty means none)",
        max_length=20,
    ),
    ctx: PageContext = Depends(get_page_context),
) -> CollectionResponse:
    """Run the collection query.

    Called on every filter change (search-as-you-type); each call is independent.
    """
    try:
        spec = QuerySpec(category=category, text=q, sort=sort)
    except ValidationError:
        raise HTTPException(
            status_code=422,
            detail=error_payload(
                "INVALID_SORT",
                f"Unsupported sort: {sort}",
                {"allowed": [key.value for key in SortKey]},
            ),
        )
    return build_collection(ctx, spec)


@router.get("/items/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: str = Path(description="Catalog item id", min_length=1, max_length=200),
    ctx: PageContext = Depends(get_page_context),
    cart_store: CartStore = Depends(get_cart_store),
) -> ItemResponse:
    """Get item detail data."""
    page = build_item(ctx, item_id, await cart_store.load())
    if page is None:
        raise HTTPException(
            status_code=404,
            detail=error_payload("ITEM_NOT_FOUND", f"Item {item_id} not found", {"itemId": item_id}),
        )
    return page


@router.get("/shop", response_model=ShopResponse)
async def get_shop(
    ctx: PageContext = Depends(get_page_context),
    cart_store: CartStore = Depends(get_cart_store),
) -> ShopResponse:
    return build_shop(ctx, await cart_store.load())


@router.get("/cart", response_model=CartPageResponse)
async def get_cart_page(
    ctx: PageContext = Depends(get_page_context),
    cart_store: CartStore = Depends(get_cart_store),
) -> CartPageResponse:
    """Get cart page data: rows, formatted total, localized labels."""
    return build_cart_page(ctx, await cart_store.load())
