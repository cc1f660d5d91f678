"""Cart endpoints.

GET    /v1/cart                  - lines + totals
POST   /v1/cart/items            - add an item (rejects unknown or sold items)
DELETE /v1/cart/items/{item_id}  - remove an item's line
DELETE /v1/cart                  - clear the cart

Availability gating lives here, not in CartStore: the store is a plain quantity
ledger.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path

from antiquebooks.schemas import AddToCartRequest, Cart, CartLineOut, CartSummary, error_payload
from antiquebooks.routes.deps import get_cart_store, get_catalog, get_locales, get_translations
from antiquebooks.services.cart import CartStore, cart_total_price
from antiquebooks.services.catalog import CatalogStore
from antiquebooks.services.i18n import Translations
from antiquebooks.services.locale import LocaleChain

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


def _summary(cart: Cart, catalog: CatalogStore, message: str | None = None) -> CartSummary:
    return CartSummary(
        lines=[CartLineOut(id=line.id, qty=line.qty) for line in cart.lines],
        total_quantity=cart.total_quantity,
        total_price=round(cart_total_price(cart, catalog), 2),
        message=message,
    )


@router.get("", response_model=CartSummary)
async def get_cart(
    cart_store: CartStore = Depends(get_cart_store),
    catalog: CatalogStore = Depends(get_catalog),
) -> CartSummary:
    return _summary(await cart_store.load(), catalog)


@router.post("/items", response_model=CartSummary, status_code=201)
async def add_cart_item(
    body: AddToCartRequest,
    cart_store: CartStore = Depends(get_cart_store),
    catalog: CatalogStore = Depends(get_catalog),
    translations: Translations = Depends(get_translations),
    locales: LocaleChain = Depends(get_locales),
) -> CartSummary:
    """Add an available item to the cart.

    Raises:
        404 ITEM_NOT_FOUND if the id is not in the catalog.
        409 ITEM_NOT_AVAILABLE if the item is sold.
    """
    item = catalog.get_item(body.item_id)
    if item is None:
        raise HTTPException(
            status_code=404,
            detail=error_payload("ITEM_NOT_FOUND", f"Item {body.item_id} not found", {"itemId": body.item_id}),
        )
    if not item.is_available:
        raise HTTPException(
            status_code=409,
            detail=error_payload(
                "ITEM_NOT_AVAILABLE",
                translations.label("not_available", locales),
                {"itemId": item.id, "status": item.status.value},
            ),
        )

    cart = await cart_store.add(item.id, body.qty)
    logger.info(f"Cart {cart_store.key}: +{body.qty} x {item.id} (total qty {cart.total_quantity})")
    return _summary(cart, catalog, translations.label("added_to_cart", locales))


@router.delete("/items/{item_id}", response_model=CartSummary)
async def remove_cart_item(
    item_id: str = Path(description="Item id to remove", min_length=1, max_length=200),
    cart_store: CartStore = Depends(get_cart_store),
    catalog: CatalogStore = Depends(get_catalog),
) -> CartSummary:
    """Remove the line for an item (no-op if absent)."""
    return _summary(await cart_store.remove(item_id), catalog)


@router.delete("", response_model=CartSummary)
async def clear_cart(
    cart_store: CartStore = Depends(get_cart_store),
    catalog: CatalogStore = Depends(get_catalog),
) -> CartSummary:
    return _summary(await cart_store.clear(), catalog)
