"""Cart store: a persisted quantity ledger (item id -> qty).

Persisted form (one value per cart key):
    [{"id": "atlas-1790", "qty": 2}, ...]

Failure policy:
- Missing, unparsable or unreadable state loads as an empty cart (logged)
- Writes are best-effort: failures are logged and swallowed
- Lines referencing items no longer in the catalog are skipped in totals

The store does not check item availability; callers gate that.
"""

from __future__ import annotations

import asyncio
import json
import logging
from weakref import WeakValueDictionary

from pydantic import ValidationError

from antiquebooks.schemas import Cart, CartLine
from antiquebooks.services.catalog import CatalogStore
from antiquebooks.stores.kv import KeyValueStore, StorageError

logger = logging.getLogger("uvicorn.error")

DEFAULT_CART_KEY = "antiquebooks_cart_v1"

# One lock per storage key while in use, shared by every CartStore bound to that key.
_key_locks: WeakValueDictionary[str, asyncio.Lock] = WeakValueDictionary()


def _lock_for(key: str) -> asyncio.Lock:
    lock = _key_locks.get(key)
    if lock is None:
        lock = asyncio.Lock()
        _key_locks[key] = lock
    return lock


def cart_key(namespace: str, owner: str | None = None) -> str:
    """Storage key for a cart: the namespace, optionally scoped to an owner id."""
    return f"{namespace}:{owner}" if owner else namespace


def decode_cart(raw: str | None) -> Cart:
    """Decode a persisted cart, degrading to an empty cart on bad input.

    Malformed entries and non-positive quantities are dropped; repeated ids are
    merged so the decoded cart keeps one line per item.
    """
    if raw is None:
        return Cart()
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning(f"Persisted cart is not valid JSON, treating as empty: {e}")
        return Cart()
    if not isinstance(payload, list):
        logger.warning(f"Persisted cart is not a list ({type(payload).__name__}), treating as empty")
        return Cart()

    merged: dict[str, int] = {}
    skipped = 0
    for entry in payload:
        try:
            line = CartLine.model_validate(entry)
        except ValidationError:
            skipped += 1
            continue
        merged[line.id] = merged.get(line.id, 0) + line.qty
    if skipped:
        logger.warning(f"Skipped {skipped} malformed cart line(s)")
    return Cart(lines=[CartLine(id=item_id, qty=qty) for item_id, qty in merged.items()])


def encode_cart(cart: Cart) -> str:
    return json.dumps(
        [{"id": line.id, "qty": line.qty} for line in cart.lines],
        separators=(",", ":"),
    )


class CartStore:
    """Cart bound to one storage key of an injected key-value store."""

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_CART_KEY) -> None:
        self._kv = kv
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    async def load(self) -> Cart:
        """Read the persisted cart; never raises."""
        try:
            raw = await self._kv.get(self._key)
        except StorageError as e:
            logger.warning(f"Cart read failed for {self._key}, treating as empty: {e}")
            return Cart()
        return decode_cart(raw)

    async def save(self, cart: Cart) -> None:
        """Persist the cart (best effort)."""
        try:
            await self._kv.set(self._key, encode_cart(cart))
        except StorageError as e:
            logger.warning(f"Cart write failed for {self._key}: {e}")

    async def add(self, item_id: str, qty: int = 1) -> Cart:
        """Add `qty` of `item_id`, merging into an existing line.

        A resulting quantity <= 0 removes the line.
        """
        async with _lock_for(self._key):
            cart = await self.load()
            lines = list(cart.lines)
            existing = cart.get(item_id)
            if existing is not None:
                new_qty = existing.qty + qty
                index = lines.index(existing)
                if new_qty > 0:
                    lines[index] = CartLine(id=item_id, qty=new_qty)
                else:
                    del lines[index]
            elif qty > 0:
                lines.append(CartLine(id=item_id, qty=qty))
            updated = Cart(lines=lines)
            await self.save(updated)
            return updated

    async def remove(self, item_id: str) -> Cart:
        """Drop the line for `item_id`; no-op if there is none."""
        async with _lock_for(self._key):
            cart = await self.load()
            updated = Cart(lines=[line for line in cart.lines if line.id != item_id])
            await self.save(updated)
            return updated

    async def clear(self) -> Cart:
        """Delete the persisted cart (best effort)."""
        async with _lock_for(self._key):
            try:
                await self._kv.delete(self._key)
            except StorageError as e:
                logger.warning(f"Cart delete failed for {self._key}: {e}")
            return Cart()

    async def total_quantity(self) -> int:
        return (await self.load()).total_quantity

    async def total_price(self, catalog: CatalogStore) -> float:
        return cart_total_price(await self.load(), catalog)


def cart_total_price(cart: Cart, catalog: CatalogStore) -> float:
    """Sum of price * qty over lines that still resolve to catalog items."""
    total = 0.0
    for line in cart.lines:
        item = catalog.get_item(line.id)
        if item is None:
            logger.info(f"Cart line {line.id} no longer in catalog; skipped in total")
            continue
        total += item.price * line.qty
    return total
