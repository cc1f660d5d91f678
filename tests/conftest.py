"""Shared fixtures: a small catalog, translations and an in-memory cart backend."""

import pytest
from httpx import ASGITransport, AsyncClient

from antiquebooks.schemas import Category, Item
from antiquebooks.services.catalog import CatalogStore
from antiquebooks.services.i18n import Translations
from antiquebooks.stores.memory import InMemoryKeyValueStore

TEST_CART_ID = "testcart0001"


def make_item(item_id: str, price: float, category: str = "books", **kwargs) -> Item:
    kwargs.setdefault("title", {"en": f"Item {item_id}"})
    return Item(id=item_id, price=price, category=category, **kwargs)


@pytest.fixture
def items() -> list[Item]:
    return [
        make_item("A", 10, "books", title={"en": "Old Atlas", "sk": "Starý atlas"}, author="Homann", year=1790, featured=True),
        make_item("B", 25, "maps", title={"en": "Town Map", "de": "Stadtplan"}, year=1735),
        make_item("C", 10, "books", title={"en": "Herbal"}, author="Mattioli", status="sold"),
        make_item("D", 5, "prints", title={"sk": "Pohľad na Dunaj"}, images=("d1.jpg", "d2.jpg")),
    ]


@pytest.fixture
def categories() -> list[Category]:
    return [
        Category(id="books", title={"en": "Books", "sk": "Knihy"}),
        Category(id="maps", title={"en": "Maps"}),
        Category(id="prints", title={}),
    ]


@pytest.fixture
def catalog(items: list[Item], categories: list[Category]) -> CatalogStore:
    return CatalogStore(items, categories)


@pytest.fixture
def translations() -> Translations:
    return Translations(
        {
            "en": {
                "view": "View",
                "status_sold": "Sold",
                "status_available": "Available",
                "not_available": "Not available",
                "added_to_cart": "Added to cart",
                "cart_empty": "Your cart is empty",
                "total": "Total",
            },
            "sk": {"view": "Zobraziť", "status_sold": "Predané", "total": "Spolu"},
            "de": {},
        }
    )


@pytest.fixture
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
async def client(catalog: CatalogStore, translations: Translations, kv: InMemoryKeyValueStore):
    """Test client with documents and cart storage wired onto app.state (no lifespan)."""
    from antiquebooks.main import app

    app.state.catalog = catalog
    app.state.translations = translations
    app.state.kv_store = kv
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"Cookie": f"cart_id={TEST_CART_ID}"},
    ) as ac:
        yield ac
