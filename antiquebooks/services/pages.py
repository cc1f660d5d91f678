"""Per-page view builders.

Each builder takes a fully loaded `PageContext` (catalog, translations, locale
chain) and returns the payload for one page. Builders are pure; routes load the
cart and pass a snapshot in.
"""

from dataclasses import dataclass

from antiquebooks.schemas import (
    Cart,
    CartLineView,
    CartPageResponse,
    CategoryOption,
    CollectionQueryEcho,
    CollectionResponse,
    HomeResponse,
    ItemResponse,
    QuerySpec,
    ShopResponse,
)
from antiquebooks.services.cart import cart_total_price
from antiquebooks.services.catalog import CatalogStore
from antiquebooks.services.formatting import format_currency
from antiquebooks.services.i18n import Translations
from antiquebooks.services.locale import LocaleChain, resolve_text
from antiquebooks.services.projection import (
    DEFAULT_PLACEHOLDER_IMAGE,
    detail_link,
    project,
    project_detail,
)
from antiquebooks.services.query import query


@dataclass(frozen=True)
class PageContext:
    catalog: CatalogStore
    translations: Translations
    locales: LocaleChain
    placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE
    cart_currency: str = "EUR"

    @property
    def locale(self) -> str:
        return self.locales[0]


def build_home(ctx: PageContext, cart: Cart) -> HomeResponse:
    """Homepage: featured items."""
    return HomeResponse(
        locale=ctx.locale,
        featured=[
            project(item, ctx.locales, ctx.translations, ctx.placeholder_image)
            for item in ctx.catalog.featured()
        ],
        cart_count=cart.total_quantity,
    )


def build_collection(ctx: PageContext, spec: QuerySpec) -> CollectionResponse:
    """Collection page: category options plus the filtered/sorted grid."""
    matches = query(ctx.catalog.items, spec, ctx.locales)
    return CollectionResponse(
        locale=ctx.locale,
        categories=[
            CategoryOption(id=c.id, title=resolve_text(c.title, ctx.locales) or c.id)
            for c in ctx.catalog.categories
        ],
        query=CollectionQueryEcho(category=spec.category, text=spec.text, sort=spec.sort.value),
        items=[project(item, ctx.locales, ctx.translations, ctx.placeholder_image) for item in matches],
        match_count=len(matches),
    )


def build_item(ctx: PageContext, item_id: str, cart: Cart) -> ItemResponse | None:
    """Item page, or None if the id is not in the catalog."""
    item = ctx.catalog.get_item(item_id)
    if item is None:
        return None
    return ItemResponse(
        locale=ctx.locale,
        item=project_detail(item, ctx.locales, ctx.translations),
        cart_count=cart.total_quantity,
    )


def build_shop(ctx: PageContext, cart: Cart) -> ShopResponse:
    """Shop page: every item, sold ones included."""
    return ShopResponse(
        locale=ctx.locale,
        items=[
            project(item, ctx.locales, ctx.translations, ctx.placeholder_image)
            for item in ctx.catalog.items
        ],
        cart_count=cart.total_quantity,
    )


def build_cart_page(ctx: PageContext, cart: Cart) -> CartPageResponse:
    """Cart page: one row per line that still resolves, plus the total."""
    rows: list[CartLineView] = []
    for line in cart.lines:
        item = ctx.catalog.get_item(line.id)
        if item is None:
            continue
        rows.append(
            CartLineView(
                item_id=item.id,
                display_title=resolve_text(item.title, ctx.locales),
                unit_price=format_currency(item.price, item.currency, ctx.locale),
                qty=line.qty,
                line_total=format_currency(item.price * line.qty, item.currency, ctx.locale),
                detail_link=detail_link(item.id, ctx.locale),
            )
        )

    total = cart_total_price(cart, ctx.catalog)
    return CartPageResponse(
        locale=ctx.locale,
        lines=rows,
        total_quantity=cart.total_quantity,
        total_label=ctx.translations.label("total", ctx.locales),
        display_total=format_currency(total, ctx.cart_currency, ctx.locale),
        remove_label=ctx.translations.label("remove", ctx.locales),
        empty_message=None if rows else ctx.translations.label("cart_empty", ctx.locales),
    )
