"""Item projections: catalog items -> display-ready records.

`locales` is always the explicit fallback chain; its first entry is the active
locale, used for number formatting and links.
"""

from collections.abc import Sequence
from urllib.parse import urlencode

from antiquebooks.schemas import Item, ItemCard, ItemDetail, ItemStatus
from antiquebooks.services.formatting import format_currency
from antiquebooks.services.i18n import Translations
from antiquebooks.services.locale import resolve_text

DEFAULT_PLACEHOLDER_IMAGE = "assets/images/placeholder.jpg"
ITEM_PAGE = "item.html"
CONTACT_PAGE = "contact.html"


def detail_link(item_id: str, locale: str) -> str:
    """Deterministic link to the item page, e.g. item.html?id=atlas-1790&lang=en."""
    return f"{ITEM_PAGE}?{urlencode({'id': item_id, 'lang': locale})}"


def inquire_link(title: str, locale: str) -> str:
    return f"{CONTACT_PAGE}?{urlencode({'subject': f'Inquiry: {title}', 'lang': locale})}"


def display_price(item: Item, locales: Sequence[str], translations: Translations) -> str:
    """Sold items show the localized "sold" label instead of a price."""
    if item.status == ItemStatus.SOLD:
        return translations.label("status_sold", locales)
    return format_currency(item.price, item.currency, locales[0])


def project(
    item: Item,
    locales: Sequence[str],
    translations: Translations,
    placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE,
) -> ItemCard:
    """Project an item into a grid card."""
    return ItemCard(
        item_id=item.id,
        display_title=resolve_text(item.title, locales),
        display_price=display_price(item, locales, translations),
        image_url=item.images[0] if item.images else placeholder_image,
        detail_link=detail_link(item.id, locales[0]),
        view_label=translations.label("view", locales),
        sold=item.status == ItemStatus.SOLD,
    )


def project_detail(item: Item, locales: Sequence[str], translations: Translations) -> ItemDetail:
    """Project an item for its detail page."""
    title = resolve_text(item.title, locales)
    status_key = "status_available" if item.is_available else "status_sold"
    return ItemDetail(
        item_id=item.id,
        display_title=title,
        author=item.author or "",
        year=item.year,
        display_price=display_price(item, locales, translations),
        status_label=translations.label(status_key, locales),
        description_html=resolve_text(item.description, locales),
        images=list(item.images),
        can_add_to_cart=item.is_available,
        inquire_link=inquire_link(title, locales[0]),
    )
