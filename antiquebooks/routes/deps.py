"""Request dependencies: loaded documents, locale chain, cart binding.

Catalog, translations and the key-value store live on `app.state`; they are
populated once in the app lifespan (or directly by tests).
"""

import re
from uuid import uuid4

from fastapi import Depends, Query, Request, Response

from antiquebooks.services.cart import CartStore, cart_key
from antiquebooks.services.catalog import CatalogStore
from antiquebooks.services.i18n import Translations
from antiquebooks.services.locale import LocaleChain, fallback_chain, negotiate_locale
from antiquebooks.services.pages import PageContext
from antiquebooks.settings import get_settings
from antiquebooks.stores.kv import KeyValueStore

LANG_COOKIE = "lang"
CART_COOKIE = "cart_id"
COOKIE_MAX_AGE = 365 * 24 * 3600

_CART_ID_RE = re.compile(r"^[a-zA-Z0-9_-]{8,64}$")


def get_catalog(request: Request) -> CatalogStore:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise RuntimeError("Catalog not loaded")
    return catalog


def get_translations(request: Request) -> Translations:
    translations = getattr(request.app.state, "translations", None)
    if translations is None:
        raise RuntimeError("Translations not loaded")
    return translations


def get_kv_store(request: Request) -> KeyValueStore:
    kv = getattr(request.app.state, "kv_store", None)
    if kv is None:
        raise RuntimeError("Cart storage not initialized")
    return kv


def get_locales(
    request: Request,
    response: Response,
    lang: str | None = Query(
        default=None,
        description="Requested locale; remembered in a cookie when supported",
        max_length=35,
        examples=["en", "sk", "de"],
    ),
) -> LocaleChain:
    """Negotiate the active locale and return its fallback chain."""
    settings = get_settings()
    locale = negotiate_locale(
        requested=lang,
        stored=request.cookies.get(LANG_COOKIE),
        accept_language=request.headers.get("accept-language"),
        supported=settings.supported_locales,
        default=settings.default_locale,
    )
    if lang and lang.lower() == locale:
        response.set_cookie(LANG_COOKIE, locale, max_age=COOKIE_MAX_AGE, samesite="lax")
    return fallback_chain(locale, settings.default_locale)


def get_page_context(
    catalog: CatalogStore = Depends(get_catalog),
    translations: Translations = Depends(get_translations),
    locales: LocaleChain = Depends(get_locales),
) -> PageContext:
    settings = get_settings()
    return PageContext(
        catalog=catalog,
        translations=translations,
        locales=locales,
        placeholder_image=settings.placeholder_image,
        cart_currency=settings.cart_currency,
    )


def get_cart_store(
    request: Request,
    response: Response,
    kv: KeyValueStore = Depends(get_kv_store),
) -> CartStore:
    """Bind a CartStore to the caller's cart, issuing a cart cookie on first use."""
    cart_id = request.cookies.get(CART_COOKIE)
    if not cart_id or not _CART_ID_RE.match(cart_id):
        cart_id = uuid4().hex
        response.set_cookie(CART_COOKIE, cart_id, max_age=COOKIE_MAX_AGE, httponly=True, samesite="lax")
    return CartStore(kv, cart_key(get_settings().cart_namespace, cart_id))
