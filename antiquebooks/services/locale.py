"""Locale negotiation and localized-field resolution.

The active locale is negotiated at the edge (query param, cookie, Accept-Language)
and turned into an explicit fallback chain, e.g. ("sk", "en"). Everything below
the routes resolves localized fields through that chain only.
"""

from collections.abc import Mapping, Sequence

LocaleChain = tuple[str, ...]


def fallback_chain(locale: str, default: str) -> LocaleChain:
    """Build the ordered chain for `locale`, ending in `default`.

    >>> fallback_chain("sk", "en")
    ('sk', 'en')
    >>> fallback_chain("en", "en")
    ('en',)
    """
    if locale == default:
        return (default,)
    return (locale, default)


def resolve_text(values: Mapping[str, str] | None, locales: Sequence[str]) -> str:
    """Return the first non-empty value for a locale in the chain, else ""."""
    if not values:
        return ""
    for locale in locales:
        value = values.get(locale)
        if value:
            return value
    return ""


def _accept_language_tags(header: str) -> list[str]:
    """Primary subtags from an Accept-Language header, highest q first."""
    weighted: list[tuple[float, int, str]] = []
    for index, part in enumerate(header.split(",")):
        piece = part.strip()
        if not piece:
            continue
        tag, _, params = piece.partition(";")
        q = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                q = float(params[2:])
            except ValueError:
                q = 0.0
        primary = tag.strip().split("-")[0].lower()
        if primary and primary != "*" and q > 0:
            weighted.append((-q, index, primary))
    return [tag for _, _, tag in sorted(weighted)]


def negotiate_locale(
    requested: str | None,
    stored: str | None,
    accept_language: str | None,
    supported: Sequence[str],
    default: str,
) -> str:
    """Pick the active locale.

    Priority:
    1. Explicit `lang` request parameter
    2. Previously chosen locale (cookie)
    3. Accept-Language (first supported primary subtag)
    4. Default locale
    """
    for candidate in (requested, stored):
        if candidate and candidate.lower() in supported:
            return candidate.lower()
    if accept_language:
        for tag in _accept_language_tags(accept_language):
            if tag in supported:
                return tag
    return default
