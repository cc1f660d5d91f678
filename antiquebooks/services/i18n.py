"""Translation tables for UI labels."""

from collections.abc import Mapping, Sequence

# Keys the front end always needs; missing entries fall back to the humanized key.
REQUIRED_LABELS = (
    "view",
    "added_to_cart",
    "status_sold",
    "status_available",
    "not_available",
    "cart_empty",
    "remove",
    "total",
)


def humanize_key(key: str) -> str:
    return key.replace("_", " ")


class Translations:
    """Per-locale mapping from label key to localized string/HTML fragment."""

    def __init__(self, tables: Mapping[str, Mapping[str, str]]) -> None:
        self._tables = {locale: dict(table) for locale, table in tables.items()}

    @property
    def locales(self) -> list[str]:
        return list(self._tables)

    def label(self, key: str, locales: Sequence[str]) -> str:
        """Resolve `key` through the locale chain.

        Unknown keys resolve to their humanized form ("cart_empty" -> "cart empty").
        """
        for locale in locales:
            value = self._tables.get(locale, {}).get(key)
            if value:
                return value
        return humanize_key(key)

    def missing_labels(self, locale: str) -> list[str]:
        table = self._tables.get(locale, {})
        return [key for key in REQUIRED_LABELS if not table.get(key)]
