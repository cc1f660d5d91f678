"""Locale-aware currency formatting.

Symbols follow the usual display forms; separators and symbol placement follow
each locale's conventions:
- en: €1,234.50
- de: 1.234,50 €
- sk: 1 234,50 €  (no-break space as group separator)
"""

from typing import NamedTuple

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CHF": "CHF",
    "CZK": "Kč",
    "PLN": "zł",
    "HUF": "Ft",
}

# No minor units
_ZERO_DECIMAL_CURRENCIES = {"JPY", "KRW", "HUF"}


class NumberConventions(NamedTuple):
    group: str
    decimal: str
    symbol_first: bool


_CONVENTIONS = {
    "en": NumberConventions(group=",", decimal=".", symbol_first=True),
    "de": NumberConventions(group=".", decimal=",", symbol_first=False),
    "sk": NumberConventions(group="\u00a0", decimal=",", symbol_first=False),
    "cs": NumberConventions(group="\u00a0", decimal=",", symbol_first=False),
    "fr": NumberConventions(group="\u00a0", decimal=",", symbol_first=False),
}


def conventions_for(locale: str) -> NumberConventions:
    primary = locale.split("-")[0].lower()
    return _CONVENTIONS.get(primary, _CONVENTIONS["en"])


def format_currency(amount: float, currency: str, locale: str) -> str:
    """Format `amount` in `currency` using `locale` number conventions.

    >>> format_currency(1234.5, "EUR", "en")
    '€1,234.50'
    >>> format_currency(1234.5, "EUR", "de")
    '1.234,50 €'
    """
    currency = currency.upper()
    conv = conventions_for(locale)
    decimals = 0 if currency in _ZERO_DECIMAL_CURRENCIES else 2

    # Format with placeholder separators, then swap in the locale's.
    raw = f"{abs(amount):,.{decimals}f}"
    number = raw.replace(",", "\x00").replace(".", conv.decimal).replace("\x00", conv.group)
    sign = "-" if amount < 0 else ""

    symbol = _CURRENCY_SYMBOLS.get(currency, currency)
    if conv.symbol_first:
        # Alphabetic symbols read better spaced: "CHF 10.00"
        spacer = " " if symbol.isalpha() else ""
        return f"{sign}{symbol}{spacer}{number}"
    return f"{sign}{number} {symbol}"
