"""Collection query pipeline.

Query logic:
1. Category filter (exact match), if set
2. Text filter: case-insensitive substring of the localized title OR the author
3. Stable sort, if requested:
   - price_asc:  price ASC
   - price_desc: price DESC
   - date_desc:  year DESC (missing year counts as 0)

Filtering always precedes sorting. The function is pure and re-run in full on
every input change (search-as-you-type), which is fine for small catalogs.
"""

from collections.abc import Iterable, Sequence

from antiquebooks.schemas import Item, QuerySpec, SortKey
from antiquebooks.services.locale import resolve_text


def _matches_text(item: Item, needle: str, locales: Sequence[str]) -> bool:
    title = resolve_text(item.title, locales).casefold()
    author = (item.author or "").casefold()
    return needle in title or needle in author


def query(items: Iterable[Item], spec: QuerySpec, locales: Sequence[str]) -> list[Item]:
    """Filter and sort catalog items.

    Args:
        items: Catalog items in natural (document) order.
        spec: Category filter, text query and sort key.
        locales: Locale fallback chain used to resolve titles, active locale first.

    Returns:
        Matching items; catalog order unless a sort key is given.
    """
    result = list(items)

    if spec.category:
        result = [item for item in result if item.category == spec.category]

    if spec.text:
        needle = spec.text.casefold()
        result = [item for item in result if _matches_text(item, needle, locales)]

    # sorted() is stable, including with reverse=True
    if spec.sort == SortKey.PRICE_ASC:
        result = sorted(result, key=lambda item: item.price)
    elif spec.sort == SortKey.PRICE_DESC:
        result = sorted(result, key=lambda item: item.price, reverse=True)
    elif spec.sort == SortKey.DATE_DESC:
        result = sorted(result, key=lambda item: item.year or 0, reverse=True)

    return result
