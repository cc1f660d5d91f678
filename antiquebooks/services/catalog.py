"""Catalog store: the immutable item and category documents for the process lifetime.

Documents are validated once when the store is built; nothing mutates them
afterwards (models are frozen and the store only hands out tuples).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging
from typing import Any

from pydantic import ValidationError

from antiquebooks.schemas import Category, Item

logger = logging.getLogger("uvicorn.error")


class CatalogError(RuntimeError):
    pass


class CatalogStore:
    """Read-only access to items and categories, in document order."""

    def __init__(self, items: Iterable[Item], categories: Iterable[Category]) -> None:
        self._items: tuple[Item, ...] = tuple(items)
        self._categories: tuple[Category, ...] = tuple(categories)
        self._by_id: dict[str, Item] = {}
        for item in self._items:
            if item.id in self._by_id:
                raise CatalogError(f"Duplicate item id: {item.id}")
            self._by_id[item.id] = item
        self._categories_by_id = {c.id: c for c in self._categories}

    @classmethod
    def from_documents(cls, items: Sequence[Any], categories: Sequence[Any]) -> CatalogStore:
        """Validate raw JSON documents into a store.

        Raises:
            CatalogError: On schema violations or duplicate item ids.
        """
        try:
            parsed_items = [Item.model_validate(raw) for raw in items]
            parsed_categories = [Category.model_validate(raw) for raw in categories]
        except ValidationError as e:
            raise CatalogError(f"Invalid catalog document: {e}") from e
        return cls(parsed_items, parsed_categories)

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    def get_item(self, item_id: str) -> Item | None:
        return self._by_id.get(item_id)

    def get_category(self, category_id: str) -> Category | None:
        return self._categories_by_id.get(category_id)

    def featured(self) -> list[Item]:
        return [item for item in self._items if item.featured]

    def __len__(self) -> int:
        return len(self._items)


def audit_catalog(catalog: CatalogStore, default_locale: str) -> list[str]:
    """Report data problems that do not prevent serving but degrade display.

    Returns:
        Human-readable findings, one per problem.
    """
    findings: list[str] = []
    for item in catalog.items:
        if not item.title.get(default_locale):
            findings.append(f"item {item.id}: no '{default_locale}' title")
        if item.category and catalog.get_category(item.category) is None:
            findings.append(f"item {item.id}: unknown category '{item.category}'")
    for category in catalog.categories:
        if not category.title.get(default_locale):
            findings.append(f"category {category.id}: no '{default_locale}' title")
    return findings
